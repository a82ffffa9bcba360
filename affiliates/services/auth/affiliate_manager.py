"""
Auth Service - Affiliate Manager.

This module handles affiliate account operations:
- Registration (pending approval)
- Status changes (approval, suspension)
"""

import random

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.config.constants import AFFILIATE_ID_MAX_ATTEMPTS
from affiliates.config.settings import settings
from affiliates.config.tiers import DEFAULT_TIER
from affiliates.models.affiliate import Affiliate
from affiliates.models.enums import AffiliateStatus
from affiliates.repositories.affiliate_repository import AffiliateRepository
from affiliates.services.notification import (
    Notifier,
    build_application_email,
)
from affiliates.utils.exceptions import (
    DuplicateEmail,
    NotFound,
    PersistenceFailure,
    ValidationFailure,
)
from affiliates.utils.security import mask_email
from affiliates.validators import (
    validate_email,
    validate_name,
    validate_password,
)

from .crypto import generate_affiliate_id, hash_password


class AffiliateManager:
    """Manages affiliate account operations."""

    def __init__(
        self,
        session: AsyncSession,
        affiliate_repo: AffiliateRepository,
        notifier: Notifier | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize affiliate manager.

        Args:
            session: Database session
            affiliate_repo: Affiliate repository
            notifier: Email notifier (optional)
            rng: Random source for affiliate IDs
        """
        self.session = session
        self.affiliate_repo = affiliate_repo
        self.notifier = notifier
        self.rng = rng or random.Random()

    async def register(
        self, name: str, email: str, password: str
    ) -> Affiliate:
        """
        Register a new affiliate with status pending.

        Args:
            name: Display name
            email: Login email (matched exactly)
            password: Plain password

        Returns:
            Created affiliate

        Raises:
            ValidationFailure: Bad name, email or password
            DuplicateEmail: Email already registered
            PersistenceFailure: Storage error or ID space exhausted
        """
        for is_valid, error in (
            validate_name(name),
            validate_email(email),
            validate_password(password),
        ):
            if not is_valid:
                raise ValidationFailure(error)

        name = name.strip()
        email = email.strip()

        if await self.affiliate_repo.email_exists(email):
            raise DuplicateEmail()

        affiliate_id = await self._allocate_id()

        try:
            affiliate = await self.affiliate_repo.create(
                id=affiliate_id,
                name=name,
                email=email,
                password_hash=hash_password(password),
                status=AffiliateStatus.PENDING.value,
                tier=DEFAULT_TIER.value,
            )
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            # Lost a race against a concurrent registration
            if "email" in str(e.orig).lower():
                raise DuplicateEmail() from e
            raise PersistenceFailure() from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                "Affiliate registration failed",
                extra={"email": mask_email(email), "error": str(e)},
            )
            raise PersistenceFailure() from e

        logger.info(
            "Affiliate registered",
            extra={"affiliate_id": affiliate.id, "email": mask_email(email)},
        )

        await self._notify_admin(affiliate)
        return affiliate

    async def set_status(
        self, affiliate_id: str, status: AffiliateStatus
    ) -> Affiliate:
        """
        Change affiliate status.

        Flushed only; committed by the calling service.

        Args:
            affiliate_id: Affiliate ID
            status: New status

        Returns:
            Updated affiliate

        Raises:
            NotFound: Unknown affiliate
        """
        affiliate = await self.affiliate_repo.update(
            affiliate_id, status=status.value
        )
        if affiliate is None:
            raise NotFound()

        logger.info(
            "Affiliate status changed",
            extra={"affiliate_id": affiliate_id, "status": status.value},
        )
        return affiliate

    async def _allocate_id(self) -> str:
        """Draw random IDs until one is free."""
        for _ in range(AFFILIATE_ID_MAX_ATTEMPTS):
            candidate = generate_affiliate_id(self.rng)
            if not await self.affiliate_repo.id_exists(candidate):
                return candidate

        logger.error("Affiliate ID space exhausted")
        raise PersistenceFailure("No free affiliate ID available")

    async def _notify_admin(self, affiliate: Affiliate) -> None:
        """Send the application notice to the program admin."""
        if self.notifier is None:
            return
        if not settings.admin_email:
            logger.warning("ADMIN_EMAIL not set, skipping application notice")
            return

        message = build_application_email(
            affiliate.id, affiliate.name, affiliate.email
        )
        try:
            await self.notifier.notify(
                settings.admin_email, message.subject, message.body
            )
        except Exception as e:
            logger.error(
                "Application notice failed",
                extra={"affiliate_id": affiliate.id, "error": str(e)},
            )
