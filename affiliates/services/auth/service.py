"""
Auth Service - Main Service Class.

This module provides the main AuthService class that orchestrates
registration, login and session checks by delegating to specialized managers.
"""

import random
from dataclasses import asdict, dataclass
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.models.affiliate import Affiliate
from affiliates.models.enums import AffiliateStatus
from affiliates.repositories.affiliate_repository import AffiliateRepository
from affiliates.repositories.session_repository import (
    AffiliateSessionRepository,
)
from affiliates.services.base_service import BaseService, Clock, transaction
from affiliates.services.notification import Notifier
from affiliates.utils.exceptions import AccountNotActive, InvalidCredentials
from affiliates.utils.security import mask_email

from .affiliate_manager import AffiliateManager
from .constants import INVALID_CREDENTIALS_MESSAGE
from .crypto import verify_password
from .session_manager import SessionManager


@dataclass
class LoginResult:
    """Successful login payload."""

    affiliate_id: str
    name: str
    email: str
    token: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain dict."""
        return asdict(self)


class AuthService(BaseService):
    """
    Affiliate authentication service.

    Delegates to:
    - AffiliateManager: Registration and status changes
    - SessionManager: Session issuance, validation and expiry
    """

    def __init__(
        self,
        session: AsyncSession,
        notifier: Notifier | None = None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize auth service.

        Args:
            session: Database session
            notifier: Email notifier (optional)
            clock: Time source
            rng: Random source for affiliate IDs
        """
        super().__init__(session, clock)

        self.affiliate_repo = AffiliateRepository(session)
        self.session_repo = AffiliateSessionRepository(session)

        self.affiliate_manager = AffiliateManager(
            session, self.affiliate_repo, notifier, rng
        )
        self.session_manager = SessionManager(
            session, self.session_repo, clock=self.clock
        )

    async def register(
        self, name: str, email: str, password: str
    ) -> Affiliate:
        """Register new affiliate (pending approval)."""
        return await self.affiliate_manager.register(name, email, password)

    @transaction
    async def login(self, email: str, password: str) -> LoginResult:
        """
        Authenticate affiliate and issue a session.

        Status is checked before the password, so a pending account learns
        it is not active even with a wrong password.

        Args:
            email: Login email (exact match)
            password: Plain password

        Returns:
            Login result with session token

        Raises:
            InvalidCredentials: Unknown email or wrong password
            AccountNotActive: Account pending or suspended
            PersistenceFailure: Storage error (rolled back)
        """
        email = (email or "").strip()
        affiliate = await self.affiliate_repo.get_by_email(email)

        if affiliate is None:
            self.logger.info(
                "Login failed: unknown email",
                extra={"email": mask_email(email)},
            )
            raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)

        if not affiliate.is_active:
            self.logger.info(
                "Login refused: account not active",
                extra={"affiliate_id": affiliate.id, "status": affiliate.status},
            )
            raise AccountNotActive()

        if not verify_password(password or "", affiliate.password_hash):
            self.logger.info(
                "Login failed: wrong password",
                extra={"affiliate_id": affiliate.id},
            )
            raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)

        record = await self.session_manager.issue(affiliate.id)

        self.logger.info(
            "Affiliate logged in", extra={"affiliate_id": affiliate.id}
        )
        return LoginResult(
            affiliate_id=affiliate.id,
            name=affiliate.name,
            email=affiliate.email,
            token=record.session_token,
        )

    async def validate_session(self, token: str) -> Affiliate:
        """Resolve a session token to its affiliate."""
        return await self.session_manager.validate(token)

    @transaction
    async def purge_expired_sessions(self) -> int:
        """Delete expired sessions."""
        return await self.session_manager.purge_expired()

    @transaction
    async def activate_affiliate(self, affiliate_id: str) -> Affiliate:
        """Approve affiliate so it can log in."""
        return await self.affiliate_manager.set_status(
            affiliate_id, AffiliateStatus.ACTIVE
        )

    @transaction
    async def suspend_affiliate(self, affiliate_id: str) -> Affiliate:
        """Suspend affiliate; existing sessions stay resolvable."""
        return await self.affiliate_manager.set_status(
            affiliate_id, AffiliateStatus.SUSPENDED
        )
