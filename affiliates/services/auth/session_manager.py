"""
Auth Service - Session Manager.

This module handles affiliate session issuance, validation and expiry.
"""

from datetime import timedelta

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.config.settings import settings
from affiliates.models.affiliate import Affiliate
from affiliates.models.affiliate_session import AffiliateSession
from affiliates.repositories.session_repository import (
    AffiliateSessionRepository,
)
from affiliates.services.base_service import Clock
from affiliates.utils.datetime_utils import utc_now
from affiliates.utils.exceptions import SessionInvalidOrExpired
from affiliates.utils.security import mask_token

from .crypto import generate_session_token


class SessionManager:
    """
    Manages affiliate session lifecycle.

    Writes are flushed only; the calling service owns the commit.
    """

    def __init__(
        self,
        session: AsyncSession,
        session_repo: AffiliateSessionRepository,
        clock: Clock | None = None,
        lifetime_days: int | None = None,
        purge_on_issue: bool | None = None,
    ) -> None:
        """
        Initialize session manager.

        Args:
            session: Database session
            session_repo: Affiliate session repository
            clock: Time source
            lifetime_days: Absolute session lifetime
            purge_on_issue: Delete expired sessions before issuing
        """
        self.session = session
        self.session_repo = session_repo
        self.clock = clock or utc_now
        self.lifetime = timedelta(
            days=lifetime_days or settings.session_lifetime_days
        )
        self.purge_on_issue = (
            settings.session_purge_on_issue
            if purge_on_issue is None
            else purge_on_issue
        )

    async def issue(self, affiliate_id: str) -> AffiliateSession:
        """
        Create a new session for an affiliate.

        Existing sessions stay valid; an affiliate may hold several.

        Args:
            affiliate_id: Affiliate ID

        Returns:
            Created session
        """
        now = self.clock()

        if self.purge_on_issue:
            await self.session_repo.delete_expired(now)

        record = await self.session_repo.create(
            affiliate_id=affiliate_id,
            session_token=generate_session_token(),
            expires_at=now + self.lifetime,
            created_at=now,
        )

        logger.info(
            "Affiliate session issued",
            extra={
                "affiliate_id": affiliate_id,
                "token": mask_token(record.session_token),
            },
        )
        return record

    async def validate(self, token: str) -> Affiliate:
        """
        Resolve a token to its affiliate.

        Args:
            token: Session token

        Returns:
            Affiliate owning the session

        Raises:
            SessionInvalidOrExpired: Token unknown or expired
        """
        if not token:
            raise SessionInvalidOrExpired()

        affiliate = await self.session_repo.get_affiliate_by_valid_token(
            token, self.clock()
        )
        if affiliate is None:
            logger.debug(
                "Session rejected", extra={"token": mask_token(token)}
            )
            raise SessionInvalidOrExpired()

        return affiliate

    async def purge_expired(self) -> int:
        """
        Delete all expired sessions.

        Returns:
            Number of deleted sessions
        """
        deleted = await self.session_repo.delete_expired(self.clock())

        if deleted:
            logger.info(
                f"Purged {deleted} expired affiliate sessions",
                extra={"deleted": deleted},
            )
        return deleted
