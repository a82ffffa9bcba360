"""
Affiliate session repository.

Data access layer for AffiliateSession model.
"""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.models.affiliate import Affiliate
from affiliates.models.affiliate_session import AffiliateSession
from affiliates.repositories.base import BaseRepository


class AffiliateSessionRepository(BaseRepository[AffiliateSession]):
    """Repository for affiliate sessions."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize session repository."""
        super().__init__(AffiliateSession, session)

    async def get_affiliate_by_valid_token(
        self, token: str, now: datetime
    ) -> Affiliate | None:
        """
        Get the affiliate owning an unexpired session.

        Args:
            token: Session token
            now: Current moment

        Returns:
            Affiliate, or None if the token is unknown or expired
        """
        stmt = (
            select(Affiliate)
            .join(AffiliateSession, AffiliateSession.affiliate_id == Affiliate.id)
            .where(
                AffiliateSession.session_token == token,
                AffiliateSession.expires_at > now,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_expired(self, now: datetime) -> int:
        """
        Delete all sessions expired at the given moment.

        Args:
            now: Current moment

        Returns:
            Number of deleted sessions
        """
        stmt = (
            delete(AffiliateSession)
            .where(AffiliateSession.expires_at <= now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def count_for_affiliate(self, affiliate_id: str) -> int:
        """Count sessions (any state) belonging to an affiliate."""
        return await self.count(affiliate_id=affiliate_id)
