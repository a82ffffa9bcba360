"""
Affiliate repository.

Data access layer for Affiliate model.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.models.affiliate import Affiliate
from affiliates.repositories.base import BaseRepository


class AffiliateRepository(BaseRepository[Affiliate]):
    """Affiliate repository with specific queries."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize affiliate repository."""
        super().__init__(Affiliate, session)

    async def get_by_email(self, email: str) -> Affiliate | None:
        """
        Get affiliate by email (exact match).

        Args:
            email: Email address

        Returns:
            Affiliate or None
        """
        return await self.get_by(email=email)

    async def get_for_update(self, affiliate_id: str) -> Affiliate | None:
        """
        Get affiliate with a row lock.

        Serializes concurrent accruals against the same affiliate.
        SQLite ignores FOR UPDATE; its writer lock serializes instead.

        Args:
            affiliate_id: Affiliate ID

        Returns:
            Locked affiliate or None
        """
        stmt = (
            select(Affiliate)
            .where(Affiliate.id == affiliate_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def id_exists(self, affiliate_id: str) -> bool:
        """Check whether an affiliate ID is already taken."""
        return await self.exists(id=affiliate_id)

    async def email_exists(self, email: str) -> bool:
        """Check whether an email is already registered."""
        return await self.exists(email=email)
