"""
Click event repository.

Data access layer for ClickEvent model.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.models.click_event import ClickEvent
from affiliates.repositories.base import BaseRepository


class ClickEventRepository(BaseRepository[ClickEvent]):
    """Repository for referral clicks."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize click repository."""
        super().__init__(ClickEvent, session)

    async def count_for_affiliate(self, affiliate_id: str) -> int:
        """
        Count clicks attributed to an affiliate.

        Args:
            affiliate_id: Affiliate ID

        Returns:
            Number of click events
        """
        stmt = select(func.count(ClickEvent.id)).where(
            ClickEvent.affiliate_id == affiliate_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
