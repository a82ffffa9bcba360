"""
Sale event repository.

Data access layer for SaleEvent model.
"""

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.config.constants import LEDGER_QUANT
from affiliates.models.sale_event import SaleEvent
from affiliates.repositories.base import BaseRepository


class SaleEventRepository(BaseRepository[SaleEvent]):
    """Repository for the commission ledger."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize sale repository."""
        super().__init__(SaleEvent, session)

    async def get_totals(self, affiliate_id: str) -> tuple[Decimal, int]:
        """
        Sum commissions and count sales for an affiliate.

        Args:
            affiliate_id: Affiliate ID

        Returns:
            Tuple of (total_commission, sale_count)
        """
        stmt = select(
            func.coalesce(func.sum(SaleEvent.commission_amount), 0),
            func.count(SaleEvent.id),
        ).where(SaleEvent.affiliate_id == affiliate_id)
        result = await self.session.execute(stmt)
        total, count = result.one()
        # SQLite sums NUMERIC as float
        total = Decimal(str(total)).quantize(LEDGER_QUANT)
        return total, int(count or 0)

    async def get_recent(
        self, affiliate_id: str, limit: int = 10
    ) -> list[SaleEvent]:
        """
        Get most recent sales for an affiliate, newest first.

        Args:
            affiliate_id: Affiliate ID
            limit: Max number of results

        Returns:
            List of sale events
        """
        stmt = (
            select(SaleEvent)
            .where(SaleEvent.affiliate_id == affiliate_id)
            .order_by(SaleEvent.created_at.desc(), SaleEvent.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
