"""
Dashboard service.

Composes the affiliate profile, tier progress, recent activity and the
next payout date into a single snapshot.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.config.constants import DEFAULT_ACTIVITY_DESCRIPTION
from affiliates.config.settings import settings
from affiliates.config.tiers import get_rate_percent
from affiliates.repositories.affiliate_repository import AffiliateRepository
from affiliates.repositories.sale_repository import SaleEventRepository
from affiliates.services.base_service import BaseService, Clock
from affiliates.utils.datetime_utils import ensure_utc, next_payout_date
from affiliates.utils.exceptions import NotFound

from .calculations import conversion_rate, tier_progress
from .models import ActivityItem, DashboardSnapshot


class DashboardService(BaseService):
    """Read-only dashboard aggregator."""

    def __init__(
        self,
        session: AsyncSession,
        clock: Clock | None = None,
        recent_limit: int | None = None,
    ) -> None:
        super().__init__(session, clock)
        self.recent_limit = recent_limit or settings.recent_activity_limit
        self.affiliate_repo = AffiliateRepository(session)
        self.sale_repo = SaleEventRepository(session)

    async def get_dashboard(self, affiliate_id: str) -> DashboardSnapshot:
        """
        Build dashboard snapshot for an affiliate.

        Raises:
            NotFound: Unknown affiliate
        """
        affiliate = await self.affiliate_repo.get_by_id(affiliate_id)
        if affiliate is None:
            raise NotFound()

        progress = tier_progress(affiliate.tier, affiliate.total_earnings)
        recent = await self.sale_repo.get_recent(
            affiliate_id, limit=self.recent_limit
        )

        return DashboardSnapshot(
            id=affiliate.id,
            name=affiliate.name,
            email=affiliate.email,
            tier=affiliate.tier_name,
            commission_rate=get_rate_percent(affiliate.tier),
            total_earnings=affiliate.total_earnings,
            total_clicks=affiliate.total_clicks,
            total_sales=affiliate.total_sales,
            conversion_rate=conversion_rate(
                clicks=affiliate.total_clicks, sales=affiliate.total_sales
            ),
            pending_balance=affiliate.pending_balance,
            paid_to_date=affiliate.paid_to_date,
            tier_progress=progress.percent,
            next_tier_threshold=progress.next_tier_threshold,
            next_tier_name=progress.next_tier_name,
            next_tier_rate=progress.next_tier_rate,
            recent_activity=[
                ActivityItem(
                    description=sale.product_details
                    or DEFAULT_ACTIVITY_DESCRIPTION,
                    amount=sale.commission_amount,
                    date=ensure_utc(sale.created_at),
                )
                for sale in recent
            ],
            next_payout_date=next_payout_date(self.clock().date()),
            payout_method=affiliate.payout_method,
        )
