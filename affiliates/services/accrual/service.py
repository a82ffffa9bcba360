"""
Accrual service.

Appends clicks and sales to the ledger and keeps the affiliate aggregates
and tier in step with it. Each event is one unit of work holding a row
lock on the affiliate.
"""

from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from affiliates.config.tiers import TierName, get_rate_percent
from affiliates.models.affiliate import Affiliate
from affiliates.models.click_event import ClickEvent
from affiliates.models.sale_event import SaleEvent
from affiliates.models.types import MONEY_MAX
from affiliates.repositories.affiliate_repository import AffiliateRepository
from affiliates.repositories.click_repository import ClickEventRepository
from affiliates.repositories.sale_repository import SaleEventRepository
from affiliates.services.base_service import (
    BaseService,
    Clock,
    log_operation,
    transaction,
)
from affiliates.services.notification import (
    Notifier,
    build_tier_upgrade_email,
)
from affiliates.utils.exceptions import NotFound, ValidationFailure
from affiliates.validators import validate_amount

from .commission import calculate_commission
from .tier_evaluator import evaluate_tier_upgrade


@dataclass
class SaleAccrual:
    """Outcome of a recorded sale."""

    sale: SaleEvent
    commission_amount: Decimal
    upgraded_to: TierName | None = None


class AccrualService(BaseService):
    """Commission and tier accrual engine."""

    def __init__(
        self,
        session: AsyncSession,
        notifier: Notifier | None = None,
        clock: Clock | None = None,
    ) -> None:
        """
        Initialize accrual service.

        Args:
            session: Database session
            notifier: Email notifier for tier upgrades (optional)
            clock: Time source
        """
        super().__init__(session, clock)
        self.notifier = notifier
        self.affiliate_repo = AffiliateRepository(session)
        self.click_repo = ClickEventRepository(session)
        self.sale_repo = SaleEventRepository(session)

    async def _lock_affiliate(self, affiliate_id: str) -> Affiliate:
        affiliate = await self.affiliate_repo.get_for_update(affiliate_id)
        if affiliate is None:
            raise NotFound()
        return affiliate

    @transaction
    async def record_click(
        self,
        affiliate_id: str,
        page: str,
        campaign: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        referrer: str | None = None,
    ) -> ClickEvent:
        """
        Append a click and refresh the click count.

        Raises:
            NotFound: Unknown affiliate
            PersistenceFailure: Storage error (rolled back)
        """
        affiliate = await self._lock_affiliate(affiliate_id)

        click = await self.click_repo.create(
            affiliate_id=affiliate_id,
            page=page,
            campaign=campaign,
            ip_address=ip_address,
            user_agent=user_agent,
            referrer=referrer,
            created_at=self.clock(),
        )
        affiliate.total_clicks = await self.click_repo.count_for_affiliate(
            affiliate_id
        )
        await self.session.flush()

        self.logger.debug(
            "Click recorded",
            extra={"affiliate_id": affiliate_id, "campaign": campaign},
        )
        return click

    async def record_sale(
        self,
        affiliate_id: str,
        order_id: str,
        sale_amount: Decimal | int | float | str,
        product_details: str = "",
    ) -> SaleAccrual:
        """
        Record an attributed sale.

        The commission uses the affiliate's rate before this sale; a
        promotion triggered by the sale applies from the next one. The
        upgrade email goes out only after the commit.

        Args:
            affiliate_id: Referring affiliate
            order_id: Merchant order identifier
            sale_amount: Positive order amount
            product_details: Description for the dashboard

        Returns:
            Sale accrual outcome

        Raises:
            ValidationFailure: Amount not a positive finite decimal, or
                above what the ledger column stores
            NotFound: Unknown affiliate
            PersistenceFailure: Storage error (rolled back)
        """
        is_valid, amount, error = validate_amount(sale_amount, max_val=MONEY_MAX)
        if not is_valid:
            raise ValidationFailure(error)

        accrual, affiliate = await self._accrue_sale(
            affiliate_id, order_id, amount, product_details or ""
        )

        if accrual.upgraded_to is not None:
            await self._notify_upgrade(affiliate, accrual.upgraded_to)

        return accrual

    @transaction
    async def _accrue_sale(
        self,
        affiliate_id: str,
        order_id: str,
        sale_amount: Decimal,
        product_details: str,
    ) -> tuple[SaleAccrual, Affiliate]:
        affiliate = await self._lock_affiliate(affiliate_id)

        rate = get_rate_percent(affiliate.tier)
        commission = calculate_commission(sale_amount, rate)

        sale = await self.sale_repo.create(
            affiliate_id=affiliate_id,
            order_id=order_id,
            sale_amount=sale_amount,
            commission_rate=rate,
            commission_amount=commission,
            product_details=product_details,
            created_at=self.clock(),
        )

        total_earnings, total_sales = await self.sale_repo.get_totals(
            affiliate_id
        )
        affiliate.total_earnings = total_earnings
        affiliate.total_sales = total_sales
        affiliate.pending_balance = affiliate.pending_balance + commission

        upgraded_to = evaluate_tier_upgrade(affiliate.tier, total_earnings)
        if upgraded_to is not None:
            self.logger.info(
                "Affiliate promoted",
                extra={
                    "affiliate_id": affiliate_id,
                    "from_tier": affiliate.tier,
                    "to_tier": upgraded_to.value,
                    "total_earnings": str(total_earnings),
                },
            )
            affiliate.tier = upgraded_to.value

        await self.session.flush()

        self.logger.info(
            "Sale recorded",
            extra={
                "affiliate_id": affiliate_id,
                "order_id": order_id,
                "commission": str(commission),
            },
        )
        return SaleAccrual(sale, commission, upgraded_to), affiliate

    @log_operation
    @transaction
    async def recompute_aggregates(self, affiliate_id: str) -> Affiliate:
        """
        Re-derive cached totals from the ledger.

        pending_balance and paid_to_date are left alone since payouts
        happen outside the ledger.

        Raises:
            NotFound: Unknown affiliate
        """
        affiliate = await self._lock_affiliate(affiliate_id)

        total_earnings, total_sales = await self.sale_repo.get_totals(
            affiliate_id
        )
        affiliate.total_earnings = total_earnings
        affiliate.total_sales = total_sales
        affiliate.total_clicks = await self.click_repo.count_for_affiliate(
            affiliate_id
        )
        await self.session.flush()
        return affiliate

    async def _notify_upgrade(
        self, affiliate: Affiliate, tier: TierName
    ) -> None:
        """Send the upgrade email; failures are logged only."""
        if self.notifier is None:
            return

        message = build_tier_upgrade_email(
            affiliate.name, tier.value, get_rate_percent(tier)
        )
        try:
            await self.notifier.notify(
                affiliate.email, message.subject, message.body
            )
        except Exception as e:
            self.logger.error(
                "Tier upgrade notice failed",
                extra={"affiliate_id": affiliate.id, "error": str(e)},
            )
