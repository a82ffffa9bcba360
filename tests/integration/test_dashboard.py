"""Integration tests for the dashboard snapshot."""

from datetime import date
from decimal import Decimal

import pytest

from affiliates.services.dashboard import DashboardService


class TestDashboard:
    """Test AffiliateProgram.get_dashboard."""

    @pytest.mark.asyncio
    async def test_fresh_affiliate(self, program, active_affiliate):
        """New affiliate shows zeros and progress towards Pro."""
        result = await program.get_dashboard(active_affiliate)

        assert result.success is True
        snapshot = result.data
        assert snapshot.id == active_affiliate
        assert snapshot.name == "Jane Doe"
        assert snapshot.tier == "Starter"
        assert snapshot.commission_rate == Decimal("20")
        assert snapshot.total_earnings == 0
        assert snapshot.conversion_rate == 0
        assert snapshot.tier_progress == 0
        assert snapshot.next_tier_name == "Pro"
        assert snapshot.next_tier_threshold == Decimal("500")
        assert snapshot.next_tier_rate == Decimal("25")
        assert snapshot.recent_activity == []
        assert snapshot.payout_method == "e-transfer"

    @pytest.mark.asyncio
    async def test_next_payout_date(self, program, clock, active_affiliate):
        """Payout is on the 15th of next month relative to the clock."""
        result = await program.get_dashboard(active_affiliate)

        assert result.data.next_payout_date == date(2024, 4, 15)

    @pytest.mark.asyncio
    async def test_totals_and_rates(self, program, active_affiliate):
        """Clicks and sales feed conversion rate and progress."""
        for _ in range(4):
            await program.record_click(active_affiliate, "/")
        await program.record_sale(active_affiliate, "ORD-1", "1250")

        snapshot = (await program.get_dashboard(active_affiliate)).data

        assert snapshot.total_clicks == 4
        assert snapshot.total_sales == 1
        assert snapshot.conversion_rate == Decimal("25.00")
        assert snapshot.total_earnings == Decimal("250")
        assert snapshot.pending_balance == Decimal("250")
        assert snapshot.tier_progress == Decimal("50.0")

    @pytest.mark.asyncio
    async def test_elite_progress(self, program, active_affiliate):
        """Elite is always at 100 with no next tier."""
        await program.record_sale(active_affiliate, "ORD-1", "10000")

        snapshot = (await program.get_dashboard(active_affiliate)).data

        assert snapshot.tier == "Elite"
        assert snapshot.commission_rate == Decimal("30")
        assert snapshot.tier_progress == 100
        assert snapshot.next_tier_name is None
        assert snapshot.next_tier_threshold is None

    @pytest.mark.asyncio
    async def test_recent_activity(self, program, clock, active_affiliate):
        """Latest ten sales, newest first, with fallback description."""
        for index in range(12):
            details = "" if index == 11 else f"Widget {index}"
            await program.record_sale(active_affiliate, f"ORD-{index}", "10", details)
            clock.advance(minutes=1)

        activity = (await program.get_dashboard(active_affiliate)).data.recent_activity

        assert len(activity) == 10
        assert activity[0].description == "Sale completed"
        assert activity[1].description == "Widget 10"
        assert activity[-1].description == "Widget 2"
        assert activity[0].amount == Decimal("2.00")
        assert activity[0].date > activity[1].date

    @pytest.mark.asyncio
    async def test_recent_limit_configurable(
        self, db_session, clock, program, active_affiliate
    ):
        """Recent activity length follows the service limit."""
        for index in range(5):
            await program.record_sale(active_affiliate, f"ORD-{index}", "10")
            clock.advance(minutes=1)

        service = DashboardService(db_session, clock=clock, recent_limit=3)
        snapshot = await service.get_dashboard(active_affiliate)

        assert len(snapshot.recent_activity) == 3

    @pytest.mark.asyncio
    async def test_camel_case_serialisation(self, program, active_affiliate):
        """Snapshot dumps with camelCase keys."""
        await program.record_sale(active_affiliate, "ORD-1", "100", "Widget")
        snapshot = (await program.get_dashboard(active_affiliate)).data

        payload = snapshot.model_dump(by_alias=True)

        for key in (
            "commissionRate",
            "totalEarnings",
            "totalClicks",
            "conversionRate",
            "pendingBalance",
            "paidToDate",
            "tierProgress",
            "nextTierThreshold",
            "nextTierName",
            "nextTierRate",
            "recentActivity",
            "nextPayoutDate",
            "payoutMethod",
        ):
            assert key in payload
        assert payload["recentActivity"][0]["description"] == "Widget"

    @pytest.mark.asyncio
    async def test_unknown_affiliate(self, program):
        """Missing affiliate is not found."""
        result = await program.get_dashboard("AFF9999")

        assert result.success is False
        assert result.error_code == "not_found"
