"""
Unit tests for dashboard math.

Tests cover:
- Conversion rate including zero clicks
- Tier progress per tier, clamping and next-tier details
- Next payout date
"""

from datetime import date
from decimal import Decimal

import pytest

from affiliates.config.tiers import TierName
from affiliates.services.dashboard import conversion_rate, tier_progress
from affiliates.utils.datetime_utils import next_payout_date


class TestConversionRate:
    """Test sales per 100 clicks."""

    def test_zero_clicks_is_zero(self):
        """No clicks means 0, not a division error."""
        assert conversion_rate(clicks=0, sales=0) == 0

    def test_quarter(self):
        """25 sales out of 100 clicks."""
        assert conversion_rate(clicks=100, sales=25) == 25.0

    def test_two_decimals(self):
        """1 of 3 rounds to 33.33."""
        assert conversion_rate(clicks=3, sales=1) == Decimal("33.33")


class TestTierProgress:
    """Test progress towards the next tier."""

    def test_starter_halfway(self):
        """Starter at 250 is halfway to Pro."""
        progress = tier_progress("Starter", Decimal("250"))
        assert progress.percent == Decimal("50.0")
        assert progress.next_tier_threshold == Decimal("500")
        assert progress.next_tier_name == "Pro"
        assert progress.next_tier_rate == Decimal("25")

    def test_pro_measured_from_500(self):
        """Pro progress spans 500..2000."""
        progress = tier_progress("Pro", Decimal("1250"))
        assert progress.percent == Decimal("50.0")
        assert progress.next_tier_name == TierName.ELITE
        assert progress.next_tier_threshold == Decimal("2000")

    def test_elite_is_complete(self):
        """Elite has no next tier."""
        progress = tier_progress("Elite", Decimal("2000"))
        assert progress.percent == 100
        assert progress.next_tier_threshold is None
        assert progress.next_tier_name is None
        assert progress.next_tier_rate is None

    def test_one_decimal(self):
        """Starter at 1 is 0.2%."""
        assert tier_progress("Starter", Decimal("1")).percent == Decimal("0.2")

    @pytest.mark.parametrize(
        "tier,earnings,expected",
        [
            ("Pro", Decimal("100"), Decimal("0.0")),
            ("Starter", Decimal("900"), Decimal("100.0")),
        ],
    )
    def test_clamped(self, tier, earnings, expected):
        """Out-of-band earnings stay within 0..100."""
        assert tier_progress(tier, earnings).percent == expected


class TestNextPayoutDate:
    """Test payout on the 15th of next month."""

    def test_mid_year(self):
        """March -> April 15."""
        assert next_payout_date(date(2024, 3, 20)) == date(2024, 4, 15)

    def test_before_the_15th(self):
        """Still next month even before the 15th."""
        assert next_payout_date(date(2024, 3, 1)) == date(2024, 4, 15)

    def test_december_rolls_year(self):
        """December -> January 15 of next year."""
        assert next_payout_date(date(2024, 12, 31)) == date(2025, 1, 15)
