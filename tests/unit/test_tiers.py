"""
Unit tests for tier configuration and upgrade evaluation.

Tests cover:
- Tier table rates and thresholds
- Next tier lookup
- Forward-only promotion, including tier skipping
"""

from decimal import Decimal

import pytest

from affiliates.config.tiers import (
    DEFAULT_TIER,
    TIERS,
    TierName,
    get_next_tier,
    get_rate_percent,
    get_tier,
    tier_for_earnings,
)
from affiliates.services.accrual import evaluate_tier_upgrade


class TestTierTable:
    """Test static tier table."""

    def test_three_tiers_in_order(self):
        """Tiers are ordered Starter, Pro, Elite."""
        assert [tier.name for tier in TIERS] == [
            TierName.STARTER,
            TierName.PRO,
            TierName.ELITE,
        ]

    def test_thresholds_ascending(self):
        """Thresholds grow with tier order."""
        thresholds = [tier.threshold for tier in TIERS]
        assert thresholds == sorted(thresholds)

    @pytest.mark.parametrize(
        "name,rate",
        [("Starter", Decimal("20")), ("Pro", Decimal("25")), ("Elite", Decimal("30"))],
    )
    def test_rates(self, name, rate):
        """Commission rates per tier."""
        assert get_rate_percent(name) == rate

    def test_default_tier_is_starter(self):
        """New affiliates start at Starter."""
        assert DEFAULT_TIER == TierName.STARTER
        assert get_tier(DEFAULT_TIER).threshold == Decimal("0")

    def test_next_tier(self):
        """Next tier chain ends at Elite."""
        assert get_next_tier("Starter").name == TierName.PRO
        assert get_next_tier("Pro").name == TierName.ELITE
        assert get_next_tier("Elite") is None

    def test_unknown_tier_rejected(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError):
            get_tier("Platinum")


class TestTierForEarnings:
    """Test threshold lookup."""

    @pytest.mark.parametrize(
        "earnings,expected",
        [
            (Decimal("0"), TierName.STARTER),
            (Decimal("499.99"), TierName.STARTER),
            (Decimal("500"), TierName.PRO),
            (Decimal("1999.99"), TierName.PRO),
            (Decimal("2000"), TierName.ELITE),
            (Decimal("1000000"), TierName.ELITE),
        ],
    )
    def test_boundaries(self, earnings, expected):
        """Threshold is inclusive."""
        assert tier_for_earnings(earnings).name == expected


class TestTierUpgradeEvaluation:
    """Test forward-only promotion."""

    def test_starter_to_pro(self):
        """Crossing 500 promotes Starter to Pro."""
        assert evaluate_tier_upgrade("Starter", Decimal("520")) == TierName.PRO

    def test_starter_skips_to_elite(self):
        """A single jump past 2000 goes straight to Elite."""
        assert evaluate_tier_upgrade("Starter", Decimal("2500")) == TierName.ELITE

    def test_no_change_below_threshold(self):
        """Staying below the next threshold keeps the tier."""
        assert evaluate_tier_upgrade("Pro", Decimal("1999.99")) is None

    def test_never_downgrades(self):
        """Lower earnings never demote."""
        assert evaluate_tier_upgrade("Elite", Decimal("0")) is None
        assert evaluate_tier_upgrade("Pro", Decimal("10")) is None
