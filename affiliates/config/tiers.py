"""
Single source of truth for affiliate tier configuration.

Tiers are ordered by earnings threshold. Promotion is earnings-based:
an affiliate moves to the highest tier whose threshold has been reached,
skipping intermediate tiers if a single sale crosses several thresholds.
Tiers are never lowered automatically.
"""

from decimal import Decimal
from enum import Enum
from typing import NamedTuple


class TierName(str, Enum):
    """Affiliate tier names."""

    STARTER = "Starter"
    PRO = "Pro"
    ELITE = "Elite"


class TierDefinition(NamedTuple):
    """Tier configuration."""

    name: TierName
    order: int  # Rank used for forward-only comparisons
    rate_percent: Decimal  # Commission rate, e.g. 20 = 20%
    threshold: Decimal  # Total earnings required to reach this tier


TIERS: tuple[TierDefinition, ...] = (
    TierDefinition(
        name=TierName.STARTER,
        order=0,
        rate_percent=Decimal("20"),
        threshold=Decimal("0"),
    ),
    TierDefinition(
        name=TierName.PRO,
        order=1,
        rate_percent=Decimal("25"),
        threshold=Decimal("500"),
    ),
    TierDefinition(
        name=TierName.ELITE,
        order=2,
        rate_percent=Decimal("30"),
        threshold=Decimal("2000"),
    ),
)

DEFAULT_TIER = TierName.STARTER

_TIERS_BY_NAME: dict[TierName, TierDefinition] = {tier.name: tier for tier in TIERS}


def get_tier(name: TierName | str) -> TierDefinition:
    """
    Get tier definition by name.

    Args:
        name: Tier name (enum or its string value)

    Returns:
        Tier definition

    Raises:
        ValueError: If tier name is unknown
    """
    return _TIERS_BY_NAME[TierName(name)]


def get_next_tier(name: TierName | str) -> TierDefinition | None:
    """
    Get the tier directly above the given one.

    Returns:
        Next tier definition or None for the top tier
    """
    current = get_tier(name)
    if current.order + 1 < len(TIERS):
        return TIERS[current.order + 1]
    return None


def get_rate_percent(name: TierName | str) -> Decimal:
    """Get commission rate (percent) for a tier."""
    return get_tier(name).rate_percent


def tier_for_earnings(total_earnings: Decimal) -> TierDefinition:
    """Get the highest tier whose threshold is reached by total earnings."""
    reached = TIERS[0]
    for tier in TIERS:
        if total_earnings >= tier.threshold:
            reached = tier
    return reached
