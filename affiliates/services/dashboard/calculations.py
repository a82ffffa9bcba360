"""
Dashboard calculations.

Pure functions over affiliate aggregates; no I/O.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple

from affiliates.config.constants import PERCENT_QUANT, PROGRESS_QUANT
from affiliates.config.tiers import TierName, get_next_tier, get_tier

HUNDRED = Decimal(100)


class TierProgress(NamedTuple):
    """Progress towards the next tier."""

    percent: Decimal
    next_tier_threshold: Decimal | None
    next_tier_name: TierName | None
    next_tier_rate: Decimal | None


def conversion_rate(clicks: int, sales: int) -> Decimal:
    """
    Sales per hundred clicks, two decimals.

    Examples:
        >>> conversion_rate(clicks=0, sales=0)
        Decimal('0')
        >>> conversion_rate(clicks=100, sales=25)
        Decimal('25.00')
    """
    if clicks <= 0:
        return Decimal(0)
    rate = Decimal(sales) / Decimal(clicks) * HUNDRED
    return rate.quantize(PERCENT_QUANT, rounding=ROUND_HALF_UP)


def tier_progress(tier: TierName | str, total_earnings: Decimal) -> TierProgress:
    """
    Progress from the current tier's threshold to the next one.

    Starter counts from 0 to 500, Pro from 500 to 2000. The top tier is
    always at 100 with no next tier. The percentage is clamped to
    [0, 100] and rounded to one decimal.

    Examples:
        >>> tier_progress("Starter", Decimal("250")).percent
        Decimal('50.0')
    """
    current = get_tier(tier)
    upcoming = get_next_tier(tier)

    if upcoming is None:
        return TierProgress(HUNDRED, None, None, None)

    span = upcoming.threshold - current.threshold
    percent = (Decimal(total_earnings) - current.threshold) / span * HUNDRED
    percent = max(Decimal(0), min(HUNDRED, percent))

    return TierProgress(
        percent=percent.quantize(PROGRESS_QUANT, rounding=ROUND_HALF_UP),
        next_tier_threshold=upcoming.threshold,
        next_tier_name=upcoming.name,
        next_tier_rate=upcoming.rate_percent,
    )
