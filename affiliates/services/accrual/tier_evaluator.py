"""
Tier upgrade evaluation.

Forward-only: the affiliate moves to the highest tier its earnings reach,
possibly skipping tiers, and never moves down.
"""

from decimal import Decimal

from affiliates.config.tiers import TierName, get_tier, tier_for_earnings


def evaluate_tier_upgrade(
    current: TierName | str, total_earnings: Decimal
) -> TierName | None:
    """
    Decide whether an affiliate should be promoted.

    Args:
        current: Current tier
        total_earnings: Earnings after the latest sale

    Returns:
        New tier, or None if the affiliate stays where it is
    """
    current_tier = get_tier(current)
    reached = tier_for_earnings(total_earnings)
    if reached.order > current_tier.order:
        return reached.name
    return None
