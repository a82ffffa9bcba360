"""
Commission calculation.
"""

from decimal import ROUND_HALF_UP, Decimal

from affiliates.config.constants import MONEY_QUANT


def calculate_commission(sale_amount: Decimal, rate_percent: Decimal) -> Decimal:
    """
    Compute commission for a sale.

    Args:
        sale_amount: Order amount
        rate_percent: Commission rate in percent (25 = 25%)

    Returns:
        Commission rounded half-up to cents

    Examples:
        >>> calculate_commission(Decimal("100"), Decimal("20"))
        Decimal('20.00')
        >>> calculate_commission(Decimal("10.05"), Decimal("25"))
        Decimal('2.51')
    """
    raw = sale_amount * rate_percent / Decimal(100)
    return raw.quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)
