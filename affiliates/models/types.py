"""
Standard type definitions for database models.

Provides consistent types for monetary and percentage fields across all models.
"""

from decimal import Decimal

from sqlalchemy import DECIMAL

# Standard money type for amounts, balances, commissions
# Precision: 18 digits total, 8 after decimal point
MoneyType = DECIMAL(18, 8)

# Percentage type for commission rates (e.g., 20.00, 25.00)
# Range: 0.00 to 999.99
PercentType = DECIMAL(5, 2)

# Largest value a MoneyType column holds: 9999999999.99999999
MONEY_MAX = (
    Decimal(10) ** (MoneyType.precision - MoneyType.scale)
    - Decimal(10) ** -MoneyType.scale
)
