"""
Business constants.

Values that are part of the program rules rather than deployment config.
"""

from decimal import Decimal

# Affiliate ID format: AFF0001 .. AFF9999
AFFILIATE_ID_PREFIX = "AFF"
AFFILIATE_ID_DIGITS = 4
AFFILIATE_ID_MIN = 1
AFFILIATE_ID_MAX = 9999
AFFILIATE_ID_MAX_ATTEMPTS = 10_000

# Session tokens: 32 random bytes = 256 bits, hex-encoded
SESSION_TOKEN_BYTES = 32

# Passwords
PASSWORD_MIN_LENGTH = 8

# Money
MONEY_QUANT = Decimal("0.01")
# Storage scale of MoneyType
LEDGER_QUANT = Decimal("0.00000001")
PERCENT_QUANT = Decimal("0.01")
PROGRESS_QUANT = Decimal("0.1")

# Payouts are made on this day of the month following the current one
PAYOUT_DAY_OF_MONTH = 15
DEFAULT_PAYOUT_METHOD = "e-transfer"

# Dashboard fallback for sales recorded without product details
DEFAULT_ACTIVITY_DESCRIPTION = "Sale completed"
