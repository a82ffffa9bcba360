"""
Affiliate program backend.

Session-based affiliate authentication, click/sale ledger, tiered
commission accrual and dashboard reporting.
"""

__version__ = "1.0.0"
