"""
Accrual package.

- commission.py: Commission arithmetic
- tier_evaluator.py: Forward-only tier promotion
- service.py: AccrualService (clicks, sales, aggregate recompute)
"""

from .commission import calculate_commission
from .service import AccrualService, SaleAccrual
from .tier_evaluator import evaluate_tier_upgrade

__all__ = [
    "AccrualService",
    "SaleAccrual",
    "calculate_commission",
    "evaluate_tier_upgrade",
]
