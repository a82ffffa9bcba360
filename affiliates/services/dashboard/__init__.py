"""
Dashboard package.

- calculations.py: Conversion rate and tier progress math
- models.py: Pydantic snapshot models (camelCase serialisation)
- service.py: DashboardService
"""

from .calculations import TierProgress, conversion_rate, tier_progress
from .models import ActivityItem, DashboardSnapshot
from .service import DashboardService

__all__ = [
    "ActivityItem",
    "DashboardService",
    "DashboardSnapshot",
    "TierProgress",
    "conversion_rate",
    "tier_progress",
]
