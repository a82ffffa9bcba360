"""
Database models.

Exports all SQLAlchemy models for easy imports.
"""

from affiliates.models.affiliate import Affiliate
from affiliates.models.affiliate_session import AffiliateSession
from affiliates.models.base import Base
from affiliates.models.click_event import ClickEvent
from affiliates.models.enums import AffiliateStatus
from affiliates.models.sale_event import SaleEvent

__all__ = [
    # Base
    "Base",
    # Enums
    "AffiliateStatus",
    # Core Models
    "Affiliate",
    "AffiliateSession",
    # Ledger
    "ClickEvent",
    "SaleEvent",
]
