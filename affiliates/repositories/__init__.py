"""
Repositories.

Data access layer over the async SQLAlchemy session.
"""

from affiliates.repositories.affiliate_repository import AffiliateRepository
from affiliates.repositories.base import BaseRepository
from affiliates.repositories.click_repository import ClickEventRepository
from affiliates.repositories.sale_repository import SaleEventRepository
from affiliates.repositories.session_repository import (
    AffiliateSessionRepository,
)

__all__ = [
    "BaseRepository",
    "AffiliateRepository",
    "AffiliateSessionRepository",
    "ClickEventRepository",
    "SaleEventRepository",
]
