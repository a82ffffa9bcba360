"""
Services.

Business logic layer.
"""

from affiliates.services.base_service import (
    BaseService,
    ServiceResult,
    log_operation,
    transaction,
)
from affiliates.services.accrual import AccrualService
from affiliates.services.auth import AuthService
from affiliates.services.dashboard import DashboardService
from affiliates.services.notification import NotificationService
from affiliates.services.affiliate_program import AffiliateProgram

__all__ = [
    # Base
    "BaseService",
    "ServiceResult",
    "log_operation",
    "transaction",
    # Core
    "AccrualService",
    "AuthService",
    "DashboardService",
    "NotificationService",
    # Facade
    "AffiliateProgram",
]
