"""
Model enumerations.
"""

from enum import Enum


class AffiliateStatus(str, Enum):
    """Affiliate account lifecycle status."""

    PENDING = "pending"  # Registered, waiting for approval
    ACTIVE = "active"  # Approved, may authenticate
    SUSPENDED = "suspended"
