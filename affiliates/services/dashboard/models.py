"""Pydantic models for the affiliate dashboard."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from affiliates.config.tiers import TierName


class ActivityItem(BaseModel):
    """One recent sale as shown on the dashboard."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    description: str = Field(..., description="Product details or fallback text")
    amount: Decimal = Field(..., ge=0, description="Commission earned")
    date: datetime = Field(..., description="When the sale was recorded")


class DashboardSnapshot(BaseModel):
    """Read-only summary of an affiliate account.

    Serialises with camelCase keys (totalEarnings, nextPayoutDate, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    email: str
    tier: TierName
    commission_rate: Decimal = Field(..., description="Current rate in percent")

    total_earnings: Decimal = Field(..., ge=0)
    total_clicks: int = Field(..., ge=0)
    total_sales: int = Field(..., ge=0)
    conversion_rate: Decimal = Field(..., ge=0, description="Sales per 100 clicks")
    pending_balance: Decimal = Field(..., ge=0)
    paid_to_date: Decimal = Field(..., ge=0)

    tier_progress: Decimal = Field(..., ge=0, le=100)
    next_tier_threshold: Decimal | None = None
    next_tier_name: TierName | None = None
    next_tier_rate: Decimal | None = None

    recent_activity: list[ActivityItem] = Field(default_factory=list)
    next_payout_date: date
    payout_method: str
