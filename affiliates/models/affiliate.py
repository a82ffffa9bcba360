"""
Affiliate model.

Represents a partner earning commission on referred sales.
"""

from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from affiliates.config.constants import DEFAULT_PAYOUT_METHOD
from affiliates.config.tiers import DEFAULT_TIER, TierName
from affiliates.models.base import Base
from affiliates.models.enums import AffiliateStatus
from affiliates.models.types import MoneyType

if TYPE_CHECKING:
    from affiliates.models.affiliate_session import AffiliateSession
    from affiliates.models.click_event import ClickEvent
    from affiliates.models.sale_event import SaleEvent


class Affiliate(Base):
    """
    Affiliate entity.

    Aggregates (total_earnings, total_sales, total_clicks) are cached
    values derived from the click/sale ledger. pending_balance grows with
    every sale and is reduced only by payouts made outside this system.
    """

    __tablename__ = "affiliates"
    __table_args__ = (
        CheckConstraint(
            "total_earnings >= 0",
            name="check_affiliate_total_earnings_non_negative",
        ),
        CheckConstraint(
            "pending_balance >= 0",
            name="check_affiliate_pending_balance_non_negative",
        ),
    )

    # Primary key: AFF0001 .. AFF9999
    id: Mapped[str] = mapped_column(String(16), primary_key=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    status: Mapped[str] = mapped_column(
        String(20),
        default=AffiliateStatus.PENDING.value,
        nullable=False,
        index=True,
    )
    tier: Mapped[str] = mapped_column(
        String(20), default=DEFAULT_TIER.value, nullable=False
    )

    # Aggregates
    total_earnings: Mapped[Decimal] = mapped_column(
        MoneyType, default=Decimal("0"), nullable=False
    )
    total_clicks: Mapped[int] = mapped_column(
        Integer, default=0, nullable=False
    )
    total_sales: Mapped[int] = mapped_column(
        Integer, default=0, nullable=False
    )
    pending_balance: Mapped[Decimal] = mapped_column(
        MoneyType, default=Decimal("0"), nullable=False
    )
    paid_to_date: Mapped[Decimal] = mapped_column(
        MoneyType, default=Decimal("0"), nullable=False
    )

    payout_method: Mapped[str] = mapped_column(
        String(50), default=DEFAULT_PAYOUT_METHOD, nullable=False
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    # Relationships
    sessions: Mapped[list["AffiliateSession"]] = relationship(
        "AffiliateSession", back_populates="affiliate", lazy="raise"
    )
    clicks: Mapped[list["ClickEvent"]] = relationship(
        "ClickEvent", back_populates="affiliate", lazy="raise"
    )
    sales: Mapped[list["SaleEvent"]] = relationship(
        "SaleEvent", back_populates="affiliate", lazy="raise"
    )

    @property
    def tier_name(self) -> TierName:
        """Current tier as enum."""
        return TierName(self.tier)

    @property
    def is_active(self) -> bool:
        """Only active affiliates may authenticate."""
        return self.status == AffiliateStatus.ACTIVE.value

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<Affiliate(id={self.id}, status={self.status}, "
            f"tier={self.tier}, total_earnings={self.total_earnings})>"
        )
