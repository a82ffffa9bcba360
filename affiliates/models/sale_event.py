"""
SaleEvent model.

Authoritative commission ledger. The commission rate is snapshotted at
record time and never recomputed when the affiliate's tier changes.
"""

from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from affiliates.models.base import Base
from affiliates.models.types import MoneyType, PercentType

if TYPE_CHECKING:
    from affiliates.models.affiliate import Affiliate


class SaleEvent(Base):
    """
    Attributed sale ledger entry (immutable).

    Attributes:
        id: Primary key
        affiliate_id: Referring affiliate
        order_id: Merchant order identifier
        sale_amount: Order amount
        commission_rate: Rate in percent at time of sale (20.00 = 20%)
        commission_amount: sale_amount * commission_rate / 100
        product_details: Free-form description shown on the dashboard
        created_at: When the sale was recorded
    """

    __tablename__ = "affiliate_sales"
    __table_args__ = (
        Index("idx_affiliate_sales_affiliate_created", "affiliate_id", "created_at"),
        CheckConstraint("sale_amount > 0", name="check_sale_amount_positive"),
        CheckConstraint(
            "commission_amount >= 0", name="check_commission_amount_non_negative"
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    affiliate_id: Mapped[str] = mapped_column(
        String(16),
        ForeignKey("affiliates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    order_id: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True
    )
    sale_amount: Mapped[Decimal] = mapped_column(MoneyType, nullable=False)
    commission_rate: Mapped[Decimal] = mapped_column(PercentType, nullable=False)
    commission_amount: Mapped[Decimal] = mapped_column(MoneyType, nullable=False)
    product_details: Mapped[str] = mapped_column(
        Text, default="", nullable=False
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    affiliate: Mapped["Affiliate"] = relationship(
        "Affiliate", back_populates="sales"
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<SaleEvent(id={self.id}, affiliate_id={self.affiliate_id}, "
            f"order_id={self.order_id}, commission={self.commission_amount})>"
        )
