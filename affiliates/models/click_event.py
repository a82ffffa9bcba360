"""
ClickEvent model.

One row per referral visit. Client metadata is advisory only.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from affiliates.models.base import Base

if TYPE_CHECKING:
    from affiliates.models.affiliate import Affiliate


class ClickEvent(Base):
    """Referral click ledger entry (immutable)."""

    __tablename__ = "affiliate_clicks"
    __table_args__ = (
        Index("idx_affiliate_clicks_affiliate_created", "affiliate_id", "created_at"),
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
    page: Mapped[str] = mapped_column(String(500), nullable=False)
    campaign: Mapped[str | None] = mapped_column(String(255), nullable=True)

    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)
    referrer: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    affiliate: Mapped["Affiliate"] = relationship(
        "Affiliate", back_populates="clicks"
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<ClickEvent(id={self.id}, affiliate_id={self.affiliate_id}, "
            f"page={self.page!r}, campaign={self.campaign!r})>"
        )
