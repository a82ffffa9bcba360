"""
AffiliateSession model.

Bearer token issued at login, valid for a fixed window from issuance.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from affiliates.models.base import Base
from affiliates.utils.datetime_utils import ensure_utc

if TYPE_CHECKING:
    from affiliates.models.affiliate import Affiliate


class AffiliateSession(Base):
    """Affiliate session entity."""

    __tablename__ = "affiliate_sessions"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    affiliate_id: Mapped[str] = mapped_column(
        String(16),
        ForeignKey("affiliates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    session_token: Mapped[str] = mapped_column(
        String(128), nullable=False, unique=True, index=True
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    affiliate: Mapped["Affiliate"] = relationship(
        "Affiliate", back_populates="sessions"
    )

    def is_expired(self, now: datetime) -> bool:
        """Check if session is expired at the given moment."""
        return ensure_utc(now) >= ensure_utc(self.expires_at)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<AffiliateSession(id={self.id}, affiliate_id={self.affiliate_id}, "
            f"expires_at={self.expires_at})>"
        )
