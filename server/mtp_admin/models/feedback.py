"""Feedback model definition."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import JSON, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base
from .base import RecordMixin, utcnow

if TYPE_CHECKING:
    from .user import User


class FeedbackStatus(str, Enum):
    """Moderation status of a feedback entry."""
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class FeedbackCategory(str, Enum):
    """Feedback category enumeration."""
    GENERAL = "General"
    BUG = "Bug"
    FEATURE_REQUEST = "Feature Request"
    PERFORMANCE = "Performance"


class Feedback(RecordMixin, Base):
    """Customer feedback awaiting moderation."""

    __tablename__ = "feedback"

    user_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True
    )
    status: Mapped[FeedbackStatus] = mapped_column(
        String(20),
        nullable=False,
        default=FeedbackStatus.PENDING.value,
        index=True
    )
    category: Mapped[FeedbackCategory] = mapped_column(
        String(32),
        nullable=False,
        default=FeedbackCategory.GENERAL.value,
        index=True
    )
    responses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    customer: Mapped["User"] = relationship("User", lazy="raise")

    def __repr__(self) -> str:
        return f"<Feedback(id={self.id}, status={self.status}, category={self.category})>"
