"""Support ticket model and the enums shared with inquiries."""

from enum import Enum
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import JSON, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base
from .base import RecordMixin

if TYPE_CHECKING:
    from .agent import Agent
    from .user import User


class TicketStatus(str, Enum):
    """Status of a support ticket or inquiry."""
    PENDING = "Pending"
    IN_PROGRESS = "In_Progress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class TicketPriority(str, Enum):
    """Priority of a support ticket or inquiry."""
    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"
    URGENT = "Urgent"


class SupportTicket(RecordMixin, Base):
    """Customer support ticket."""

    __tablename__ = "support_tickets"

    subject: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[TicketStatus] = mapped_column(
        String(20),
        nullable=False,
        default=TicketStatus.PENDING.value,
        index=True
    )
    priority: Mapped[TicketPriority] = mapped_column(
        String(20),
        nullable=False,
        default=TicketPriority.NORMAL.value,
        index=True
    )

    user_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    assigned_to: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("agents.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    # Append-only list of {id, message, responded_by, responded_at}
    responses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    customer: Mapped["User"] = relationship("User", lazy="raise")
    assignee: Mapped[Optional["Agent"]] = relationship("Agent", lazy="raise")

    def __repr__(self) -> str:
        return f"<SupportTicket(id={self.id}, subject='{self.subject}', status={self.status})>"
