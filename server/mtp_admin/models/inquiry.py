"""Inquiry model definition."""

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import JSON, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base
from .base import RecordMixin
from .support_ticket import TicketPriority, TicketStatus

if TYPE_CHECKING:
    from .agent import Agent
    from .user import User


class Inquiry(RecordMixin, Base):
    """Pre-sales question submitted from the public site."""

    __tablename__ = "inquiries"

    # Contact details
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)

    subject: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[TicketStatus] = mapped_column(
        String(20),
        nullable=False,
        default=TicketStatus.PENDING.value,
        index=True
    )
    priority: Mapped[TicketPriority] = mapped_column(
        String(20),
        nullable=False,
        default=TicketPriority.NORMAL.value
    )

    user_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )
    assigned_to: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("agents.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    responses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    customer: Mapped[Optional["User"]] = relationship("User", lazy="raise")
    assignee: Mapped[Optional["Agent"]] = relationship("Agent", lazy="raise")

    def __repr__(self) -> str:
        return f"<Inquiry(id={self.id}, subject='{self.subject}', status={self.status})>"
