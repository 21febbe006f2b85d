"""Agent model definition."""

from enum import Enum

from sqlalchemy import JSON, Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base
from .base import RecordMixin


class PersonnelStatus(str, Enum):
    """Employment status shared by agents and staff."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on_leave"


class Agent(RecordMixin, Base):
    """Agent that tickets and inquiries can be assigned to."""

    __tablename__ = "agents"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    role: Mapped[str] = mapped_column(String(128), nullable=False)
    department: Mapped[str] = mapped_column(String(128), nullable=False)
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    status: Mapped[PersonnelStatus] = mapped_column(
        String(20),
        nullable=False,
        default=PersonnelStatus.ACTIVE.value,
        index=True
    )
    expertise: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    # Ids of support tickets assigned to this agent, stored as strings
    assigned_tickets: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    profile_image: Mapped[str | None] = mapped_column(String(512), nullable=True)

    @property
    def is_assignable(self) -> bool:
        return self.is_available and self.status == PersonnelStatus.ACTIVE

    def __repr__(self) -> str:
        return f"<Agent(id={self.id}, name='{self.name}', status={self.status})>"
