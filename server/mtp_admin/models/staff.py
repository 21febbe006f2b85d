"""Staff model definition."""

from datetime import date
from enum import Enum

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base
from .agent import PersonnelStatus
from .base import RecordMixin


class StaffRole(str, Enum):
    """Staff role enumeration."""
    ADMIN = "Admin"
    SUPPORT = "Support"
    MANAGER = "Manager"
    TOUR_GUIDE = "TourGuide"
    AGENT = "Agent"
    CONTENT_CREATOR = "ContentCreator"
    TRAVELER = "Traveler"


class Staff(RecordMixin, Base):
    """Internal staff member listed on the settings page."""

    __tablename__ = "staff"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    role: Mapped[StaffRole] = mapped_column(String(32), nullable=False)
    status: Mapped[PersonnelStatus] = mapped_column(
        String(20),
        nullable=False,
        default=PersonnelStatus.ACTIVE.value,
    )
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    address: Mapped[str | None] = mapped_column(String(512), nullable=True)
    department: Mapped[str | None] = mapped_column(String(128), nullable=True)
    joining_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Staff(id={self.id}, name='{self.name}', role={self.role})>"
