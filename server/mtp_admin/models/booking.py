"""Booking model definition."""

from datetime import datetime
from enum import Enum

from sqlalchemy import CheckConstraint, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base
from .base import RecordMixin


class BookingStatus(str, Enum):
    """Booking status enumeration."""
    CONFIRMED = "confirmed"
    PENDING = "pending"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    """Payment status enumeration."""
    PAID = "paid"
    PARTIAL = "partial"
    UNPAID = "unpaid"
    REFUNDED = "refunded"


class Booking(RecordMixin, Base):
    """Customer reservation against a tour package."""

    __tablename__ = "bookings"

    # Package reference; kept as a plain string so bookings outlive tours
    package_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    package_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    # Trip
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    person: Mapped[int] = mapped_column(Integer, nullable=False)

    # Customer contact
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)

    # Status and payment
    status: Mapped[BookingStatus] = mapped_column(
        String(20),
        nullable=False,
        default=BookingStatus.PENDING.value,
        index=True
    )
    payment_status: Mapped[PaymentStatus] = mapped_column(
        String(20),
        nullable=False,
        default=PaymentStatus.UNPAID.value
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("person >= 1", name="ck_booking_person_positive"),
        CheckConstraint("amount >= 0", name="ck_booking_amount_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, package='{self.package_name}', status={self.status})>"
