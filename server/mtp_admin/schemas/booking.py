"""Booking-related Pydantic schemas."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models.booking import BookingStatus, PaymentStatus
from .common import EMAIL_PATTERN, RecordOut, RequestModel


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _check_trip_dates(start: datetime, end: datetime) -> None:
    if _as_utc(end) < _as_utc(start):
        raise ValueError("end_date must not be before date")


class BookingCreate(RequestModel):
    """Request schema for creating a booking."""

    package_name: str = Field(..., min_length=1, max_length=255, description="Tour title at booking time")
    package_id: str = Field(..., min_length=1, max_length=64, description="Booked tour ID")
    date: datetime = Field(..., description="Trip start (ISO 8601)")
    end_date: datetime = Field(..., description="Trip end (ISO 8601)")
    person: int = Field(..., ge=1, description="Number of travellers")
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    phone: str = Field(..., min_length=1, max_length=64)
    status: BookingStatus = Field(BookingStatus.PENDING)
    payment_status: PaymentStatus = Field(PaymentStatus.UNPAID)
    amount: float = Field(..., ge=0, description="Total amount")
    currency: str = Field("USD", min_length=3, max_length=3, description="ISO 4217 currency code")
    notes: Optional[str] = None

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode="after")
    def end_not_before_start(self) -> "BookingCreate":
        _check_trip_dates(self.date, self.end_date)
        return self


class BookingUpdate(RequestModel):
    """Request schema for updating a booking; only supplied fields change."""

    package_name: Optional[str] = Field(None, min_length=1, max_length=255)
    package_id: Optional[str] = Field(None, min_length=1, max_length=64)
    date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    person: Optional[int] = Field(None, ge=1)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    phone: Optional[str] = Field(None, min_length=1, max_length=64)
    status: Optional[BookingStatus] = None
    payment_status: Optional[PaymentStatus] = None
    amount: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    notes: Optional[str] = None

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: Optional[str]) -> Optional[str]:
        return v.upper() if v else v

    @model_validator(mode="after")
    def end_not_before_start(self) -> "BookingUpdate":
        if self.date is not None and self.end_date is not None:
            _check_trip_dates(self.date, self.end_date)
        return self


class BookingStatusUpdate(RequestModel):
    """Request schema for changing a booking's status."""

    status: BookingStatus


class PaymentStatusUpdate(RequestModel):
    """Request schema for changing a booking's payment status."""

    payment_status: PaymentStatus


class BookingMessage(RequestModel):
    """Message to send to the customer of a booking."""

    message: str = Field(..., min_length=1, max_length=5000)


class BookingOut(RecordOut):
    """Booking response schema."""

    package_name: str
    package_id: str
    date: datetime
    end_date: datetime
    person: int
    name: str
    email: str
    phone: str
    status: BookingStatus
    payment_status: PaymentStatus
    amount: float
    currency: str
    notes: Optional[str] = None


class BookingSummary(BaseModel):
    """Booking counts and confirmed revenue."""

    total: int = Field(..., ge=0)
    confirmed: int = Field(..., ge=0)
    pending: int = Field(..., ge=0)
    revenue: float = Field(..., ge=0, description="Sum of confirmed booking amounts")
