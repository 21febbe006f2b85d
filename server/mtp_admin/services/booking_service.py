"""Booking service for reservations and their payment state."""

import logging
from uuid import UUID

from sqlalchemy import case, func, select

from ..models.booking import Booking, BookingStatus
from ..schemas.booking import BookingSummary
from .base import CrudService

logger = logging.getLogger(__name__)


class BookingService(CrudService[Booking]):
    """Service for booking-related operations."""

    model = Booking
    resource_type = "booking"
    search_fields = ("package_name", "name", "email", "phone")
    sort_options = {
        "date": ("date", True),
        "name": ("name", False),
        "package_name": ("package_name", False),
        "created_at": ("created_at", True),
    }
    default_sort = "date"

    async def summary(self) -> BookingSummary:
        """Count bookings by status and total the confirmed revenue."""
        confirmed = Booking.status == BookingStatus.CONFIRMED.value
        stmt = select(
            func.count(Booking.id),
            func.count(case((confirmed, 1))),
            func.count(case((Booking.status == BookingStatus.PENDING.value, 1))),
            func.coalesce(func.sum(case((confirmed, Booking.amount), else_=0)), 0),
        )
        total, confirmed_count, pending_count, revenue = (await self.db.execute(stmt)).one()
        return BookingSummary(
            total=total,
            confirmed=confirmed_count,
            pending=pending_count,
            revenue=float(revenue or 0),
        )

    async def send_message(self, booking_id: UUID | str, message: str) -> Booking:
        """
        Record a message for the booking's customer.

        Delivery is out of band; the message is written to the log keyed by
        the customer's e-mail.

        Raises:
            NotFoundError: If the booking does not exist
        """
        booking = await self.get_by_id_or_raise(booking_id)
        logger.info(
            "Message to booking customer",
            extra={"booking_id": str(booking.id), "email": booking.email, "body": message}
        )
        return booking
