"""Booking router: public booking submission and admin booking management."""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import get_current_admin
from ..core.exceptions import ApiException, InternalServerError
from ..core.responses import success_response
from ..schemas.booking import (
    BookingCreate,
    BookingMessage,
    BookingOut,
    BookingStatusUpdate,
    BookingSummary,
    BookingUpdate,
    PaymentStatusUpdate,
)
from ..schemas.common import ApiResponse
from ..services.booking_service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bookings", tags=["bookings"])

DB_DEPENDENCY = Depends(get_db)
ADMIN_ONLY = [Depends(get_current_admin)]


@router.get("", response_model=ApiResponse[List[BookingOut]], dependencies=ADMIN_ONLY)
async def list_bookings(
    search: Optional[str] = Query(None, description="Matches package name, customer name, e-mail or phone"),
    status: Optional[str] = Query(None, description="confirmed, pending, cancelled or all"),
    sort_by: Optional[str] = Query(None, description="date, name, package_name or created_at"),
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """List bookings; newest trip date first unless sorted otherwise."""
    try:
        bookings = await BookingService(db).list(search=search, sort_by=sort_by, status=status)
        return success_response([BookingOut.model_validate(booking) for booking in bookings])

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing bookings", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch bookings")


@router.post("", response_model=ApiResponse[BookingOut], status_code=201)
async def create_booking(request: BookingCreate, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Submit a booking. Open to the public site."""
    try:
        booking = await BookingService(db).create(request.model_dump())
        return success_response(
            BookingOut.model_validate(booking),
            message="Booking created successfully",
            status_code=201,
        )

    except ApiException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in booking creation",
            extra={"package_id": request.package_id, "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(detail="Failed to create booking")


@router.get("/summary", response_model=ApiResponse[BookingSummary], dependencies=ADMIN_ONLY)
async def booking_summary(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Booking counts by status and total confirmed revenue."""
    try:
        return success_response(await BookingService(db).summary())

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error in booking summary", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch booking summary")


@router.get("/{booking_id}", response_model=ApiResponse[BookingOut], dependencies=ADMIN_ONLY)
async def get_booking(booking_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        booking = await BookingService(db).get_by_id_or_raise(booking_id)
        return success_response(BookingOut.model_validate(booking))

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error fetching booking", extra={"booking_id": str(booking_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch booking")


@router.put("/{booking_id}", response_model=ApiResponse[BookingOut], dependencies=ADMIN_ONLY)
async def update_booking(
    booking_id: UUID,
    request: BookingUpdate,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Replace the supplied fields of a booking."""
    try:
        booking = await BookingService(db).update(booking_id, request.model_dump(exclude_unset=True))
        return success_response(BookingOut.model_validate(booking), message="Booking updated successfully")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating booking", extra={"booking_id": str(booking_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update booking")


@router.api_route(
    "/{booking_id}/status",
    methods=["PUT", "PATCH"],
    response_model=ApiResponse[BookingOut],
    dependencies=ADMIN_ONLY,
)
async def update_booking_status(
    booking_id: UUID,
    request: BookingStatusUpdate,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Confirm, cancel or reopen a booking."""
    try:
        booking = await BookingService(db).set_field(booking_id, "status", request.status)
        return success_response(BookingOut.model_validate(booking), message="Booking status updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating booking status", extra={"booking_id": str(booking_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update booking status")


@router.patch("/{booking_id}/payment-status", response_model=ApiResponse[BookingOut], dependencies=ADMIN_ONLY)
async def update_payment_status(
    booking_id: UUID,
    request: PaymentStatusUpdate,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Record a payment state change."""
    try:
        booking = await BookingService(db).set_field(booking_id, "payment_status", request.payment_status)
        return success_response(BookingOut.model_validate(booking), message="Payment status updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating payment status", extra={"booking_id": str(booking_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update payment status")


@router.post("/{booking_id}/message", response_model=ApiResponse[None], dependencies=ADMIN_ONLY)
async def message_customer(
    booking_id: UUID,
    request: BookingMessage,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Send a message to the booking's customer."""
    try:
        await BookingService(db).send_message(booking_id, request.message)
        return success_response(message="Message sent successfully")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error sending booking message", extra={"booking_id": str(booking_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to send message")


@router.delete("/{booking_id}", response_model=ApiResponse[None], dependencies=ADMIN_ONLY)
async def delete_booking(booking_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        await BookingService(db).delete(booking_id)
        return success_response(message="Booking deleted successfully")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error deleting booking", extra={"booking_id": str(booking_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to delete booking")
