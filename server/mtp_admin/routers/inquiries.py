"""Inquiry router: public submission and admin follow-up."""

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
from ..models.admin import Admin
from ..schemas.common import ApiResponse
from ..schemas.inquiry import (
    InquiryAssignRequest,
    InquiryCreate,
    InquiryOut,
    InquiryResponseCreate,
    InquiryUpdate,
)
from ..schemas.support_ticket import TicketPriorityUpdate, TicketStatusUpdate
from ..services.inquiry_service import InquiryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/inquiries", tags=["inquiries"])

DB_DEPENDENCY = Depends(get_db)
ADMIN_DEPENDENCY = Depends(get_current_admin)
ADMIN_ONLY = [ADMIN_DEPENDENCY]


@router.get("", response_model=ApiResponse[List[InquiryOut]], dependencies=ADMIN_ONLY)
async def list_inquiries(
    search: Optional[str] = Query(None, description="Matches name, e-mail, subject or message"),
    status: Optional[str] = Query(None, description="Pending, In_Progress, Resolved, Closed or all"),
    sort_by: Optional[str] = Query(None),
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    try:
        inquiries = await InquiryService(db).list(search=search, sort_by=sort_by, status=status)
        return success_response([InquiryOut.model_validate(inquiry) for inquiry in inquiries])

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing inquiries", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch inquiries")


@router.post("", response_model=ApiResponse[InquiryOut], status_code=201)
async def create_inquiry(request: InquiryCreate, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Submit an inquiry. Open to the public site."""
    try:
        inquiry = await InquiryService(db).create(request.model_dump())
        return success_response(
            InquiryOut.model_validate(inquiry),
            message="Inquiry submitted successfully",
            status_code=201,
        )

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error creating inquiry", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to create inquiry")


@router.post("/response", response_model=ApiResponse[InquiryOut])
async def respond_to_inquiry(
    request: InquiryResponseCreate,
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    """Append a reply written by the signed-in admin."""
    try:
        inquiry = await InquiryService(db).append_response(
            request.inquiry_id, request.message, responded_by=str(admin.id)
        )
        return success_response(InquiryOut.model_validate(inquiry), message="Response added")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error adding inquiry response", extra={"inquiry_id": str(request.inquiry_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to add response")


@router.get("/{inquiry_id}", response_model=ApiResponse[InquiryOut], dependencies=ADMIN_ONLY)
async def get_inquiry(inquiry_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        inquiry = await InquiryService(db).get_by_id_or_raise(inquiry_id)
        return success_response(InquiryOut.model_validate(inquiry))

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error fetching inquiry", extra={"inquiry_id": str(inquiry_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch inquiry")


@router.put("/{inquiry_id}", response_model=ApiResponse[InquiryOut], dependencies=ADMIN_ONLY)
async def update_inquiry(
    inquiry_id: UUID,
    request: InquiryUpdate,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    try:
        inquiry = await InquiryService(db).update(inquiry_id, request.model_dump(exclude_unset=True))
        return success_response(InquiryOut.model_validate(inquiry), message="Inquiry updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating inquiry", extra={"inquiry_id": str(inquiry_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update inquiry")


@router.patch("/{inquiry_id}/assign", response_model=ApiResponse[InquiryOut], dependencies=ADMIN_ONLY)
async def assign_inquiry(
    inquiry_id: UUID,
    request: InquiryAssignRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Assign the inquiry to an agent; null clears the assignment."""
    try:
        inquiry = await InquiryService(db).assign(inquiry_id, request.assigned_to)
        return success_response(InquiryOut.model_validate(inquiry), message="Assignment updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error assigning inquiry", extra={"inquiry_id": str(inquiry_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to assign agent")


@router.patch("/{inquiry_id}/status", response_model=ApiResponse[InquiryOut], dependencies=ADMIN_ONLY)
async def update_inquiry_status(
    inquiry_id: UUID,
    request: TicketStatusUpdate,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    try:
        inquiry = await InquiryService(db).set_field(inquiry_id, "status", request.status)
        return success_response(InquiryOut.model_validate(inquiry), message="Status updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating inquiry status", extra={"inquiry_id": str(inquiry_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update status")


@router.patch("/{inquiry_id}/priority", response_model=ApiResponse[InquiryOut], dependencies=ADMIN_ONLY)
async def update_inquiry_priority(
    inquiry_id: UUID,
    request: TicketPriorityUpdate,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    try:
        inquiry = await InquiryService(db).set_field(inquiry_id, "priority", request.priority)
        return success_response(InquiryOut.model_validate(inquiry), message="Priority updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating inquiry priority", extra={"inquiry_id": str(inquiry_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update priority")


@router.delete("/{inquiry_id}", response_model=ApiResponse[None], dependencies=ADMIN_ONLY)
async def delete_inquiry(inquiry_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        await InquiryService(db).delete(inquiry_id)
        return success_response(message="Inquiry deleted successfully")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error deleting inquiry", extra={"inquiry_id": str(inquiry_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to delete inquiry")
