"""Feedback router: public submission and admin moderation."""

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
from ..schemas.feedback import (
    FeedbackCreate,
    FeedbackOut,
    FeedbackResponseCreate,
    FeedbackStatusUpdate,
    FeedbackUpdate,
)
from ..services.feedback_service import FeedbackService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/feedback", tags=["feedback"])

DB_DEPENDENCY = Depends(get_db)
ADMIN_DEPENDENCY = Depends(get_current_admin)
ADMIN_ONLY = [ADMIN_DEPENDENCY]


@router.get("", response_model=ApiResponse[List[FeedbackOut]], dependencies=ADMIN_ONLY)
async def list_feedback(
    search: Optional[str] = Query(None, description="Matches the feedback message"),
    status: Optional[str] = Query(None, description="Pending, Approved, Rejected or all"),
    category: Optional[str] = Query(None, description="General, Bug, Feature Request, Performance or all"),
    sort_by: Optional[str] = Query(None),
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """List feedback, most recent first."""
    try:
        entries = await FeedbackService(db).list(
            search=search, sort_by=sort_by, status=status, category=category
        )
        return success_response([FeedbackOut.model_validate(entry) for entry in entries])

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing feedback", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch feedback")


@router.post("", response_model=ApiResponse[FeedbackOut], status_code=201)
async def create_feedback(request: FeedbackCreate, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Submit feedback for an existing customer. Open to the public site."""
    try:
        entry = await FeedbackService(db).create(request.model_dump())
        return success_response(
            FeedbackOut.model_validate(entry),
            message="Feedback submitted successfully",
            status_code=201,
        )

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error creating feedback", extra={"user_id": str(request.user_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to create feedback")


@router.post("/response", response_model=ApiResponse[FeedbackOut])
async def respond_to_feedback(
    request: FeedbackResponseCreate,
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    """Append a reply; the author defaults to the signed-in admin."""
    try:
        entry = await FeedbackService(db).append_response(
            request.feedback_id, request.message, responded_by=request.responded_by or str(admin.id)
        )
        return success_response(FeedbackOut.model_validate(entry), message="Response added")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error adding feedback response", extra={"feedback_id": str(request.feedback_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to add response")


@router.get("/{feedback_id}", response_model=ApiResponse[FeedbackOut], dependencies=ADMIN_ONLY)
async def get_feedback(feedback_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        entry = await FeedbackService(db).get_by_id_or_raise(feedback_id)
        return success_response(FeedbackOut.model_validate(entry))

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error fetching feedback", extra={"feedback_id": str(feedback_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch feedback")


@router.put("/{feedback_id}", response_model=ApiResponse[FeedbackOut], dependencies=ADMIN_ONLY)
async def update_feedback(
    feedback_id: UUID,
    request: FeedbackUpdate,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    try:
        entry = await FeedbackService(db).update(feedback_id, request.model_dump(exclude_unset=True))
        return success_response(FeedbackOut.model_validate(entry), message="Feedback updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating feedback", extra={"feedback_id": str(feedback_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update feedback")


@router.patch("/{feedback_id}/status", response_model=ApiResponse[FeedbackOut], dependencies=ADMIN_ONLY)
async def update_feedback_status(
    feedback_id: UUID,
    request: FeedbackStatusUpdate,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Approve or reject feedback."""
    try:
        entry = await FeedbackService(db).set_field(feedback_id, "status", request.status)
        return success_response(FeedbackOut.model_validate(entry), message="Status updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating feedback status", extra={"feedback_id": str(feedback_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update status")


@router.delete("/{feedback_id}", response_model=ApiResponse[None], dependencies=ADMIN_ONLY)
async def delete_feedback(feedback_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        await FeedbackService(db).delete(feedback_id)
        return success_response(message="Feedback deleted successfully")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error deleting feedback", extra={"feedback_id": str(feedback_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to delete feedback")
