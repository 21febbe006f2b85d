"""Staff router for the settings page."""

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
from ..schemas.common import ApiResponse
from ..schemas.staff import StaffCreate, StaffOut, StaffStatusUpdate, StaffUpdate
from ..services.staff_service import StaffService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/staff",
    tags=["staff"],
    dependencies=[Depends(get_current_admin)],
)

DB_DEPENDENCY = Depends(get_db)


@router.get("", response_model=ApiResponse[List[StaffOut]])
async def list_staff(
    search: Optional[str] = Query(None, description="Matches name, e-mail or department"),
    sort_by: Optional[str] = Query(None, description="name, email, role, department, joining_date or created_at"),
    status: Optional[str] = Query(None, description="active, inactive, on_leave or all"),
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """List staff members in ascending order of the sort key."""
    try:
        members = await StaffService(db).list(search=search, sort_by=sort_by, status=status)
        return success_response([StaffOut.model_validate(member) for member in members])

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing staff", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch staff")


@router.post("", response_model=ApiResponse[StaffOut], status_code=201)
async def create_staff(request: StaffCreate, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Add a staff member; e-mails are unique."""
    try:
        member = await StaffService(db).create(request.model_dump())
        return success_response(StaffOut.model_validate(member), message="Staff member added", status_code=201)

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error creating staff member", extra={"email": request.email, "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to create staff member")


@router.get("/{staff_id}", response_model=ApiResponse[StaffOut])
async def get_staff(staff_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        member = await StaffService(db).get_by_id_or_raise(staff_id)
        return success_response(StaffOut.model_validate(member))

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error fetching staff member", extra={"staff_id": str(staff_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch staff member")


@router.put("/{staff_id}", response_model=ApiResponse[StaffOut])
async def update_staff(staff_id: UUID, request: StaffUpdate, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        member = await StaffService(db).update(staff_id, request.model_dump(exclude_unset=True))
        return success_response(StaffOut.model_validate(member), message="Staff member updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating staff member", extra={"staff_id": str(staff_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update staff member")


@router.patch("/{staff_id}/status", response_model=ApiResponse[StaffOut])
async def update_staff_status(
    staff_id: UUID,
    request: StaffStatusUpdate,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    try:
        member = await StaffService(db).set_field(staff_id, "status", request.status)
        return success_response(StaffOut.model_validate(member), message="Status updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating staff status", extra={"staff_id": str(staff_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update status")


@router.delete("/{staff_id}", response_model=ApiResponse[None])
async def delete_staff(staff_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        await StaffService(db).delete(staff_id)
        return success_response(message="Staff member deleted")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error deleting staff member", extra={"staff_id": str(staff_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to delete staff member")
