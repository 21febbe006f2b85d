"""Admin profile router: profile edits and avatar upload."""

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import get_current_admin
from ..core.exceptions import ApiException, InternalServerError
from ..core.responses import success_response
from ..models.admin import Admin
from ..schemas.auth import AdminOut, AdminProfileUpdate
from ..schemas.common import ApiResponse
from ..services.admin_service import AdminService
from ..services.upload_service import UploadService
from .upload import get_upload_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])

DB_DEPENDENCY = Depends(get_db)
ADMIN_DEPENDENCY = Depends(get_current_admin)
UPLOAD_DEPENDENCY = Depends(get_upload_service)


@router.get("/profile", response_model=ApiResponse[AdminOut])
async def get_profile(admin: Admin = ADMIN_DEPENDENCY) -> JSONResponse:
    return success_response(AdminOut.model_validate(admin))


@router.put("/profile", response_model=ApiResponse[AdminOut])
async def update_profile(
    request: AdminProfileUpdate,
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    """Update name, e-mail or password; an empty password keeps the current one."""
    try:
        updated = await AdminService(db).update_profile(admin, request)
        return success_response(AdminOut.model_validate(updated), message="Profile updated successfully")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating profile", extra={"admin_id": str(admin.id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update profile")


@router.post("/avatar", response_model=ApiResponse[AdminOut])
async def upload_avatar(
    avatar: UploadFile = File(...),
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY,
    uploads: UploadService = UPLOAD_DEPENDENCY
) -> JSONResponse:
    """Store a new avatar image (at most 5 MB) and set it on the profile."""
    try:
        path = await uploads.save_avatar(avatar)
        updated = await AdminService(db).update(admin.id, {"avatar": path})
        return success_response(AdminOut.model_validate(updated), message="Avatar uploaded successfully")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error uploading avatar", extra={"admin_id": str(admin.id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to upload avatar")
