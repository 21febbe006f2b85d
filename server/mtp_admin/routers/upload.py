"""Tour image upload router."""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import get_current_admin
from ..core.exceptions import ApiException, InternalServerError
from ..core.responses import success_response
from ..schemas.common import ApiResponse
from ..schemas.tour import UploadResult
from ..services.tour_service import TourService
from ..services.upload_service import UploadService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/upload",
    tags=["upload"],
    dependencies=[Depends(get_current_admin)],
)


def get_upload_service() -> UploadService:
    return UploadService()


DB_DEPENDENCY = Depends(get_db)
UPLOAD_DEPENDENCY = Depends(get_upload_service)


@router.post("", response_model=ApiResponse[UploadResult])
async def upload_images(
    images: List[UploadFile] = File(default=[]),
    tour_id: Optional[UUID] = Form(None),
    db: AsyncSession = DB_DEPENDENCY,
    uploads: UploadService = UPLOAD_DEPENDENCY
) -> JSONResponse:
    """
    Store tour images and return their public paths.

    When ``tour_id`` is given the paths are also appended to that tour's
    gallery. Non-image parts are ignored.
    """
    try:
        tours = TourService(db)
        # Resolve the tour first so nothing is written for an unknown id
        if tour_id is not None:
            await tours.get_by_id_or_raise(tour_id)

        paths = await uploads.save_tour_images(images)
        if tour_id is not None and paths:
            await tours.add_images(tour_id, paths)

        message = "Images uploaded successfully" if paths else "No files uploaded"
        return success_response(UploadResult(paths=paths, tour_id=tour_id), message=message)

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error uploading images", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to upload images")
