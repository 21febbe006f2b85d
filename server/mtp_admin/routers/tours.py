"""Tour router for tour management operations."""

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
from ..schemas.tour import TourCreate, TourOut, TourStatusUpdate, TourSummary, TourUpdate
from ..services.tour_service import TourService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/tours",
    tags=["tours"],
    dependencies=[Depends(get_current_admin)],
)

DB_DEPENDENCY = Depends(get_db)


@router.get("", response_model=ApiResponse[List[TourSummary]])
async def list_tours(
    search: Optional[str] = Query(None, description="Matches title, location or category"),
    status: Optional[str] = Query(None, description="Draft, Published, Archived or all"),
    sort_by: Optional[str] = Query(None, description="created_at, title, price or duration"),
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """List tours with their summary fields."""
    try:
        tours = await TourService(db).list(search=search, sort_by=sort_by, status=status)
        return success_response([TourSummary.model_validate(tour) for tour in tours])

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing tours", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch tours")


@router.post("", response_model=ApiResponse[TourOut], status_code=201)
async def create_tour(request: TourCreate, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """
    Create a new tour.

    Loose form input (image objects, select options, comma-separated
    related tours) is normalised by the request schema.
    """
    try:
        tour = await TourService(db).create(request.model_dump())
        return success_response(
            TourOut.model_validate(tour),
            message="Tour created successfully",
            status_code=201,
        )

    except ApiException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in tour creation",
            extra={"title": request.title, "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(detail="Failed to create tour")


@router.get("/{tour_id}", response_model=ApiResponse[TourOut])
async def get_tour(tour_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Get one tour with all of its details."""
    try:
        tour = await TourService(db).get_by_id_or_raise(tour_id)
        return success_response(TourOut.model_validate(tour))

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error fetching tour", extra={"tour_id": str(tour_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail=f"Failed to get tour with ID: {tour_id}")


@router.put("/{tour_id}", response_model=ApiResponse[TourOut])
async def update_tour(tour_id: UUID, request: TourUpdate, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Replace the supplied fields of a tour."""
    try:
        tour = await TourService(db).update(tour_id, request.model_dump(exclude_unset=True))
        return success_response(TourOut.model_validate(tour), message="Tour updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating tour", extra={"tour_id": str(tour_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update tour")


@router.patch("/{tour_id}/status", response_model=ApiResponse[TourOut])
async def update_tour_status(
    tour_id: UUID,
    request: TourStatusUpdate,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Publish, archive or return a tour to draft."""
    try:
        tour = await TourService(db).set_field(tour_id, "status", request.status)
        return success_response(TourOut.model_validate(tour), message="Tour status updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating tour status", extra={"tour_id": str(tour_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update tour status")


@router.delete("/{tour_id}", response_model=ApiResponse[None])
async def delete_tour(tour_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Delete a tour."""
    try:
        await TourService(db).delete(tour_id)
        return success_response(message=f"Tour deleted successfully with ID: {tour_id}")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error deleting tour", extra={"tour_id": str(tour_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to delete tour")
