"""Dashboard router: headline numbers, tour performance and monthly trends."""

import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import get_current_admin
from ..core.exceptions import ApiException, InternalServerError
from ..core.responses import success_response
from ..schemas.common import ApiResponse
from ..schemas.dashboard import DashboardSummary, DashboardTrends, TourStat
from ..services.dashboard_service import DashboardService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(get_current_admin)],
)

DB_DEPENDENCY = Depends(get_db)


@router.get("/summary", response_model=ApiResponse[DashboardSummary])
async def dashboard_summary(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        return success_response(await DashboardService(db).summary())

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error computing dashboard summary", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch dashboard summary")


@router.get("/tour-stats", response_model=ApiResponse[List[TourStat]])
async def tour_stats(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Confirmed bookings and revenue of recent published tours."""
    try:
        return success_response(await DashboardService(db).tour_stats())

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error computing tour stats", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch tour stats")


@router.get("/trends", response_model=ApiResponse[DashboardTrends])
async def booking_trends(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Bookings and revenue for the last six months."""
    try:
        return success_response(await DashboardService(db).trends())

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error computing trends", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch trends")
