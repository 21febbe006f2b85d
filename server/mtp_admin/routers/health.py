"""Health, readiness and service info endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.database import get_db, ping_db
from ..core.observability import SERVICE_NAME, SERVICE_VERSION
from ..schemas.health import HealthResponse, HealthStatus, ReadinessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

DB_DEPENDENCY = Depends(get_db)


@router.get("/health", response_model=HealthResponse)
async def health_check() -> JSONResponse:
    """
    Liveness check.

    Returns current service status and timestamp.
    """
    response_data = HealthResponse(
        status=HealthStatus.HEALTHY,
        timestamp=datetime.now(timezone.utc),
        version=SERVICE_VERSION,
    )

    logger.debug(
        "Health check requested",
        extra={"status": response_data.status.value}
    )

    return JSONResponse(
        status_code=200,
        content=response_data.model_dump(mode="json")
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Readiness check; answers 503 while the database is unreachable."""
    try:
        database_ok = await ping_db(db)
    except Exception as e:
        logger.warning("Readiness check failed", extra={"error": str(e)})
        database_ok = False

    response_data = ReadinessResponse(
        status=HealthStatus.READY if database_ok else HealthStatus.NOT_READY,
        checks={"database": "ok" if database_ok else "unavailable"},
    )
    return JSONResponse(
        status_code=200 if database_ok else 503,
        content=response_data.model_dump(mode="json")
    )


@router.get("/info")
async def service_info() -> JSONResponse:
    """Describe the running service."""
    return JSONResponse(
        status_code=200,
        content={
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "description": "Mountain Travels Pakistan admin dashboard API",
            "environment": settings.environment,
            "debug": settings.debug,
            "endpoints": {
                "health": "/health",
                "readiness": "/ready",
                "metrics": "/metrics",
                "docs": "/docs" if settings.debug else None,
            },
        }
    )
