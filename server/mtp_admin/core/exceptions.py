"""API exceptions rendered in the dashboard's JSON envelope.

Every error body has the shape ``{"success": false, "error": <title>,
"message": <detail>, ...}`` where extra keys carry problem-specific
information (validation violations, resource ids, error ids).
"""

from typing import Any, Dict, List, Optional
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
import uuid
from datetime import datetime, timezone


logger = logging.getLogger(__name__)


class ApiException(HTTPException):
    """Base exception for errors returned to API clients."""

    def __init__(
        self,
        status_code: int,
        title: str,
        detail: Optional[str] = None,
        extensions: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize an API exception.

        Args:
            status_code: HTTP status code
            title: Short, human-readable summary of the problem type
            detail: Human-readable explanation specific to this occurrence
            extensions: Additional problem-specific information
            headers: HTTP headers to include in response
        """
        self.status_code = status_code
        self.title = title
        self.detail = detail or title
        self.extensions = extensions or {}

        self.body = {
            "success": False,
            "error": self.title,
            "message": self.detail,
        }
        self.body.update(self.extensions)

        super().__init__(
            status_code=status_code,
            detail=self.detail,
            headers=headers
        )


class ValidationError(ApiException):
    """Exception for bad input."""

    def __init__(
        self,
        detail: str = "The request data failed validation",
        violations: Optional[List[Dict[str, str]]] = None,
    ):
        extensions = {}
        if violations:
            extensions["violations"] = violations

        super().__init__(
            status_code=400,
            title="Validation Error",
            detail=detail,
            extensions=extensions,
        )


class AuthenticationError(ApiException):
    """Exception for a missing or invalid admin session."""

    def __init__(self, detail: str = "Authentication credentials are required"):
        super().__init__(
            status_code=401,
            title="Unauthorized",
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundError(ApiException):
    """Exception for resource not found errors."""

    def __init__(
        self,
        resource_type: str = "resource",
        resource_id: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        if not detail:
            detail = f"The requested {resource_type}"
            if resource_id:
                detail += f" with ID '{resource_id}'"
            detail += " could not be found"

        extensions = {
            "resource_type": resource_type,
        }
        if resource_id:
            extensions["resource_id"] = resource_id

        super().__init__(
            status_code=404,
            title="Resource Not Found",
            detail=detail,
            extensions=extensions,
        )


class ConflictError(ApiException):
    """Exception for resource conflict errors such as duplicate e-mails."""

    def __init__(
        self,
        detail: str = "The request conflicts with the current state of the resource",
        conflicting_resource: Optional[Dict[str, Any]] = None,
    ):
        extensions = {}
        if conflicting_resource:
            extensions["conflicting_resource"] = conflicting_resource

        super().__init__(
            status_code=409,
            title="Resource Conflict",
            detail=detail,
            extensions=extensions,
        )


class InternalServerError(ApiException):
    """Exception for internal server errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred while processing the request",
        error_id: Optional[str] = None,
    ):
        if not error_id:
            error_id = str(uuid.uuid4())

        super().__init__(
            status_code=500,
            title="Internal Server Error",
            detail=detail,
            extensions={
                "error_id": error_id,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )


def _location_to_path(location: tuple) -> str:
    return ".".join(str(part) for part in location)


async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    """
    Exception handler for API exceptions.

    Args:
        request: FastAPI request object
        exc: API exception

    Returns:
        JSONResponse: Envelope formatted error response
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.body,
        headers=exc.headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Convert request validation failures into a 400 envelope."""
    violations = [
        {"path": _location_to_path(error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]
    error = ValidationError(violations=violations)
    return JSONResponse(status_code=error.status_code, content=error.body)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all handler that converts unhandled exceptions to a 500 envelope.

    Args:
        request: FastAPI request object
        exc: Unhandled exception

    Returns:
        JSONResponse: Envelope formatted response
    """
    error = InternalServerError()
    logger.error(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "error_id": error.body["error_id"],
            "error": str(exc),
        },
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content=error.body,
    )
