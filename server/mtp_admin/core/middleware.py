"""Custom middleware for request tracking, logging, and page access control."""

import time
import uuid
import logging
from typing import Callable, Optional
from fastapi import Request, Response
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .config import settings
from .observability import metrics_collector
from .security import decode_session_token


logger = logging.getLogger(__name__)

# Dashboard pages that require an admin session
PROTECTED_PAGE_PREFIXES = ("/dashboard", "/support", "/tours")
PROTECTED_PAGES = ("/feedbacks", "/inquiries", "/bookings", "/settings", "/profile")
AUTH_PAGES = ("/signin", "/signup")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique request ID to each request.

    The request ID is either extracted from the X-Request-ID header
    or generated if not present, and is echoed back on the response.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and add request ID."""
        request_id = request.headers.get(self.header_name)
        if not request_id:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[self.header_name] = request_id

        return response


def is_protected_page(path: str) -> bool:
    """Return True if the path is a dashboard page that needs a session."""
    if path in PROTECTED_PAGES:
        return True
    return any(path == prefix or path.startswith(prefix + "/") for prefix in PROTECTED_PAGE_PREFIXES)


class PageAuthMiddleware(BaseHTTPMiddleware):
    """
    Redirects page requests based on the admin session cookie.

    Protected pages without a valid session go to /signin; the sign-in
    and sign-up pages with a valid session go to /dashboard. API routes
    are never redirected, they are guarded by dependencies instead.
    """

    def __init__(self, app: ASGIApp, signin_path: str = "/signin", home_path: str = "/dashboard"):
        super().__init__(app)
        self.signin_path = signin_path
        self.home_path = home_path

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if path.startswith("/api"):
            return await call_next(request)

        token = request.cookies.get(settings.session_cookie_name)
        has_session = decode_session_token(token) is not None

        if is_protected_page(path) and not has_session:
            return RedirectResponse(url=self.signin_path)
        if path in AUTH_PAGES and has_session:
            return RedirectResponse(url=self.home_path)

        return await call_next(request)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs HTTP requests and responses.

    Logs request and response information including timing,
    status codes, and correlation IDs, and records request metrics.
    """

    def __init__(
        self,
        app: ASGIApp,
        log_request_body: bool = False,
        skip_paths: Optional[list] = None,
    ):
        super().__init__(app)
        self.log_request_body = log_request_body
        self.skip_paths = skip_paths or ["/health", "/metrics", "/favicon.ico"]

    def _should_log(self, path: str) -> bool:
        """Check if request should be logged."""
        return path not in self.skip_paths

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request."""
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host

        return "unknown"

    def _endpoint_label(self, request: Request) -> str:
        # Route templates keep metric label cardinality bounded
        route = request.scope.get("route")
        return getattr(route, "path", request.url.path)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and log information."""
        if not self._should_log(request.url.path):
            return await call_next(request)

        start_time = time.time()
        request_id = getattr(request.state, "request_id", "unknown")

        log_data = {
            "event": "request_started",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": self._get_client_ip(request),
            "user_agent": request.headers.get("User-Agent", "unknown"),
            "content_type": request.headers.get("Content-Type"),
            "content_length": request.headers.get("Content-Length"),
        }

        content_type = request.headers.get("Content-Type", "")
        if (
            self.log_request_body
            and request.method in ["POST", "PUT", "PATCH"]
            and content_type.startswith("application/json")
        ):
            body = await request.body()
            if body:
                log_data["request_body"] = body.decode("utf-8", errors="replace")[:1000]

        logger.info("HTTP request started", extra=log_data)

        try:
            response = await call_next(request)
            status_code = response.status_code
            error = None
        except Exception as e:
            status_code = 500
            error = str(e)
            logger.error("Unhandled error in request pipeline", extra={"request_id": request_id}, exc_info=True)
            response = JSONResponse(
                status_code=500,
                content={
                    "success": False,
                    "error": "Internal Server Error",
                    "message": "An unexpected error occurred while processing the request",
                    "request_id": request_id,
                },
            )

        duration = time.time() - start_time
        metrics_collector.record_request(
            request.method, self._endpoint_label(request), status_code, duration
        )

        log_data.update({
            "event": "request_completed",
            "status_code": status_code,
            "duration_ms": round(duration * 1000, 2),
            "response_size": response.headers.get("Content-Length"),
        })

        if error:
            log_data["error"] = error

        if status_code >= 500:
            logger.error("HTTP request completed with server error", extra=log_data)
        elif status_code >= 400:
            logger.warning("HTTP request completed with client error", extra=log_data)
        else:
            logger.info("HTTP request completed successfully", extra=log_data)

        return response


def setup_middleware(app, enable_logging: bool = True) -> None:
    """
    Setup all middleware on the FastAPI app.

    Args:
        app: FastAPI application instance
        enable_logging: Whether to enable request logging middleware
    """
    # Last added runs first
    app.add_middleware(PageAuthMiddleware)

    if enable_logging:
        # Request bodies are only logged in development
        app.add_middleware(LoggingMiddleware, log_request_body=settings.debug)

    app.add_middleware(RequestIDMiddleware)
