"""Admin authentication router: sign-up, sign-in, sign-out and session lookup."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.database import get_db
from ..core.dependencies import get_current_admin
from ..core.exceptions import ApiException, AuthenticationError, InternalServerError
from ..core.observability import get_logger, metrics_collector
from ..core.responses import success_response
from ..core.security import create_session_token
from ..models.admin import Admin
from ..schemas.auth import AdminOut, SessionOut, SigninRequest, SignupRequest
from ..schemas.common import ApiResponse
from ..services.admin_service import AdminService

logger = logging.getLogger(__name__)
audit_log = get_logger("mtp_admin.auth")

router = APIRouter(prefix="/api/auth", tags=["auth"])

DB_DEPENDENCY = Depends(get_db)
ADMIN_DEPENDENCY = Depends(get_current_admin)


def set_session_cookie(response: Response, token: str) -> None:
    """Store the session token in an HTTP-only cookie."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )


def clear_session(response: Response) -> None:
    response.delete_cookie(key=settings.session_cookie_name, path="/")


@router.post("/signup", response_model=ApiResponse[AdminOut], status_code=201)
async def signup(request: SignupRequest, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Register a new admin account."""
    try:
        admin = await AdminService(db).register(request)
        audit_log.info("admin_signed_up", admin_id=str(admin.id), email=admin.email)
        return success_response(
            AdminOut.model_validate(admin),
            message="Admin registered successfully",
            status_code=201,
        )

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error in admin signup", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to register admin")


@router.post("/signin", response_model=ApiResponse[SessionOut])
async def signin(request: SigninRequest, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """
    Sign in with e-mail or admin name.

    Unknown accounts and wrong passwords get the same 401 answer.
    """
    try:
        admin = await AdminService(db).authenticate(request.identifier, request.password)
        if admin is None:
            metrics_collector.record_signin("rejected")
            audit_log.warning("admin_signin_rejected", identifier=request.identifier)
            raise AuthenticationError("Invalid credentials")

        token = create_session_token(str(admin.id), admin.name, admin.email)
        body = SessionOut(token=token, admin=AdminOut.model_validate(admin))
        response = success_response(body, message="Signed in successfully")
        set_session_cookie(response, token)

        metrics_collector.record_signin("accepted")
        audit_log.info("admin_signed_in", admin_id=str(admin.id))
        return response

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error in admin signin", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to sign in")


@router.post("/signout")
async def signout() -> JSONResponse:
    """Clear the session cookie."""
    response = success_response(message="Signed out successfully")
    clear_session(response)
    audit_log.info("admin_signed_out")
    return response


@router.get("/session", response_model=ApiResponse[AdminOut])
async def current_session(admin: Admin = ADMIN_DEPENDENCY) -> JSONResponse:
    """Return the signed-in admin."""
    return success_response(AdminOut.model_validate(admin))
