"""Customer router: registration, listing and ticket submission."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import get_current_admin
from ..core.exceptions import ApiException, InternalServerError
from ..core.responses import success_response
from ..schemas.common import ApiResponse
from ..schemas.support_ticket import TicketCreate, TicketOut
from ..schemas.user import UserCreate, UserOut
from ..services.support_ticket_service import SupportTicketService
from ..services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])

DB_DEPENDENCY = Depends(get_db)
ADMIN_ONLY = [Depends(get_current_admin)]


@router.get("/users", response_model=ApiResponse[List[UserOut]], dependencies=ADMIN_ONLY)
async def list_users(
    search: Optional[str] = Query(None, description="Matches name or e-mail"),
    sort_by: Optional[str] = Query(None),
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    try:
        users = await UserService(db).list(search=search, sort_by=sort_by)
        return success_response([UserOut.model_validate(user) for user in users])

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing users", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch users")


@router.post("/users", response_model=ApiResponse[UserOut], status_code=201)
async def create_user(request: UserCreate, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Register a customer from the public site."""
    try:
        user = await UserService(db).create(request.model_dump())
        return success_response(UserOut.model_validate(user), message="User registered", status_code=201)

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error creating user", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to create user")


@router.post("/user/tickets", response_model=ApiResponse[TicketOut], status_code=201)
async def submit_ticket(request: TicketCreate, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """
    Open a support ticket as a customer.

    The referenced user must exist; the ticket starts as Pending.
    """
    try:
        ticket = await SupportTicketService(db).create(request.model_dump())
        return success_response(
            TicketOut.model_validate(ticket),
            message="Ticket submitted successfully",
            status_code=201,
        )

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error submitting ticket", extra={"user_id": str(request.user_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to submit ticket")
