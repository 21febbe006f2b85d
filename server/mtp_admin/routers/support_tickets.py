"""Support ticket router for the admin support desk."""

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
from ..models.admin import Admin
from ..schemas.common import ApiResponse
from ..schemas.support_ticket import (
    TicketAssignRequest,
    TicketCreate,
    TicketOut,
    TicketPriorityUpdate,
    TicketResponseCreate,
    TicketStatusUpdate,
    TicketUpdate,
)
from ..services.support_ticket_service import SupportTicketService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/support-tickets", tags=["support-tickets"])

DB_DEPENDENCY = Depends(get_db)
ADMIN_DEPENDENCY = Depends(get_current_admin)


@router.get("", response_model=ApiResponse[List[TicketOut]])
async def list_tickets(
    search: Optional[str] = Query(None, description="Matches subject or description"),
    status: Optional[str] = Query(None, description="Pending, In_Progress, Resolved, Closed or all"),
    priority: Optional[str] = Query(None, description="Low, Normal, High, Urgent or all"),
    sort_by: Optional[str] = Query(None),
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    """List tickets with their customer and assignee, newest first."""
    try:
        tickets = await SupportTicketService(db).list(
            search=search, sort_by=sort_by, status=status, priority=priority
        )
        return success_response([TicketOut.model_validate(ticket) for ticket in tickets])

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing tickets", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Error fetching tickets")


@router.post("", response_model=ApiResponse[TicketOut], status_code=201)
async def create_ticket(
    request: TicketCreate,
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    """Open a ticket on behalf of a customer."""
    try:
        ticket = await SupportTicketService(db).create(request.model_dump())
        return success_response(TicketOut.model_validate(ticket), message="Ticket created", status_code=201)

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error creating ticket", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to create ticket")


@router.post("/assign", response_model=ApiResponse[TicketOut])
async def assign_ticket(
    request: TicketAssignRequest,
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    """
    Assign a ticket to an available, active agent.

    The ticket is also recorded on the agent's assigned list.
    """
    try:
        ticket = await SupportTicketService(db).assign(request.ticket_id, request.agent_id)
        return success_response(TicketOut.model_validate(ticket), message="Agent assigned successfully")

    except ApiException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error assigning ticket",
            extra={"ticket_id": str(request.ticket_id), "agent_id": str(request.agent_id), "error": str(e)},
            exc_info=True
        )
        raise InternalServerError(detail="Failed to assign agent")


@router.post("/responses", response_model=ApiResponse[TicketOut])
async def respond_to_ticket(
    request: TicketResponseCreate,
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    """Append a reply written by the signed-in admin."""
    try:
        ticket = await SupportTicketService(db).append_response(
            request.ticket_id, request.message, responded_by=str(admin.id)
        )
        return success_response(TicketOut.model_validate(ticket), message="Response added")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error adding ticket response", extra={"ticket_id": str(request.ticket_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to add response")


@router.get("/{ticket_id}", response_model=ApiResponse[TicketOut])
async def get_ticket(
    ticket_id: UUID,
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    try:
        ticket = await SupportTicketService(db).get_by_id_or_raise(ticket_id)
        return success_response(TicketOut.model_validate(ticket))

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error fetching ticket", extra={"ticket_id": str(ticket_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch ticket")


@router.put("/{ticket_id}", response_model=ApiResponse[TicketOut])
async def update_ticket(
    ticket_id: UUID,
    request: TicketUpdate,
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    try:
        ticket = await SupportTicketService(db).update(ticket_id, request.model_dump(exclude_unset=True))
        return success_response(TicketOut.model_validate(ticket), message="Ticket updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating ticket", extra={"ticket_id": str(ticket_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update ticket")


@router.patch("/{ticket_id}/status", response_model=ApiResponse[TicketOut])
async def update_ticket_status(
    ticket_id: UUID,
    request: TicketStatusUpdate,
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    """Move a ticket to any status; transitions are not restricted."""
    try:
        ticket = await SupportTicketService(db).set_field(ticket_id, "status", request.status)
        return success_response(TicketOut.model_validate(ticket), message="Status updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating ticket status", extra={"ticket_id": str(ticket_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update status")


@router.patch("/{ticket_id}/priority", response_model=ApiResponse[TicketOut])
async def update_ticket_priority(
    ticket_id: UUID,
    request: TicketPriorityUpdate,
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    try:
        ticket = await SupportTicketService(db).set_field(ticket_id, "priority", request.priority)
        return success_response(TicketOut.model_validate(ticket), message="Priority updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating ticket priority", extra={"ticket_id": str(ticket_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update priority")


@router.delete("/{ticket_id}", response_model=ApiResponse[None])
async def delete_ticket(
    ticket_id: UUID,
    db: AsyncSession = DB_DEPENDENCY,
    admin: Admin = ADMIN_DEPENDENCY
) -> JSONResponse:
    try:
        await SupportTicketService(db).delete(ticket_id)
        return success_response(message="Ticket deleted successfully")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error deleting ticket", extra={"ticket_id": str(ticket_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to delete ticket")
