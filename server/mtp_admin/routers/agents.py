"""Agent router for the support desk roster."""

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
from ..schemas.agent import AgentCreate, AgentOut, AgentStatusUpdate, AgentUpdate
from ..schemas.common import ApiResponse
from ..services.agent_service import AgentService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/agents",
    tags=["agents"],
    dependencies=[Depends(get_current_admin)],
)

DB_DEPENDENCY = Depends(get_db)


@router.get("", response_model=ApiResponse[List[AgentOut]])
async def list_agents(
    search: Optional[str] = Query(None, description="Matches name, e-mail, role or department"),
    status: Optional[str] = Query(None, description="active, inactive, on_leave or all"),
    sort_by: Optional[str] = Query(None),
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    try:
        agents = await AgentService(db).list(search=search, sort_by=sort_by, status=status)
        return success_response([AgentOut.model_validate(agent) for agent in agents])

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing agents", extra={"error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch agents")


@router.post("", response_model=ApiResponse[AgentOut], status_code=201)
async def create_agent(request: AgentCreate, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Add an agent; e-mails are unique."""
    try:
        agent = await AgentService(db).create(request.model_dump())
        return success_response(AgentOut.model_validate(agent), message="Agent added", status_code=201)

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error creating agent", extra={"email": request.email, "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to create agent")


@router.get("/{agent_id}", response_model=ApiResponse[AgentOut])
async def get_agent(agent_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        agent = await AgentService(db).get_by_id_or_raise(agent_id)
        return success_response(AgentOut.model_validate(agent))

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error fetching agent", extra={"agent_id": str(agent_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to fetch agent")


@router.put("/{agent_id}", response_model=ApiResponse[AgentOut])
async def update_agent(agent_id: UUID, request: AgentUpdate, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        agent = await AgentService(db).update(agent_id, request.model_dump(exclude_unset=True))
        return success_response(AgentOut.model_validate(agent), message="Agent updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating agent", extra={"agent_id": str(agent_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update agent")


@router.patch("/{agent_id}/status", response_model=ApiResponse[AgentOut])
async def update_agent_status(
    agent_id: UUID,
    request: AgentStatusUpdate,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    try:
        agent = await AgentService(db).set_field(agent_id, "status", request.status)
        return success_response(AgentOut.model_validate(agent), message="Status updated")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error updating agent status", extra={"agent_id": str(agent_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to update status")


@router.delete("/{agent_id}", response_model=ApiResponse[None])
async def delete_agent(agent_id: UUID, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    try:
        await AgentService(db).delete(agent_id)
        return success_response(message="Agent deleted")

    except ApiException:
        raise

    except Exception as e:
        logger.error("Unexpected error deleting agent", extra={"agent_id": str(agent_id), "error": str(e)}, exc_info=True)
        raise InternalServerError(detail="Failed to delete agent")
