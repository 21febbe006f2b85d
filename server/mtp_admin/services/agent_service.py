"""Agent service for personnel that handles tickets and inquiries."""

import logging
from uuid import UUID

from ..core.exceptions import ValidationError
from ..models.agent import Agent
from .base import CrudService

logger = logging.getLogger(__name__)


class AgentService(CrudService[Agent]):
    """Service for agents."""

    model = Agent
    resource_type = "agent"
    search_fields = ("name", "email", "role", "department")
    sort_options = {
        "created_at": ("created_at", True),
        "name": ("name", False),
        "email": ("email", False),
        "department": ("department", False),
    }
    conflict_detail = "An agent with this e-mail already exists"

    async def get_assignable_or_raise(self, agent_id: UUID | str) -> Agent:
        """
        Get an agent that can take a new assignment.

        Raises:
            NotFoundError: If the agent does not exist
            ValidationError: If the agent is unavailable or not active
        """
        agent = await self.get_by_id_or_raise(agent_id)
        if not agent.is_assignable:
            logger.warning(
                "Agent is not available for assignment",
                extra={"agent_id": str(agent.id), "status": agent.status, "is_available": agent.is_available}
            )
            raise ValidationError(detail="Agent is not available for assignment")
        return agent

    def record_ticket(self, agent: Agent, ticket_id: UUID) -> None:
        """Add a ticket to the agent's assigned list without duplicates; caller commits."""
        ticket_ref = str(ticket_id)
        current = list(agent.assigned_tickets or [])
        if ticket_ref not in current:
            agent.assigned_tickets = [*current, ticket_ref]
