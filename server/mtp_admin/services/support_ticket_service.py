"""Support ticket service."""

import logging
from typing import Any, Dict
from uuid import UUID

from ..models.support_ticket import SupportTicket
from .agent_service import AgentService
from .base import CrudService
from .user_service import UserService

logger = logging.getLogger(__name__)


class SupportTicketService(CrudService[SupportTicket]):
    """Service for support tickets, their assignment and replies."""

    model = SupportTicket
    resource_type = "support_ticket"
    search_fields = ("subject", "description")
    sort_options = {
        "created_at": ("created_at", True),
        "updated_at": ("updated_at", True),
        "subject": ("subject", False),
        "priority": ("priority", False),
        "status": ("status", False),
    }
    load_options = ("customer", "assignee")

    async def create(self, data: Dict[str, Any]) -> SupportTicket:
        """
        Open a ticket for an existing customer.

        Raises:
            NotFoundError: If the customer or the initial assignee does not exist
        """
        await UserService(self.db).ensure_exists(data["user_id"])
        if data.get("assigned_to"):
            await AgentService(self.db).get_by_id_or_raise(data["assigned_to"])
        return await super().create(data)

    async def assign(self, ticket_id: UUID, agent_id: UUID) -> SupportTicket:
        """
        Assign a ticket to an agent and record it on the agent.

        Raises:
            NotFoundError: If the agent or the ticket does not exist
            ValidationError: If the agent is unavailable or not active
        """
        agents = AgentService(self.db)
        agent = await agents.get_assignable_or_raise(agent_id)
        ticket = await self.get_by_id_or_raise(ticket_id)

        ticket.assigned_to = agent.id
        agents.record_ticket(agent, ticket.id)
        await self._commit("assignment", {"ticket_id": str(ticket.id), "agent_id": str(agent.id)})

        logger.info(
            "Ticket assigned to agent",
            extra={"ticket_id": str(ticket.id), "agent_id": str(agent.id)}
        )
        return await self.get_by_id(ticket.id)
