"""Inquiry service."""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from ..core.observability import metrics_collector
from ..models.inquiry import Inquiry
from .agent_service import AgentService
from .base import CrudService
from .user_service import UserService

logger = logging.getLogger(__name__)


class InquiryService(CrudService[Inquiry]):
    """Service for inquiries submitted from the public site."""

    model = Inquiry
    resource_type = "inquiry"
    search_fields = ("name", "email", "subject", "message")
    sort_options = {
        "created_at": ("created_at", True),
        "name": ("name", False),
        "subject": ("subject", False),
        "status": ("status", False),
    }
    load_options = ("customer", "assignee")

    async def create(self, data: Dict[str, Any]) -> Inquiry:
        """
        Store an inquiry, optionally linked to a customer account.

        Raises:
            NotFoundError: If a linked customer does not exist
        """
        if data.get("user_id"):
            await UserService(self.db).ensure_exists(data["user_id"])
        return await super().create(data)

    async def assign(self, inquiry_id: UUID | str, agent_id: Optional[UUID]) -> Inquiry:
        """
        Assign an inquiry to an agent, or clear the assignment with None.

        Raises:
            NotFoundError: If the agent or the inquiry does not exist
        """
        if agent_id is not None:
            await AgentService(self.db).get_by_id_or_raise(agent_id)
        inquiry = await self.update(inquiry_id, {"assigned_to": agent_id})

        logger.info(
            "Inquiry assignment changed",
            extra={"inquiry_id": str(inquiry.id), "agent_id": str(agent_id) if agent_id else None}
        )
        metrics_collector.record_field_change(
            self.resource_type, "assigned_to", "assigned" if agent_id else "unassigned"
        )
        return inquiry
