"""Feedback service."""

from typing import Any, Dict

from ..models.feedback import Feedback
from .base import CrudService
from .user_service import UserService


class FeedbackService(CrudService[Feedback]):
    """Service for customer feedback and moderation."""

    model = Feedback
    resource_type = "feedback"
    search_fields = ("message",)
    sort_options = {
        "date": ("date", True),
        "created_at": ("created_at", True),
        "status": ("status", False),
        "category": ("category", False),
    }
    default_sort = "date"
    load_options = ("customer",)

    async def create(self, data: Dict[str, Any]) -> Feedback:
        """
        Store feedback from an existing customer.

        Raises:
            NotFoundError: If the customer does not exist
        """
        await UserService(self.db).ensure_exists(data["user_id"])
        return await super().create(data)
