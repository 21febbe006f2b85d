"""Customer user service."""

from typing import Optional

from sqlalchemy import select

from ..core.exceptions import NotFoundError
from ..models.user import User
from .base import CrudService


class UserService(CrudService[User]):
    """Service for customer users."""

    model = User
    resource_type = "user"
    search_fields = ("name", "email")
    sort_options = {
        "created_at": ("created_at", True),
        "name": ("name", False),
        "email": ("email", False),
    }
    conflict_detail = "A user with this e-mail already exists"

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def ensure_exists(self, user_id) -> User:
        """
        Raises:
            NotFoundError: If the referenced user does not exist
        """
        user = await self.get_by_id(user_id)
        if user is None:
            raise NotFoundError("user", str(user_id))
        return user
