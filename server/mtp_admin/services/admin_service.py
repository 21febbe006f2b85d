"""Admin account service: registration, credential checks and profile edits."""

import logging
from typing import Optional

from sqlalchemy import func, or_, select

from ..core.exceptions import ConflictError
from ..core.security import hash_password, verify_password
from ..models.admin import Admin
from ..schemas.auth import AdminProfileUpdate, SignupRequest
from .base import CrudService

logger = logging.getLogger(__name__)


class AdminService(CrudService[Admin]):
    """Service for admin accounts."""

    model = Admin
    resource_type = "admin"
    conflict_detail = "An admin with this e-mail already exists"

    async def get_by_email(self, email: str) -> Optional[Admin]:
        stmt = select(Admin).where(Admin.email == email.strip().lower())
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_identifier(self, identifier: str) -> Optional[Admin]:
        """Find an admin by e-mail (case-insensitive) or exact name."""
        identifier = identifier.strip()
        stmt = select(Admin).where(
            or_(Admin.email == identifier.lower(), Admin.name == identifier)
        ).order_by(Admin.created_at).limit(1)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def register(self, request: SignupRequest) -> Admin:
        """
        Create an admin account.

        Raises:
            ConflictError: If the e-mail is already registered
        """
        if await self.get_by_email(request.email):
            logger.warning("Admin signup rejected - e-mail exists", extra={"email": request.email})
            raise ConflictError(detail=self.conflict_detail)

        return await self.create({
            "name": request.name,
            "email": request.email,
            "password_hash": hash_password(request.password),
        })

    async def authenticate(self, identifier: str, password: str) -> Optional[Admin]:
        """Return the admin if the credentials match, otherwise None."""
        admin = await self.get_by_identifier(identifier)
        if admin is None or not verify_password(password, admin.password_hash):
            return None
        return admin

    async def update_profile(self, admin: Admin, request: AdminProfileUpdate) -> Admin:
        """
        Update name, e-mail and password of the signed-in admin.

        An empty password leaves the current one unchanged.

        Raises:
            ConflictError: If the new e-mail belongs to another admin
        """
        data = request.model_dump(exclude_unset=True, exclude_none=True)
        if "email" in data:
            existing = await self.get_by_email(data["email"])
            if existing and existing.id != admin.id:
                raise ConflictError(detail=self.conflict_detail)
        password = data.pop("password", None)
        if password:
            data["password_hash"] = hash_password(password)
        return await self.update(admin.id, data)

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Admin))
        return result.scalar_one()
