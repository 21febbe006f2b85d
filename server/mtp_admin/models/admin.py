"""Admin account model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base
from .base import RecordMixin


class Admin(RecordMixin, Base):
    """Dashboard administrator that signs in with e-mail or name."""

    __tablename__ = "admins"

    name: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    avatar: Mapped[str | None] = mapped_column(String(512), nullable=True)

    def __repr__(self) -> str:
        return f"<Admin(id={self.id}, email='{self.email}')>"
