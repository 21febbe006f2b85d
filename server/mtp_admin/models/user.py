"""Customer user model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base
from .base import RecordMixin


class User(RecordMixin, Base):
    """Customer who submits tickets, inquiries and feedback."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
