"""FastAPI dependencies for database sessions and admin authentication."""

from typing import Annotated, Optional
from fastapi import Cookie, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from .config import settings
from .database import get_db
from .exceptions import AuthenticationError
from .security import decode_session_token
from ..models.admin import Admin
from ..services.admin_service import AdminService


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    try:
        scheme, token = authorization.split()
    except ValueError:
        raise AuthenticationError("Invalid authorization header format")
    if scheme.lower() != "bearer":
        raise AuthenticationError("Invalid authentication scheme")
    return token


async def get_session_payload(
    session_cookie: Optional[str] = Cookie(None, alias=settings.session_cookie_name),
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> dict:
    """
    Resolve the admin session from the cookie, falling back to a Bearer header.

    Returns:
        dict: Decoded session payload (``sub``, ``name``, ``email``)

    Raises:
        AuthenticationError: If no valid session is present
    """
    token = session_cookie or _bearer_token(authorization)
    payload = decode_session_token(token)
    if payload is None:
        raise AuthenticationError()
    return payload


async def get_current_admin(
    payload: dict = Depends(get_session_payload),
    db: AsyncSession = Depends(get_db),
) -> Admin:
    """
    Load the signed-in admin record.

    Raises:
        AuthenticationError: If the session refers to an admin that no longer exists
    """
    admin = await AdminService(db).get_by_id(payload["sub"])
    if admin is None:
        raise AuthenticationError("Session no longer refers to an existing admin")
    return admin


DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
CurrentAdmin = Annotated[Admin, Depends(get_current_admin)]
RequireAdmin = Depends(get_current_admin)
