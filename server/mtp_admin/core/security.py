"""Password hashing and signed session tokens."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from jwt import PyJWTError
from passlib.context import CryptContext

from .config import settings

SESSION_ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_session_token(admin_id: str, name: Optional[str], email: str) -> str:
    """
    Issue a signed session token for an admin.

    Args:
        admin_id: Admin identifier stored as the token subject
        name: Admin display name
        email: Admin e-mail

    Returns:
        str: Encoded JWT valid for ``settings.session_max_age_seconds``
    """
    issued_at = datetime.now(timezone.utc)
    payload = {
        "sub": admin_id,
        "name": name,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=settings.session_max_age_seconds),
    }
    return jwt.encode(payload, settings.session_secret, algorithm=SESSION_ALGORITHM)


def decode_session_token(token: Optional[str]) -> Optional[dict]:
    """Return the token payload, or None when the token is missing, expired or forged."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.session_secret, algorithms=[SESSION_ALGORITHM])
    except PyJWTError:
        return None
    if not payload.get("sub"):
        return None
    return payload
