"""Customer user schemas."""

from pydantic import Field

from .common import EMAIL_PATTERN, RecordOut, RequestModel


class UserCreate(RequestModel):
    """Request schema for registering a customer."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)


class UserOut(RecordOut):
    """Customer response schema."""

    name: str
    email: str
