"""Common Pydantic schemas."""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

# Loose e-mail shape check: something@something.tld
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope returned by every JSON endpoint."""

    success: bool = Field(True, description="Always true for successful responses")
    data: Optional[T] = Field(None, description="Response payload")
    message: Optional[str] = Field(None, description="Human-readable outcome")


class Violation(BaseModel):
    """Validation error violation."""

    path: str = Field(..., description="Dotted path to the invalid field")
    message: str = Field(..., description="Validation error message")


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Short human-readable summary")
    message: str = Field(..., description="Human-readable explanation")
    violations: Optional[List[Violation]] = Field(None, description="Validation errors")
    error_id: Optional[str] = Field(None, description="Correlation id for server errors")


class RecordOut(BaseModel):
    """Fields every stored record carries."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="Unique record ID")
    created_at: datetime = Field(..., description="Creation time (ISO 8601)")
    updated_at: datetime = Field(..., description="Last update time (ISO 8601)")


class ResponseEntry(BaseModel):
    """A reply appended to a ticket, inquiry or feedback entry."""

    id: str = Field(..., description="Response ID")
    message: str = Field(..., description="Response text")
    responded_by: Optional[str] = Field(None, description="ID of the author")
    responded_at: datetime = Field(..., description="When the response was written")


class PersonRef(BaseModel):
    """Compact reference to a user or agent embedded in another record."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: Optional[str] = None
    email: Optional[str] = None


class RequestModel(BaseModel):
    """Base for request bodies; enum members are dumped as plain values."""

    model_config = ConfigDict(use_enum_values=True, str_strip_whitespace=True)
