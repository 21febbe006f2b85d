"""Agent-related Pydantic schemas."""

from typing import List, Optional

from pydantic import Field

from ..models.agent import PersonnelStatus
from .common import EMAIL_PATTERN, RecordOut, RequestModel


class AgentCreate(RequestModel):
    """Request schema for creating an agent."""

    name: str = Field(..., min_length=1, max_length=255, description="Agent name")
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN, description="Agent e-mail")
    phone: Optional[str] = Field(None, max_length=64)
    role: str = Field(..., min_length=1, max_length=128, description="e.g. Support Agent")
    department: str = Field(..., min_length=1, max_length=128, description="e.g. Customer Support")
    is_available: bool = Field(True, description="Whether the agent accepts new assignments")
    status: PersonnelStatus = Field(PersonnelStatus.ACTIVE, description="Employment status")
    expertise: List[str] = Field(default_factory=list)
    location: Optional[str] = Field(None, max_length=255)
    profile_image: Optional[str] = Field(None, max_length=512)


class AgentUpdate(RequestModel):
    """Request schema for updating an agent; only supplied fields change."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    phone: Optional[str] = Field(None, max_length=64)
    role: Optional[str] = Field(None, min_length=1, max_length=128)
    department: Optional[str] = Field(None, min_length=1, max_length=128)
    is_available: Optional[bool] = None
    status: Optional[PersonnelStatus] = None
    expertise: Optional[List[str]] = None
    location: Optional[str] = Field(None, max_length=255)
    profile_image: Optional[str] = Field(None, max_length=512)


class AgentStatusUpdate(RequestModel):
    """Request schema for changing an agent's status."""

    status: PersonnelStatus = Field(..., description="New status")


class AgentOut(RecordOut):
    """Agent response schema."""

    name: str
    email: str
    phone: Optional[str] = None
    role: str
    department: str
    is_available: bool
    status: PersonnelStatus
    expertise: List[str] = Field(default_factory=list)
    assigned_tickets: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    profile_image: Optional[str] = None
