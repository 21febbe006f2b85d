"""Staff-related Pydantic schemas."""

from datetime import date
from typing import Optional

from pydantic import Field

from ..models.agent import PersonnelStatus
from ..models.staff import StaffRole
from .common import EMAIL_PATTERN, RecordOut, RequestModel


class StaffCreate(RequestModel):
    """Request schema for adding a staff member."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    role: StaffRole = Field(..., description="Staff role")
    status: PersonnelStatus = Field(PersonnelStatus.ACTIVE)
    phone: Optional[str] = Field(None, max_length=64)
    address: Optional[str] = Field(None, max_length=512)
    department: Optional[str] = Field(None, max_length=128)
    joining_date: Optional[date] = None
    notes: Optional[str] = None


class StaffUpdate(RequestModel):
    """Request schema for updating a staff member."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    role: Optional[StaffRole] = None
    status: Optional[PersonnelStatus] = None
    phone: Optional[str] = Field(None, max_length=64)
    address: Optional[str] = Field(None, max_length=512)
    department: Optional[str] = Field(None, max_length=128)
    joining_date: Optional[date] = None
    notes: Optional[str] = None


class StaffStatusUpdate(RequestModel):
    """Request schema for changing a staff member's status."""

    status: PersonnelStatus


class StaffOut(RecordOut):
    """Staff response schema."""

    name: str
    email: str
    role: StaffRole
    status: PersonnelStatus
    phone: Optional[str] = None
    address: Optional[str] = None
    department: Optional[str] = None
    joining_date: Optional[date] = None
    notes: Optional[str] = None
