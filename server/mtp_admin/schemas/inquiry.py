"""Inquiry-related Pydantic schemas."""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from ..models.support_ticket import TicketPriority, TicketStatus
from .common import EMAIL_PATTERN, PersonRef, RecordOut, RequestModel, ResponseEntry


class InquiryCreate(RequestModel):
    """Request schema for submitting an inquiry."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    phone: str = Field(..., min_length=1, max_length=64)
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    user_id: Optional[UUID] = None
    status: TicketStatus = Field(TicketStatus.PENDING)
    priority: TicketPriority = Field(TicketPriority.NORMAL)


class InquiryUpdate(RequestModel):
    """Request schema for updating an inquiry; only supplied fields change."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    phone: Optional[str] = Field(None, min_length=1, max_length=64)
    subject: Optional[str] = Field(None, min_length=1, max_length=255)
    message: Optional[str] = Field(None, min_length=1)
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None


class InquiryAssignRequest(RequestModel):
    """Assign an inquiry to an agent, or unassign it with null."""

    assigned_to: Optional[UUID] = Field(..., description="Agent ID or null")


class InquiryResponseCreate(RequestModel):
    """Reply appended to an inquiry."""

    inquiry_id: UUID
    message: str = Field(..., min_length=1, max_length=5000)


class InquiryOut(RecordOut):
    """Inquiry response schema."""

    name: str
    email: str
    phone: str
    subject: str
    message: str
    status: TicketStatus
    priority: TicketPriority
    user_id: Optional[UUID] = None
    assigned_to: Optional[UUID] = None
    customer: Optional[PersonRef] = None
    assignee: Optional[PersonRef] = None
    responses: List[ResponseEntry] = Field(default_factory=list)
