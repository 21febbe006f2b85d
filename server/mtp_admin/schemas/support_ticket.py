"""Support ticket schemas, plus the status and priority payloads shared with inquiries."""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from ..models.support_ticket import TicketPriority, TicketStatus
from .common import PersonRef, RecordOut, RequestModel, ResponseEntry


class TicketCreate(RequestModel):
    """Request schema for opening a support ticket."""

    subject: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    user_id: UUID = Field(..., description="Customer that raised the ticket")
    status: TicketStatus = Field(TicketStatus.PENDING)
    priority: TicketPriority = Field(TicketPriority.NORMAL)
    assigned_to: Optional[UUID] = Field(None, description="Agent handling the ticket")


class TicketUpdate(RequestModel):
    """Request schema for updating a ticket; only supplied fields change."""

    subject: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None


class TicketStatusUpdate(RequestModel):
    """Status change for a ticket or inquiry."""

    status: TicketStatus


class TicketPriorityUpdate(RequestModel):
    """Priority change for a ticket or inquiry."""

    priority: TicketPriority


class TicketAssignRequest(RequestModel):
    """Assign a ticket to an agent."""

    ticket_id: UUID
    agent_id: UUID


class TicketResponseCreate(RequestModel):
    """Reply appended to a ticket."""

    ticket_id: UUID
    message: str = Field(..., min_length=1, max_length=5000)


class TicketOut(RecordOut):
    """Support ticket response schema."""

    subject: str
    description: str
    status: TicketStatus
    priority: TicketPriority
    user_id: UUID
    assigned_to: Optional[UUID] = None
    customer: Optional[PersonRef] = None
    assignee: Optional[PersonRef] = None
    responses: List[ResponseEntry] = Field(default_factory=list)
