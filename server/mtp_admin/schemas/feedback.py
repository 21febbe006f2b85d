"""Feedback-related Pydantic schemas."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from ..models.feedback import FeedbackCategory, FeedbackStatus
from .common import PersonRef, RecordOut, RequestModel, ResponseEntry


class FeedbackCreate(RequestModel):
    """Request schema for submitting feedback."""

    user_id: UUID = Field(..., description="Customer giving the feedback")
    message: str = Field(..., min_length=1)
    category: FeedbackCategory = Field(FeedbackCategory.GENERAL)
    date: Optional[datetime] = Field(None, description="Defaults to now")


class FeedbackUpdate(RequestModel):
    """Request schema for updating feedback; only supplied fields change."""

    message: Optional[str] = Field(None, min_length=1)
    category: Optional[FeedbackCategory] = None
    status: Optional[FeedbackStatus] = None


class FeedbackStatusUpdate(RequestModel):
    """Moderation decision for a feedback entry."""

    status: FeedbackStatus


class FeedbackResponseCreate(RequestModel):
    """Reply appended to a feedback entry."""

    feedback_id: UUID
    message: str = Field(..., min_length=1, max_length=5000)
    responded_by: Optional[str] = Field(None, description="Author ID; defaults to the signed-in admin")


class FeedbackOut(RecordOut):
    """Feedback response schema."""

    user_id: UUID
    message: str
    date: datetime
    status: FeedbackStatus
    category: FeedbackCategory
    customer: Optional[PersonRef] = None
    responses: List[ResponseEntry] = Field(default_factory=list)
