"""Tour-related Pydantic schemas.

Tour payloads come from a rich form editor, so several list fields arrive
in loose shapes: images as plain paths or ``{"path": ...}`` objects, tag
lists as plain strings or ``{"value": ...}`` select options, and related
tours as a comma-separated string. The validators below normalise all of
them to plain string lists before the record is stored.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from ..models.tour import Difficulty, TourStatus
from .common import RecordOut, RequestModel


logger = logging.getLogger(__name__)


class ItineraryItem(BaseModel):
    """One day of a tour itinerary."""

    day: int = Field(..., ge=1, description="Day number")
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    accommodation: Optional[str] = None
    meals: Optional[str] = None
    time: Optional[str] = None
    distance: Optional[float] = Field(None, ge=0, description="Distance in km")
    ascent: Optional[float] = Field(None, ge=0, description="Ascent in metres")
    descent: Optional[float] = Field(None, ge=0, description="Descent in metres")


class FAQItem(BaseModel):
    """Question and answer shown on the tour page."""

    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)


class SeasonalPrice(BaseModel):
    """Price override for a date range."""

    start_date: datetime
    end_date: datetime
    price: float = Field(..., ge=0)


def _image_paths(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    paths = []
    for item in value:
        if isinstance(item, dict):
            item = item.get("path")
        if isinstance(item, str) and item:
            paths.append(item)
    return paths


def _option_values(value: Any) -> Any:
    if not isinstance(value, list):
        return value
    return [item.get("value") if isinstance(item, dict) else item for item in value]


def _related_tour_ids(value: Any) -> List[str]:
    if isinstance(value, str):
        candidates = [part.strip() for part in value.split(",")]
    elif isinstance(value, list):
        candidates = [item for item in value if isinstance(item, str)]
    else:
        return []

    ids = []
    for candidate in candidates:
        if not candidate:
            continue
        try:
            ids.append(str(UUID(candidate)))
        except ValueError:
            logger.warning("Dropping invalid related tour id", extra={"related_tour_id": candidate})
    return ids


class _TourFields(RequestModel):
    """Normalisation shared by create and update payloads."""

    @field_validator("images", mode="before", check_fields=False)
    @classmethod
    def normalize_images(cls, v: Any) -> Any:
        if v is None:
            return v
        return _image_paths(v)

    @field_validator(
        "included_services", "excluded_services", "required_equipment", "keywords",
        mode="before",
        check_fields=False,
    )
    @classmethod
    def normalize_options(cls, v: Any) -> Any:
        return _option_values(v)

    @field_validator("related_tours", mode="before", check_fields=False)
    @classmethod
    def normalize_related_tours(cls, v: Any) -> Any:
        if v is None:
            return v
        return _related_tour_ids(v)


class TourCreate(_TourFields):
    """Request schema for creating a tour."""

    title: str = Field(..., min_length=1, max_length=255, description="Tour title")
    description: str = Field(..., min_length=1, description="Rich-text description")
    location: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0, description="Base price")
    duration: int = Field(..., ge=1, description="Duration in days")
    category: str = Field(..., min_length=1, max_length=128)
    images: List[str] = Field(default_factory=list)
    itineraries: List[ItineraryItem] = Field(default_factory=list)
    map_iframe: Optional[str] = None
    faqs: List[FAQItem] = Field(default_factory=list)
    terms_and_conditions: Optional[str] = None
    max_group_size: int = Field(1, ge=1)
    difficulty_level: Difficulty = Field(Difficulty.EASY)
    start_dates: List[datetime] = Field(default_factory=list)
    included_services: List[str] = Field(default_factory=list)
    excluded_services: List[str] = Field(default_factory=list)
    required_equipment: List[str] = Field(default_factory=list)
    meeting_point: Optional[str] = Field(None, max_length=255)
    end_point: Optional[str] = Field(None, max_length=255)
    status: TourStatus = Field(TourStatus.DRAFT)
    seasonal_pricing: List[SeasonalPrice] = Field(default_factory=list)
    related_tours: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)

    @field_validator("difficulty_level", mode="before")
    @classmethod
    def default_difficulty(cls, v: Any) -> Any:
        allowed = [d.value for d in Difficulty]
        return v if v in allowed else Difficulty.EASY.value

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v: Any) -> Any:
        allowed = [s.value for s in TourStatus]
        return v if v in allowed else TourStatus.DRAFT.value


class TourUpdate(_TourFields):
    """Request schema for updating a tour; only supplied fields change."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    price: Optional[float] = Field(None, ge=0)
    duration: Optional[int] = Field(None, ge=1)
    category: Optional[str] = Field(None, min_length=1, max_length=128)
    images: Optional[List[str]] = None
    itineraries: Optional[List[ItineraryItem]] = None
    map_iframe: Optional[str] = None
    faqs: Optional[List[FAQItem]] = None
    terms_and_conditions: Optional[str] = None
    max_group_size: Optional[int] = Field(None, ge=1)
    difficulty_level: Optional[Difficulty] = None
    start_dates: Optional[List[datetime]] = None
    included_services: Optional[List[str]] = None
    excluded_services: Optional[List[str]] = None
    required_equipment: Optional[List[str]] = None
    meeting_point: Optional[str] = Field(None, max_length=255)
    end_point: Optional[str] = Field(None, max_length=255)
    status: Optional[TourStatus] = None
    seasonal_pricing: Optional[List[SeasonalPrice]] = None
    related_tours: Optional[List[str]] = None
    keywords: Optional[List[str]] = None


class TourStatusUpdate(RequestModel):
    """Request schema for publishing or archiving a tour."""

    status: TourStatus = Field(..., description="New publication status")


class TourSummary(RecordOut):
    """Fields shown in the tour list."""

    title: str
    location: str
    price: float
    duration: int
    category: str
    status: TourStatus


class TourOut(TourSummary):
    """Full tour response schema."""

    description: str
    images: List[str] = Field(default_factory=list)
    itineraries: List[ItineraryItem] = Field(default_factory=list)
    map_iframe: Optional[str] = None
    faqs: List[FAQItem] = Field(default_factory=list)
    terms_and_conditions: Optional[str] = None
    max_group_size: int
    difficulty_level: Difficulty
    start_dates: List[datetime] = Field(default_factory=list)
    included_services: List[str] = Field(default_factory=list)
    excluded_services: List[str] = Field(default_factory=list)
    required_equipment: List[str] = Field(default_factory=list)
    meeting_point: Optional[str] = None
    end_point: Optional[str] = None
    seasonal_pricing: List[SeasonalPrice] = Field(default_factory=list)
    related_tours: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)


class UploadResult(BaseModel):
    """Paths of stored tour images."""

    paths: List[str] = Field(default_factory=list, description="Public image paths")
    tour_id: Optional[UUID] = Field(None, description="Tour the images were attached to")
