"""Tour model definition."""

from enum import Enum

from sqlalchemy import JSON, Float, Integer, String, Text, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base
from .base import RecordMixin


class TourStatus(str, Enum):
    """Publication status of a tour."""
    DRAFT = "Draft"
    PUBLISHED = "Published"
    ARCHIVED = "Archived"


class Difficulty(str, Enum):
    """Tour difficulty level."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Tour(RecordMixin, Base):
    """Tour package with its itinerary, pricing and media.

    Nested collections (itineraries, FAQs, seasonal pricing) are stored as
    JSON documents on the row.
    """

    __tablename__ = "tours"

    # Listing fields
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    status: Mapped[TourStatus] = mapped_column(
        String(20),
        nullable=False,
        default=TourStatus.DRAFT.value,
        index=True
    )
    difficulty_level: Mapped[Difficulty] = mapped_column(
        String(20),
        nullable=False,
        default=Difficulty.EASY.value
    )
    max_group_size: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Detail fields
    images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    itineraries: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    map_iframe: Mapped[str | None] = mapped_column(Text, nullable=True)
    faqs: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    terms_and_conditions: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_dates: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    included_services: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    excluded_services: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    required_equipment: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    meeting_point: Mapped[str | None] = mapped_column(String(255), nullable=True)
    end_point: Mapped[str | None] = mapped_column(String(255), nullable=True)
    seasonal_pricing: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    related_tours: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    keywords: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_tour_price_non_negative"),
        CheckConstraint("duration >= 1", name="ck_tour_duration_positive"),
    )

    def __repr__(self) -> str:
        return f"<Tour(id={self.id}, title='{self.title}', status={self.status})>"
