"""Dashboard aggregation schemas."""

from typing import List
from uuid import UUID

from pydantic import BaseModel, Field


class DashboardSummary(BaseModel):
    """Headline numbers for the dashboard cards."""

    total_bookings: int = Field(..., ge=0)
    confirmed_bookings: int = Field(..., ge=0)
    pending_bookings: int = Field(..., ge=0)
    cancelled_bookings: int = Field(..., ge=0)
    active_tours: int = Field(..., ge=0, description="Published tours")
    monthly_revenue: float = Field(..., ge=0, description="Confirmed revenue for trips dated this month")


class TourStat(BaseModel):
    """Confirmed bookings and revenue for one tour."""

    tour_id: UUID
    title: str
    bookings: int = Field(..., ge=0)
    revenue: float = Field(..., ge=0)


class MonthlyTrend(BaseModel):
    """Bookings and revenue for one calendar month."""

    year: int
    month: int = Field(..., ge=1, le=12)
    label: str = Field(..., description="Short month name, e.g. Jan")
    bookings: int = Field(..., ge=0)
    revenue: float = Field(..., ge=0)


class DashboardTrends(BaseModel):
    """Six months of booking trends, oldest first."""

    months: List[MonthlyTrend]
