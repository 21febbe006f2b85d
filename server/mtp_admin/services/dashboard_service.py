"""Dashboard aggregations over bookings and tours."""

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy import case, extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.booking import Booking, BookingStatus
from ..models.tour import Tour, TourStatus
from ..schemas.dashboard import DashboardSummary, DashboardTrends, MonthlyTrend, TourStat

TREND_MONTHS = 6
TOP_TOURS = 5
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _month_start(year: int, month: int) -> datetime:
    return datetime(year, month, 1, tzinfo=timezone.utc)


class DashboardService:
    """Service computing the numbers shown on the dashboard."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def summary(self, now: Optional[datetime] = None) -> DashboardSummary:
        """
        Booking counts, published tour count and this month's confirmed revenue.

        Monthly revenue covers confirmed bookings whose trip date falls on or
        after the first day of the current month.
        """
        now = now or datetime.now(timezone.utc)
        month_start = _month_start(now.year, now.month)

        def count_status(status: BookingStatus):
            return func.count(case((Booking.status == status.value, 1)))

        booking_stmt = select(
            func.count(Booking.id),
            count_status(BookingStatus.CONFIRMED),
            count_status(BookingStatus.PENDING),
            count_status(BookingStatus.CANCELLED),
            func.coalesce(
                func.sum(
                    case(
                        (
                            (Booking.status == BookingStatus.CONFIRMED.value) & (Booking.date >= month_start),
                            Booking.amount,
                        ),
                        else_=0,
                    )
                ),
                0,
            ),
        )
        total, confirmed, pending, cancelled, revenue = (await self.db.execute(booking_stmt)).one()

        tours_stmt = select(func.count(Tour.id)).where(Tour.status == TourStatus.PUBLISHED.value)
        active_tours = (await self.db.execute(tours_stmt)).scalar_one()

        return DashboardSummary(
            total_bookings=total,
            confirmed_bookings=confirmed,
            pending_bookings=pending,
            cancelled_bookings=cancelled,
            active_tours=active_tours,
            monthly_revenue=float(revenue or 0),
        )

    async def tour_stats(self) -> List[TourStat]:
        """Confirmed bookings and revenue for up to five published tours, highest revenue first."""
        tours_stmt = (
            select(Tour.id, Tour.title)
            .where(Tour.status == TourStatus.PUBLISHED.value)
            .order_by(Tour.created_at.desc())
            .limit(TOP_TOURS)
        )
        tours = (await self.db.execute(tours_stmt)).all()
        if not tours:
            return []

        package_ids = [str(tour_id) for tour_id, _ in tours]
        bookings_stmt = (
            select(Booking.package_id, func.count(Booking.id), func.coalesce(func.sum(Booking.amount), 0))
            .where(
                Booking.status == BookingStatus.CONFIRMED.value,
                Booking.package_id.in_(package_ids),
            )
            .group_by(Booking.package_id)
        )
        totals = {
            package_id: (count, float(revenue or 0))
            for package_id, count, revenue in (await self.db.execute(bookings_stmt)).all()
        }

        stats = []
        for tour_id, title in tours:
            count, revenue = totals.get(str(tour_id), (0, 0.0))
            stats.append(TourStat(tour_id=tour_id, title=title, bookings=count, revenue=revenue))
        stats.sort(key=lambda stat: stat.revenue, reverse=True)
        return stats

    async def trends(self, now: Optional[datetime] = None) -> DashboardTrends:
        """
        Bookings and revenue per month for the current month and the five before it.

        Months without bookings are reported with zero counts, oldest month first.
        """
        now = now or datetime.now(timezone.utc)
        first_year, first_month = _shift_month(now.year, now.month, -(TREND_MONTHS - 1))
        end_year, end_month = _shift_month(now.year, now.month, 1)
        window_start = _month_start(first_year, first_month)
        window_end = _month_start(end_year, end_month)

        year_col = extract("year", Booking.date)
        month_col = extract("month", Booking.date)
        stmt = (
            select(year_col, month_col, func.count(Booking.id), func.coalesce(func.sum(Booking.amount), 0))
            .where(Booking.date >= window_start, Booking.date < window_end)
            .group_by(year_col, month_col)
        )
        grouped = {
            (int(year), int(month)): (count, float(revenue or 0))
            for year, month, count, revenue in (await self.db.execute(stmt)).all()
        }

        months = []
        for offset in range(TREND_MONTHS):
            year, month = _shift_month(first_year, first_month, offset)
            count, revenue = grouped.get((year, month), (0, 0.0))
            months.append(MonthlyTrend(
                year=year,
                month=month,
                label=MONTH_LABELS[month - 1],
                bookings=count,
                revenue=revenue,
            ))
        return DashboardTrends(months=months)
