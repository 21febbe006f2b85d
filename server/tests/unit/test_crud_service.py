"""Unit tests for the shared list, filter and sort behaviour."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from mtp_admin.core.exceptions import ConflictError, NotFoundError
from mtp_admin.services.booking_service import BookingService
from mtp_admin.services.staff_service import StaffService


async def _seed_staff(session):
    service = StaffService(session)
    await service.create({"name": "Zainab Riaz", "email": "zainab@mountaintravels.pk", "role": "Manager", "department": "Operations"})
    await service.create({"name": "Asad Javed", "email": "asad@mountaintravels.pk", "role": "TourGuide", "department": "Field"})
    await service.create({"name": "Mariam Noor", "email": "mariam@mountaintravels.pk", "role": "Support", "status": "inactive"})
    return service


@pytest.mark.asyncio
async def test_default_sort_is_by_name(test_session):
    service = await _seed_staff(test_session)

    staff = await service.list()

    assert [member.name for member in staff] == ["Asad Javed", "Mariam Noor", "Zainab Riaz"]


@pytest.mark.asyncio
async def test_unknown_sort_key_falls_back_to_default(test_session):
    service = await _seed_staff(test_session)

    staff = await service.list(sort_by="salary")

    assert [member.name for member in staff] == ["Asad Javed", "Mariam Noor", "Zainab Riaz"]


@pytest.mark.asyncio
async def test_sort_by_email(test_session):
    service = await _seed_staff(test_session)

    staff = await service.list(sort_by="email")

    assert [member.email for member in staff] == [
        "asad@mountaintravels.pk",
        "mariam@mountaintravels.pk",
        "zainab@mountaintravels.pk",
    ]


@pytest.mark.asyncio
async def test_search_is_case_insensitive(test_session):
    service = await _seed_staff(test_session)

    assert [member.name for member in await service.list(search="OPERATIONS")] == ["Zainab Riaz"]
    assert [member.name for member in await service.list(search="  noor ")] == ["Mariam Noor"]
    assert len(await service.list(search="")) == 3


@pytest.mark.asyncio
async def test_search_wildcards_match_literally(test_session):
    service = await _seed_staff(test_session)
    await service.create({"name": "Omar Shah", "email": "omar@mountaintravels.pk", "role": "Driver", "department": "Fleet_North"})

    assert await service.list(search="%") == []
    assert [member.name for member in await service.list(search="_")] == ["Omar Shah"]
    assert [member.name for member in await service.list(search="t_n")] == ["Omar Shah"]


@pytest.mark.asyncio
async def test_all_and_empty_filters_are_ignored(test_session):
    service = await _seed_staff(test_session)

    assert len(await service.list(status="all")) == 3
    assert len(await service.list(status="")) == 3
    assert [member.name for member in await service.list(status="inactive")] == ["Mariam Noor"]


@pytest.mark.asyncio
async def test_duplicate_email_conflicts(test_session):
    service = await _seed_staff(test_session)

    with pytest.raises(ConflictError):
        await service.create({"name": "Someone Else", "email": "asad@mountaintravels.pk", "role": "Agent"})

    assert len(await service.list()) == 3


@pytest.mark.asyncio
async def test_update_only_touches_supplied_fields(test_session):
    service = await _seed_staff(test_session)
    member = (await service.list(search="Asad"))[0]

    updated = await service.update(member.id, {"department": "Treks"})

    assert updated.department == "Treks"
    assert updated.role == "TourGuide"
    assert updated.email == "asad@mountaintravels.pk"


@pytest.mark.asyncio
async def test_missing_records_raise_not_found(test_session):
    service = StaffService(test_session)

    assert await service.get_by_id("not-a-uuid") is None
    with pytest.raises(NotFoundError):
        await service.update(uuid4(), {"name": "Nobody"})
    with pytest.raises(NotFoundError):
        await service.delete(uuid4())


def _booking(**overrides):
    return {
        "package_name": "Hunza Valley",
        "package_id": str(uuid4()),
        "date": datetime(2026, 5, 1, tzinfo=timezone.utc),
        "end_date": datetime(2026, 5, 8, tzinfo=timezone.utc),
        "person": 2,
        "name": "Fatima Zahra",
        "email": "fatima@example.com",
        "phone": "+92 300 0000000",
        "amount": 1000,
        **overrides,
    }


@pytest.mark.asyncio
async def test_booking_summary(test_session):
    service = BookingService(test_session)
    await service.create(_booking(status="confirmed", amount=1200))
    await service.create(_booking(status="confirmed", amount=800))
    await service.create(_booking(status="cancelled", amount=500))
    await service.create(_booking())

    summary = await service.summary()

    assert summary.total == 4
    assert summary.confirmed == 2
    assert summary.pending == 1
    assert summary.revenue == 2000.0


@pytest.mark.asyncio
async def test_booking_summary_empty(test_session):
    summary = await BookingService(test_session).summary()

    assert summary.model_dump() == {"total": 0, "confirmed": 0, "pending": 0, "revenue": 0.0}


@pytest.mark.asyncio
async def test_bookings_sorted_by_trip_date_newest_first(test_session):
    service = BookingService(test_session)
    await service.create(_booking(name="Early", date=datetime(2026, 3, 1, tzinfo=timezone.utc)))
    await service.create(_booking(name="Late", date=datetime(2026, 9, 1, tzinfo=timezone.utc)))

    bookings = await service.list()

    assert [booking.name for booking in bookings] == ["Late", "Early"]
