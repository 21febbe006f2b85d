"""Property-based tests for status and priority payloads."""

import pytest
from hypothesis import given, strategies as st
from pydantic import ValidationError

from mtp_admin.models.agent import PersonnelStatus
from mtp_admin.models.booking import BookingStatus, PaymentStatus
from mtp_admin.models.feedback import FeedbackStatus
from mtp_admin.models.support_ticket import TicketPriority, TicketStatus
from mtp_admin.models.tour import TourStatus
from mtp_admin.routers.pages import paginate
from mtp_admin.schemas.agent import AgentStatusUpdate
from mtp_admin.schemas.booking import BookingStatusUpdate, PaymentStatusUpdate
from mtp_admin.schemas.feedback import FeedbackStatusUpdate
from mtp_admin.schemas.support_ticket import TicketPriorityUpdate, TicketStatusUpdate
from mtp_admin.schemas.tour import TourStatusUpdate

PAYLOADS = [
    (BookingStatusUpdate, "status", BookingStatus),
    (PaymentStatusUpdate, "payment_status", PaymentStatus),
    (TicketStatusUpdate, "status", TicketStatus),
    (TicketPriorityUpdate, "priority", TicketPriority),
    (FeedbackStatusUpdate, "status", FeedbackStatus),
    (AgentStatusUpdate, "status", PersonnelStatus),
    (TourStatusUpdate, "status", TourStatus),
]


@pytest.mark.parametrize("schema,field,enum", PAYLOADS)
@given(value=st.text(max_size=20))
def test_values_outside_the_enum_are_rejected(schema, field, enum, value):
    """Anything that is not an exact enum value fails validation."""
    allowed = {member.value for member in enum}
    if value.strip() in allowed:
        return

    with pytest.raises(ValidationError):
        schema(**{field: value})


@pytest.mark.parametrize("schema,field,enum", PAYLOADS)
def test_enum_values_are_accepted(schema, field, enum):
    for member in enum:
        payload = schema(**{field: member.value})
        assert getattr(payload, field) == member.value


@given(
    total=st.integers(min_value=0, max_value=500),
    page=st.integers(min_value=-5, max_value=60),
    page_size=st.integers(min_value=-5, max_value=200),
)
def test_pagination_invariants(total, page, page_size):
    """Every item lands on exactly one page and the requested page is clamped."""
    items = list(range(total))

    result = paginate(items, page, page_size)

    assert 1 <= result["page"] <= result["pages"]
    assert 1 <= result["page_size"] <= 100
    assert result["total"] == total
    assert len(result["items"]) <= result["page_size"]

    collected = []
    for number in range(1, result["pages"] + 1):
        collected.extend(paginate(items, number, page_size)["items"])
    assert collected == items
