"""Tests for the dashboard form posts and their redirects."""

from urllib.parse import parse_qs, urlsplit
from uuid import uuid4

import pytest


def _outcome(response):
    """Split a 303 redirect into its path and its msg/err parameters."""
    assert response.status_code == 303
    location = urlsplit(response.headers["location"])
    return location.path, {key: values[0] for key, values in parse_qs(location.query).items()}


TOUR_FORM = {
    "title": "Nanga Parbat Base Camp",
    "description": "Trek from Tarashing to the Rupal face.",
    "location": "Astore",
    "category": "Trekking",
    "price": "1450",
    "duration": "9",
    "difficulty_level": "Hard",
    "status": "Draft",
    "included_services": "Porters, Meals, ",
    "keywords": "rupal,astore",
}


@pytest.mark.asyncio
async def test_tour_add_page_renders(auth_client):
    response = await auth_client.get("/tours/add")

    assert response.status_code == 200
    assert "<h1>Add tour</h1>" in response.text
    assert 'action="/tours/add"' in response.text


@pytest.mark.asyncio
async def test_tour_add_creates_and_redirects(auth_client):
    response = await auth_client.post("/tours/add", data=TOUR_FORM)

    path, params = _outcome(response)
    assert path.startswith("/tours/")
    assert params == {"msg": "Tour created."}

    tour_id = path.removeprefix("/tours/")
    tour = (await auth_client.get(f"/api/tours/{tour_id}")).json()["data"]
    assert tour["price"] == 1450
    assert tour["difficulty_level"] == "Hard"
    assert tour["included_services"] == ["Porters", "Meals"]
    assert tour["keywords"] == ["rupal", "astore"]
    assert tour["meeting_point"] is None

    response = await auth_client.get(path, params=params)
    assert "Tour created." in response.text


@pytest.mark.asyncio
async def test_tour_add_invalid_rerenders_form(auth_client):
    response = await auth_client.post("/tours/add", data={**TOUR_FORM, "title": "  "})

    assert response.status_code == 400
    assert "title: Field required" in response.text
    assert 'value="Astore"' in response.text

    response = await auth_client.get("/api/tours")
    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_tour_edit_updates_supplied_fields(auth_client, sample_tour_data):
    response = await auth_client.post("/api/tours", json=sample_tour_data)
    tour_id = response.json()["data"]["id"]

    response = await auth_client.get(f"/tours/{tour_id}/edit")
    assert response.status_code == 200
    assert 'value="K2 Base Camp Trek"' in response.text

    response = await auth_client.post(
        f"/tours/{tour_id}/edit",
        data={"price": "2600", "status": "Published", "included_services": "Jeep transfer"},
    )

    assert _outcome(response) == (f"/tours/{tour_id}", {"msg": "Tour updated."})
    tour = (await auth_client.get(f"/api/tours/{tour_id}")).json()["data"]
    assert tour["title"] == "K2 Base Camp Trek"
    assert tour["price"] == 2600
    assert tour["status"] == "Published"
    assert tour["included_services"] == ["Jeep transfer"]


@pytest.mark.asyncio
async def test_tour_edit_rejects_unknown_difficulty(auth_client, sample_tour_data):
    response = await auth_client.post("/api/tours", json=sample_tour_data)
    tour_id = response.json()["data"]["id"]

    response = await auth_client.post(f"/tours/{tour_id}/edit", data={"difficulty_level": "Extreme"})

    assert response.status_code == 400
    assert "difficulty_level" in response.text
    tour = (await auth_client.get(f"/api/tours/{tour_id}")).json()["data"]
    assert tour["difficulty_level"] == "Easy"


@pytest.mark.asyncio
async def test_tour_edit_unknown_tour_goes_back_to_list(auth_client):
    response = await auth_client.post(f"/tours/{uuid4()}/edit", data={"price": "10"})

    assert response.status_code == 303
    assert response.headers["location"] == "/tours"


@pytest.mark.asyncio
async def test_tour_status_and_delete_forms(auth_client, sample_tour_data):
    response = await auth_client.post("/api/tours", json=sample_tour_data)
    tour_id = response.json()["data"]["id"]

    response = await auth_client.post(f"/tours/{tour_id}/status", data={"status": "Archived"})
    assert _outcome(response) == (f"/tours/{tour_id}", {"msg": "Tour status updated."})
    assert (await auth_client.get(f"/api/tours/{tour_id}")).json()["data"]["status"] == "Archived"

    response = await auth_client.post(f"/tours/{tour_id}/status", data={"status": "Live"})
    path, params = _outcome(response)
    assert "err" in params

    response = await auth_client.post(f"/tours/{tour_id}/delete")
    assert _outcome(response) == ("/tours", {"msg": "Tour deleted."})
    assert (await auth_client.get(f"/api/tours/{tour_id}")).status_code == 404


@pytest.mark.asyncio
async def test_booking_status_forms(auth_client, sample_booking_data):
    response = await auth_client.post("/api/bookings", json=sample_booking_data)
    booking_id = response.json()["data"]["id"]

    response = await auth_client.post(f"/bookings/{booking_id}/status", data={"status": "confirmed"})
    assert _outcome(response) == ("/bookings", {"msg": "Booking status updated."})

    response = await auth_client.post(f"/bookings/{booking_id}/payment-status", data={"payment_status": "partial"})
    assert _outcome(response) == ("/bookings", {"msg": "Payment status updated."})

    booking = (await auth_client.get(f"/api/bookings/{booking_id}")).json()["data"]
    assert booking["status"] == "confirmed"
    assert booking["payment_status"] == "partial"


@pytest.mark.asyncio
async def test_booking_status_form_reports_errors(auth_client, sample_booking_data):
    response = await auth_client.post("/api/bookings", json=sample_booking_data)
    booking_id = response.json()["data"]["id"]

    response = await auth_client.post(f"/bookings/{booking_id}/status", data={"status": "shipped"})
    path, params = _outcome(response)
    assert path == "/bookings"
    assert params["err"].startswith("status:")

    missing = uuid4()
    response = await auth_client.post(f"/bookings/{missing}/status", data={"status": "confirmed"})
    path, params = _outcome(response)
    assert params == {"err": f"The requested booking with ID '{missing}' could not be found"}

    response = await auth_client.get("/bookings", params={"err": "Payment gateway offline"})
    assert '<p class="error">Payment gateway offline</p>' in response.text


@pytest.mark.asyncio
async def test_ticket_forms(auth_client, customer, agent):
    response = await auth_client.post(
        "/api/support-tickets",
        json={"subject": "Lost luggage", "description": "Bag missing in Skardu.", "user_id": str(customer.id)},
    )
    ticket_id = response.json()["data"]["id"]

    response = await auth_client.post(f"/support/{ticket_id}/status", data={"status": "In_Progress"})
    assert _outcome(response) == ("/support", {"msg": "Ticket status updated."})

    response = await auth_client.post(f"/support/{ticket_id}/priority", data={"priority": "High"})
    assert _outcome(response) == ("/support", {"msg": "Ticket priority updated."})

    response = await auth_client.post(f"/support/{ticket_id}/assign", data={"agent_id": str(agent.id)})
    assert _outcome(response) == ("/support", {"msg": "Ticket assigned."})

    response = await auth_client.post(f"/support/{ticket_id}/respond", data={"message": "Bag located."})
    assert _outcome(response) == ("/support", {"msg": "Reply added."})

    ticket = (await auth_client.get(f"/api/support-tickets/{ticket_id}")).json()["data"]
    assert ticket["status"] == "In_Progress"
    assert ticket["priority"] == "High"
    assert ticket["assignee"]["name"] == "Sara Iqbal"
    assert [entry["message"] for entry in ticket["responses"]] == ["Bag located."]
    assert ticket["responses"][0]["responded_by"]


@pytest.mark.asyncio
async def test_ticket_assign_form_reports_unavailable_agent(auth_client, customer, agent):
    await auth_client.put(f"/api/agents/{agent.id}", json={"is_available": False})
    response = await auth_client.post(
        "/api/support-tickets",
        json={"subject": "Lost luggage", "description": "Bag missing in Skardu.", "user_id": str(customer.id)},
    )
    ticket_id = response.json()["data"]["id"]

    response = await auth_client.post(f"/support/{ticket_id}/assign", data={"agent_id": str(agent.id)})

    assert _outcome(response) == ("/support", {"err": "Agent is not available for assignment"})


@pytest.mark.asyncio
async def test_ticket_reply_form_needs_a_message(auth_client, customer):
    response = await auth_client.post(
        "/api/support-tickets",
        json={"subject": "Lost luggage", "description": "Bag missing in Skardu.", "user_id": str(customer.id)},
    )
    ticket_id = response.json()["data"]["id"]

    response = await auth_client.post(f"/support/{ticket_id}/respond", data={"message": "   "})

    path, params = _outcome(response)
    assert params["err"].startswith("message:")
    ticket = (await auth_client.get(f"/api/support-tickets/{ticket_id}")).json()["data"]
    assert ticket["responses"] == []


@pytest.mark.asyncio
async def test_inquiry_forms(auth_client, agent, sample_inquiry_data):
    response = await auth_client.post("/api/inquiries", json=sample_inquiry_data)
    inquiry_id = response.json()["data"]["id"]

    response = await auth_client.post(f"/inquiries/{inquiry_id}/assign", data={"agent_id": str(agent.id)})
    assert _outcome(response) == ("/inquiries", {"msg": "Inquiry assigned."})
    assert (await auth_client.get(f"/api/inquiries/{inquiry_id}")).json()["data"]["assigned_to"] == str(agent.id)

    response = await auth_client.post(f"/inquiries/{inquiry_id}/assign", data={"agent_id": ""})
    assert _outcome(response) == ("/inquiries", {"msg": "Inquiry unassigned."})

    await auth_client.post(f"/inquiries/{inquiry_id}/status", data={"status": "Resolved"})
    await auth_client.post(f"/inquiries/{inquiry_id}/priority", data={"priority": "Low"})
    response = await auth_client.post(f"/inquiries/{inquiry_id}/respond", data={"message": "Ten percent off."})
    assert _outcome(response) == ("/inquiries", {"msg": "Reply added."})

    inquiry = (await auth_client.get(f"/api/inquiries/{inquiry_id}")).json()["data"]
    assert inquiry["assigned_to"] is None
    assert inquiry["status"] == "Resolved"
    assert inquiry["priority"] == "Low"
    assert [entry["message"] for entry in inquiry["responses"]] == ["Ten percent off."]


@pytest.mark.asyncio
async def test_feedback_forms(auth_client, customer):
    response = await auth_client.post(
        "/api/feedback", json={"user_id": str(customer.id), "message": "Great porters."}
    )
    feedback_id = response.json()["data"]["id"]

    response = await auth_client.post(f"/feedbacks/{feedback_id}/status", data={"status": "Approved"})
    assert _outcome(response) == ("/feedbacks", {"msg": "Feedback status updated."})

    response = await auth_client.post(f"/feedbacks/{feedback_id}/respond", data={"message": "Thanks!"})
    assert _outcome(response) == ("/feedbacks", {"msg": "Reply added."})

    entry = (await auth_client.get(f"/api/feedback/{feedback_id}")).json()["data"]
    assert entry["status"] == "Approved"
    assert entry["responses"][0]["message"] == "Thanks!"


@pytest.mark.asyncio
async def test_form_posts_without_session_go_to_signin(test_client):
    # /feedbacks/<id> is outside the middleware's page prefixes
    response = await test_client.post(f"/feedbacks/{uuid4()}/status", data={"status": "Approved"})

    assert response.status_code == 303
    assert response.headers["location"] == "/signin"

    response = await test_client.post(f"/support/{uuid4()}/status", data={"status": "Closed"})

    assert response.status_code == 307
    assert response.headers["location"] == "/signin"
