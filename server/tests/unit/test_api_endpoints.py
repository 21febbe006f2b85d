"""Integration tests for the resource endpoints."""

from uuid import uuid4

import pytest


def _tour(user_id):
    return {
        "title": "Fairy Meadows Trek",
        "description": "Camp below Nanga Parbat.",
        "location": "Gilgit-Baltistan",
        "price": 650,
        "duration": 5,
        "category": "Trekking",
    }


def _booking(user_id):
    return {
        "package_name": "Fairy Meadows Trek",
        "package_id": str(uuid4()),
        "date": "2026-07-10T00:00:00Z",
        "end_date": "2026-07-15T00:00:00Z",
        "person": 3,
        "name": "Usman Tariq",
        "email": "usman@example.com",
        "phone": "+92 333 1112223",
        "amount": 1950,
    }


def _ticket(user_id):
    return {"subject": "Refund request", "description": "My flight was cancelled.", "user_id": user_id}


def _inquiry(user_id):
    return {
        "name": "Hamza Ali",
        "email": "hamza@example.com",
        "phone": "+92 321 7654321",
        "subject": "Visa help",
        "message": "Can you help with the visa letter?",
    }


def _feedback(user_id):
    return {"user_id": user_id, "message": "The guides were excellent."}


def _staff(user_id):
    return {"name": "Bilal Ahmed", "email": "bilal@mountaintravels.pk", "role": "Support"}


def _agent(user_id):
    return {
        "name": "Nadia Hussain",
        "email": "nadia@mountaintravels.pk",
        "role": "Support Agent",
        "department": "Customer Support",
    }


RESOURCES = [
    pytest.param("/api/tours", _tour, id="tours"),
    pytest.param("/api/bookings", _booking, id="bookings"),
    pytest.param("/api/support-tickets", _ticket, id="support-tickets"),
    pytest.param("/api/inquiries", _inquiry, id="inquiries"),
    pytest.param("/api/feedback", _feedback, id="feedback"),
    pytest.param("/api/staff", _staff, id="staff"),
    pytest.param("/api/agents", _agent, id="agents"),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("path,payload", RESOURCES)
async def test_create_missing_fields_persists_nothing(auth_client, path, payload):
    """Creating with an empty body is a 400 and leaves the collection empty."""
    response = await auth_client.post(path, json={})

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["violations"]

    response = await auth_client.get(path)
    assert response.status_code == 200
    assert response.json()["data"] == []


@pytest.mark.asyncio
@pytest.mark.parametrize("path,payload", RESOURCES)
async def test_create_then_get_by_id(auth_client, customer, path, payload):
    """A created record is retrievable by its id."""
    response = await auth_client.post(path, json=payload(str(customer.id)))

    assert response.status_code == 201
    created = response.json()
    assert created["success"] is True
    record_id = created["data"]["id"]

    response = await auth_client.get(f"{path}/{record_id}")
    assert response.status_code == 200
    assert response.json()["data"]["id"] == record_id


@pytest.mark.asyncio
@pytest.mark.parametrize("path,payload", RESOURCES)
async def test_update_unknown_id_is_not_found(auth_client, path, payload):
    response = await auth_client.put(f"{path}/{uuid4()}", json={})

    assert response.status_code == 404
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "Resource Not Found"


@pytest.mark.asyncio
@pytest.mark.parametrize("path,payload", RESOURCES)
async def test_status_patch_rejects_unknown_value(auth_client, customer, path, payload):
    response = await auth_client.post(path, json=payload(str(customer.id)))
    record_id = response.json()["data"]["id"]

    response = await auth_client.patch(f"{path}/{record_id}/status", json={"status": "Teleported"})

    assert response.status_code == 400
    assert response.json()["violations"][0]["path"] == "body.status"


@pytest.mark.asyncio
@pytest.mark.parametrize("path,payload", RESOURCES)
async def test_delete_removes_from_list(auth_client, customer, path, payload):
    response = await auth_client.post(path, json=payload(str(customer.id)))
    record_id = response.json()["data"]["id"]

    response = await auth_client.delete(f"{path}/{record_id}")
    assert response.status_code == 200
    assert response.json()["success"] is True

    response = await auth_client.get(path)
    assert record_id not in [item["id"] for item in response.json()["data"]]

    response = await auth_client.get(f"{path}/{record_id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_malformed_id_is_validation_error(auth_client):
    response = await auth_client.get("/api/tours/not-a-uuid")

    assert response.status_code == 400
    assert response.json()["error"] == "Validation Error"


@pytest.mark.asyncio
async def test_admin_routes_require_session(test_client, sample_tour_data):
    response = await test_client.post("/api/tours", json=sample_tour_data)

    assert response.status_code == 401
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "Unauthorized"


@pytest.mark.asyncio
async def test_bearer_header_is_accepted(test_client, session_token):
    response = await test_client.get(
        "/api/tours",
        headers={"Authorization": f"Bearer {session_token}"}
    )

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_public_submissions_need_no_session(
    test_client, customer, sample_booking_data, sample_inquiry_data
):
    """Bookings, inquiries, feedback, users and customer tickets accept anonymous posts."""
    assert (await test_client.post("/api/bookings", json=sample_booking_data)).status_code == 201
    assert (await test_client.post("/api/inquiries", json=sample_inquiry_data)).status_code == 201
    assert (await test_client.post(
        "/api/feedback", json={"user_id": str(customer.id), "message": "Lovely trip"}
    )).status_code == 201
    assert (await test_client.post(
        "/api/users", json={"name": "Zara Sheikh", "email": "zara@example.com"}
    )).status_code == 201

    response = await test_client.post(
        "/api/user/tickets",
        json={"subject": "Lost bag", "description": "Left it in the jeep.", "user_id": str(customer.id)},
    )
    assert response.status_code == 201
    ticket = response.json()["data"]
    assert ticket["status"] == "Pending"
    assert ticket["customer"]["email"] == "ayesha@example.com"


@pytest.mark.asyncio
async def test_ticket_for_unknown_user_is_not_found(test_client):
    response = await test_client.post(
        "/api/user/tickets",
        json={"subject": "Lost bag", "description": "Left it in the jeep.", "user_id": str(uuid4())},
    )

    assert response.status_code == 404
    assert response.json()["resource_type"] == "user"


@pytest.mark.asyncio
async def test_duplicate_staff_email_conflicts(auth_client):
    payload = _staff(None)
    assert (await auth_client.post("/api/staff", json=payload)).status_code == 201

    response = await auth_client.post("/api/staff", json={**payload, "name": "Another Bilal"})

    assert response.status_code == 409
    assert response.json()["message"] == "A staff member with this e-mail already exists"


@pytest.mark.asyncio
async def test_tour_create_normalises_loose_input(auth_client, sample_tour_data):
    related = str(uuid4())
    payload = {
        **sample_tour_data,
        "images": ["/uploads/tours/a.jpg", {"path": "/uploads/tours/b.jpg"}],
        "included_services": [{"value": "Guide", "label": "Guide"}, "Permits"],
        "keywords": [{"value": "k2"}],
        "related_tours": f"{related}, not-an-id,",
        "difficulty_level": "Extreme",
        "status": "Unknown",
    }

    response = await auth_client.post("/api/tours", json=payload)

    assert response.status_code == 201
    tour = response.json()["data"]
    assert tour["images"] == ["/uploads/tours/a.jpg", "/uploads/tours/b.jpg"]
    assert tour["included_services"] == ["Guide", "Permits"]
    assert tour["keywords"] == ["k2"]
    assert tour["related_tours"] == [related]
    assert tour["difficulty_level"] == "Easy"
    assert tour["status"] == "Draft"


@pytest.mark.asyncio
async def test_tour_list_filters_and_sorts(auth_client, sample_tour_data):
    await auth_client.post("/api/tours", json={**sample_tour_data, "title": "Hunza Valley", "price": 900, "status": "Published"})
    await auth_client.post("/api/tours", json={**sample_tour_data, "title": "Deosai Plains", "price": 400})

    response = await auth_client.get("/api/tours", params={"status": "Published"})
    assert [tour["title"] for tour in response.json()["data"]] == ["Hunza Valley"]

    response = await auth_client.get("/api/tours", params={"sort_by": "price", "status": "all"})
    assert [tour["price"] for tour in response.json()["data"]] == [400, 900]

    response = await auth_client.get("/api/tours", params={"search": "hunza"})
    assert len(response.json()["data"]) == 1


@pytest.mark.asyncio
async def test_booking_status_and_payment_updates(auth_client, sample_booking_data):
    response = await auth_client.post("/api/bookings", json=sample_booking_data)
    booking = response.json()["data"]
    assert booking["status"] == "pending"
    assert booking["currency"] == "USD"

    response = await auth_client.put(f"/api/bookings/{booking['id']}/status", json={"status": "confirmed"})
    assert response.json()["data"]["status"] == "confirmed"

    response = await auth_client.patch(
        f"/api/bookings/{booking['id']}/payment-status", json={"payment_status": "paid"}
    )
    assert response.json()["data"]["payment_status"] == "paid"

    response = await auth_client.get("/api/bookings/summary")
    assert response.json()["data"] == {"total": 1, "confirmed": 1, "pending": 0, "revenue": 4900.0}


@pytest.mark.asyncio
async def test_booking_message(auth_client, sample_booking_data):
    response = await auth_client.post("/api/bookings", json=sample_booking_data)
    booking_id = response.json()["data"]["id"]

    response = await auth_client.post(f"/api/bookings/{booking_id}/message", json={"message": "See you in Skardu!"})
    assert response.status_code == 200
    assert response.json()["message"] == "Message sent successfully"

    response = await auth_client.post(f"/api/bookings/{uuid4()}/message", json={"message": "Hello"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_ticket_assignment_and_responses(auth_client, customer, agent):
    response = await auth_client.post("/api/support-tickets", json=_ticket(str(customer.id)))
    ticket_id = response.json()["data"]["id"]

    response = await auth_client.post(
        "/api/support-tickets/assign", json={"ticket_id": ticket_id, "agent_id": str(agent.id)}
    )
    assert response.status_code == 200
    assert response.json()["data"]["assignee"]["name"] == "Sara Iqbal"

    response = await auth_client.get(f"/api/agents/{agent.id}")
    assert response.json()["data"]["assigned_tickets"] == [ticket_id]

    response = await auth_client.post(
        "/api/support-tickets/responses", json={"ticket_id": ticket_id, "message": "Refund issued."}
    )
    responses = response.json()["data"]["responses"]
    assert [entry["message"] for entry in responses] == ["Refund issued."]
    assert responses[0]["responded_by"]

    response = await auth_client.patch(f"/api/support-tickets/{ticket_id}/priority", json={"priority": "Urgent"})
    assert response.json()["data"]["priority"] == "Urgent"


@pytest.mark.asyncio
async def test_ticket_assignment_to_unavailable_agent(auth_client, customer, agent):
    await auth_client.put(f"/api/agents/{agent.id}", json={"is_available": False})
    response = await auth_client.post("/api/support-tickets", json=_ticket(str(customer.id)))
    ticket_id = response.json()["data"]["id"]

    response = await auth_client.post(
        "/api/support-tickets/assign", json={"ticket_id": ticket_id, "agent_id": str(agent.id)}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Agent is not available for assignment"


@pytest.mark.asyncio
async def test_inquiry_assign_and_unassign(auth_client, agent, sample_inquiry_data):
    response = await auth_client.post("/api/inquiries", json=sample_inquiry_data)
    inquiry_id = response.json()["data"]["id"]

    response = await auth_client.patch(f"/api/inquiries/{inquiry_id}/assign", json={"assigned_to": str(agent.id)})
    assert response.json()["data"]["assigned_to"] == str(agent.id)

    response = await auth_client.patch(f"/api/inquiries/{inquiry_id}/assign", json={"assigned_to": None})
    assert response.json()["data"]["assigned_to"] is None

    response = await auth_client.patch(f"/api/inquiries/{inquiry_id}/assign", json={"assigned_to": str(uuid4())})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_feedback_response_defaults_to_admin(auth_client, customer):
    response = await auth_client.post("/api/feedback", json=_feedback(str(customer.id)))
    feedback_id = response.json()["data"]["id"]

    response = await auth_client.post(
        "/api/feedback/response", json={"feedback_id": feedback_id, "message": "Thank you!"}
    )
    entry = response.json()["data"]["responses"][0]
    assert entry["message"] == "Thank you!"
    assert entry["responded_by"]

    response = await auth_client.post(
        "/api/feedback/response",
        json={"feedback_id": feedback_id, "message": "Shared with the team", "responded_by": "ops-team"},
    )
    assert response.json()["data"]["responses"][1]["responded_by"] == "ops-team"


@pytest.mark.asyncio
async def test_feedback_filters(auth_client, customer):
    await auth_client.post("/api/feedback", json={**_feedback(str(customer.id)), "category": "Bug"})
    await auth_client.post("/api/feedback", json=_feedback(str(customer.id)))

    response = await auth_client.get("/api/feedback", params={"category": "Bug"})
    assert len(response.json()["data"]) == 1

    response = await auth_client.get("/api/feedback", params={"category": "all", "status": "Pending"})
    assert len(response.json()["data"]) == 2


@pytest.mark.asyncio
async def test_users_listing(auth_client, customer):
    response = await auth_client.get("/api/users")

    assert response.status_code == 200
    assert [user["email"] for user in response.json()["data"]] == ["ayesha@example.com"]


@pytest.mark.asyncio
async def test_booking_end_date_before_start_is_rejected(auth_client, sample_booking_data):
    response = await auth_client.post(
        "/api/bookings", json={**sample_booking_data, "end_date": "2026-05-20T00:00:00Z"}
    )

    assert response.status_code == 400
    assert "end_date must not be before date" in response.json()["violations"][0]["message"]
    assert (await auth_client.get("/api/bookings")).json()["data"] == []

    response = await auth_client.post(
        "/api/bookings", json={**sample_booking_data, "end_date": sample_booking_data["date"]}
    )
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_booking_update_checks_dates_and_uppercases_currency(auth_client, sample_booking_data):
    response = await auth_client.post("/api/bookings", json={**sample_booking_data, "currency": "usd"})
    booking_id = response.json()["data"]["id"]
    assert response.json()["data"]["currency"] == "USD"

    response = await auth_client.put(f"/api/bookings/{booking_id}", json={"currency": "pkr"})
    assert response.status_code == 200
    assert response.json()["data"]["currency"] == "PKR"

    response = await auth_client.put(
        f"/api/bookings/{booking_id}",
        json={"date": "2026-08-10T00:00:00Z", "end_date": "2026-08-01T00:00:00Z"},
    )
    assert response.status_code == 400
    booking = (await auth_client.get(f"/api/bookings/{booking_id}")).json()["data"]
    assert booking["date"].startswith("2026-06-01")
