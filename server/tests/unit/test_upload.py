"""Tests for tour image uploads."""

from uuid import uuid4

import pytest


@pytest.mark.asyncio
async def test_upload_skips_non_images(auth_client, upload_root):
    """Only the image parts of a mixed upload are stored."""
    response = await auth_client.post(
        "/api/upload",
        files=[
            ("images", ("concordia.jpg", b"jpeg-bytes", "image/jpeg")),
            ("images", ("itinerary.txt", b"day 1", "text/plain")),
        ],
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Images uploaded successfully"
    paths = data["data"]["paths"]
    assert len(paths) == 1
    assert paths[0].startswith("/uploads/tours/")
    assert paths[0].endswith(".jpg")

    stored = upload_root / paths[0].removeprefix("/uploads/")
    assert stored.read_bytes() == b"jpeg-bytes"


@pytest.mark.asyncio
async def test_upload_without_images_is_rejected(auth_client):
    response = await auth_client.post(
        "/api/upload",
        files=[("images", ("itinerary.txt", b"day 1", "text/plain"))],
    )

    assert response.status_code == 400
    assert response.json()["message"] == "No valid images uploaded"


@pytest.mark.asyncio
async def test_upload_without_files(auth_client):
    response = await auth_client.post("/api/upload", data={"note": "nothing attached"})

    assert response.status_code == 200
    data = response.json()
    assert data["data"]["paths"] == []
    assert data["message"] == "No files uploaded"


@pytest.mark.asyncio
async def test_upload_attaches_to_tour(auth_client, sample_tour_data):
    response = await auth_client.post(
        "/api/tours",
        json={**sample_tour_data, "images": ["/uploads/tours/existing.jpg"]},
    )
    tour_id = response.json()["data"]["id"]

    response = await auth_client.post(
        "/api/upload",
        data={"tour_id": tour_id},
        files=[("images", ("baltoro.png", b"png-bytes", "image/png"))],
    )

    assert response.status_code == 200
    new_path = response.json()["data"]["paths"][0]
    assert response.json()["data"]["tour_id"] == tour_id

    response = await auth_client.get(f"/api/tours/{tour_id}")
    assert response.json()["data"]["images"] == ["/uploads/tours/existing.jpg", new_path]


@pytest.mark.asyncio
async def test_upload_requires_session(test_client):
    response = await test_client.post(
        "/api/upload",
        files=[("images", ("concordia.jpg", b"jpeg-bytes", "image/jpeg"))],
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_upload_for_unknown_tour_stores_nothing(auth_client, upload_root):
    response = await auth_client.post(
        "/api/upload",
        data={"tour_id": str(uuid4())},
        files=[("images", ("concordia.jpg", b"jpeg-bytes", "image/jpeg"))],
    )

    assert response.status_code == 404
    assert response.json()["resource_type"] == "tour"
    assert list(upload_root.rglob("*.jpg")) == []
