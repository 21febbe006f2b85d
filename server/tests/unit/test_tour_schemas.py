"""Tests for tour payload normalisation."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from mtp_admin.schemas.tour import TourCreate, TourStatusUpdate, TourUpdate

BASE = {
    "title": "Rakaposhi Base Camp",
    "description": "Day hike to the Rakaposhi viewpoint.",
    "location": "Nagar",
    "price": 300,
    "duration": 2,
    "category": "Hiking",
}


def test_defaults():
    tour = TourCreate(**BASE)

    assert tour.difficulty_level == "Easy"
    assert tour.status == "Draft"
    assert tour.max_group_size == 1
    assert tour.images == []
    assert tour.related_tours == []


def test_images_accept_paths_and_objects():
    tour = TourCreate(**BASE, images=[
        "/uploads/tours/one.jpg",
        {"path": "/uploads/tours/two.jpg"},
        {"name": "missing-path.jpg"},
        "",
    ])

    assert tour.images == ["/uploads/tours/one.jpg", "/uploads/tours/two.jpg"]


def test_non_list_images_become_empty():
    assert TourCreate(**BASE, images="not-a-list").images == []


def test_select_options_are_flattened():
    tour = TourCreate(
        **BASE,
        included_services=[{"value": "Porters", "label": "Porters"}, "Meals"],
        required_equipment=[{"value": "Sleeping bag"}],
    )

    assert tour.included_services == ["Porters", "Meals"]
    assert tour.required_equipment == ["Sleeping bag"]


def test_related_tours_from_comma_separated_string():
    first, second = str(uuid4()), str(uuid4())

    tour = TourCreate(**BASE, related_tours=f" {first} ,bogus,, {second}")

    assert tour.related_tours == [first, second]


def test_related_tours_from_list_drops_invalid_ids():
    valid = str(uuid4())

    tour = TourCreate(**BASE, related_tours=[valid, "nope", 42])

    assert tour.related_tours == [valid]


@pytest.mark.parametrize("value", ["Extreme", "", None, "easy"])
def test_unknown_difficulty_defaults_to_easy(value):
    assert TourCreate(**BASE, difficulty_level=value).difficulty_level == "Easy"


@pytest.mark.parametrize("value", ["Hard", "Medium"])
def test_known_difficulty_is_kept(value):
    assert TourCreate(**BASE, difficulty_level=value).difficulty_level == value


def test_unknown_status_defaults_to_draft():
    assert TourCreate(**BASE, status="Live").status == "Draft"
    assert TourCreate(**BASE, status="Published").status == "Published"


def test_update_leaves_unset_fields_out():
    update = TourUpdate(price=350, images=[{"path": "/uploads/tours/new.jpg"}])

    assert update.model_dump(exclude_unset=True) == {
        "price": 350,
        "images": ["/uploads/tours/new.jpg"],
    }


def test_status_update_is_strict():
    with pytest.raises(ValidationError):
        TourStatusUpdate(status="Live")


def test_required_fields():
    with pytest.raises(ValidationError) as exc_info:
        TourCreate(title="Only a title")

    missing = {error["loc"][0] for error in exc_info.value.errors()}
    assert missing == {"description", "location", "price", "duration", "category"}
