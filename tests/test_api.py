"""Integration tests for the timetable HTTP API.

Run with: pytest tests/test_api.py -v
"""

import pytest
from rest_framework.test import APIClient

VENUES = [
    {"id": "A", "name": "Hall A", "color": "#FF6B6B", "capacity": 100},
    {"id": "B", "name": "Hall B"},
    {"id": "C", "name": "Hall C"},
]


@pytest.fixture(autouse=True)
def timetable_settings(settings):
    settings.TIMETABLE = {"DEFAULT_VENUES": VENUES}


def book(client: APIClient, start: str, end: str, *venue_ids: str, **extra):
    payload = {
        "title": extra.pop("title", "Booking"),
        "day": extra.pop("day", "2024-06-10"),
        "start_slot": start,
        "end_slot": end,
        "venue_ids": list(venue_ids),
        **extra,
    }
    return client.post("/api/events", payload, format="json")


@pytest.mark.django_db
class TestVenueEndpoints:
    """Tests for /api/venues"""

    def test_list_default_venues(self, api_client: APIClient):
        response = api_client.get("/api/venues")

        assert response.status_code == 200
        assert [v["id"] for v in response.json()] == ["A", "B", "C"]
        assert response.json()[1] == {"id": "B", "name": "Hall B", "color": None, "capacity": None}

    def test_create_venue(self, api_client: APIClient):
        response = api_client.post(
            "/api/venues", {"name": "Hall D", "capacity": 30}, format="json"
        )

        assert response.status_code == 201
        assert response.json()["id"].startswith("venue_")
        assert len(api_client.get("/api/venues").json()) == 4

    def test_create_venue_rejects_bad_input(self, api_client: APIClient):
        response = api_client.post(
            "/api/venues", {"name": "X", "capacity": -1, "color": "red"}, format="json"
        )

        assert response.status_code == 400
        assert set(response.json()) == {"capacity", "color"}

    def test_create_duplicate_venue_id(self, api_client: APIClient):
        response = api_client.post("/api/venues", {"id": "A", "name": "Again"}, format="json")

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_VENUE_ID"

    def test_update_venue(self, api_client: APIClient):
        response = api_client.put("/api/venues/B", {"name": "Hall B2"}, format="json")

        assert response.status_code == 200
        assert api_client.get("/api/venues/B").json()["name"] == "Hall B2"

    def test_unknown_venue(self, api_client: APIClient):
        response = api_client.get("/api/venues/Z")

        assert response.status_code == 404
        assert response.json() == {"code": "VENUE_NOT_FOUND", "message": "Venue not found"}

    def test_delete_venue_cascades(self, api_client: APIClient):
        solo = book(api_client, "10:00", "11:00", "B").json()
        shared = book(api_client, "12:00", "13:00", "A", "B").json()

        response = api_client.delete("/api/venues/B")

        assert response.status_code == 200
        assert response.json()["deleted_event_ids"] == [solo["id"]]
        assert response.json()["updated_event_ids"] == [shared["id"]]
        assert api_client.get(f"/api/events/{solo['id']}").status_code == 404
        assert api_client.get(f"/api/events/{shared['id']}").json()["venue_ids"] == ["A"]


@pytest.mark.django_db
class TestBookingEndpoints:
    """Tests for /api/events"""

    def test_book_event(self, api_client: APIClient):
        response = book(api_client, "10:00", "11:30", "A", "C", title="Team Meeting")

        assert response.status_code == 201
        body = response.json()
        assert body["start"] == "2024-06-10T10:00:00"
        assert body["end"] == "2024-06-10T11:30:00"
        assert body["day"] == "2024-06-10"
        assert body["venue_ids"] == ["A", "C"]
        assert body["id"].endswith("-A-C")

    def test_overlap_scenario(self, api_client: APIClient):
        assert book(api_client, "10:00", "11:00", "A").status_code == 201

        rejected = book(api_client, "10:30", "11:30", "A")
        assert rejected.status_code == 409
        assert rejected.json()["code"] == "VENUE_UNAVAILABLE"
        assert rejected.json()["venue_ids"] == ["A"]
        assert "Hall A" in rejected.json()["message"]

        assert book(api_client, "11:00", "12:00", "A").status_code == 201
        assert book(api_client, "10:00", "11:00", "B").status_code == 201

    @pytest.mark.parametrize(
        "start, end, venue_ids, code",
        [
            ("10:00", "10:00", ["A"], "INVALID_TIME_RANGE"),
            ("10:05", "11:00", ["A"], "INVALID_SLOT"),
            ("10:00", "11:00", [], "EMPTY_VENUE_SELECTION"),
            ("10:00", "11:00", ["A", "Z"], "UNKNOWN_VENUE"),
        ],
    )
    def test_validation_errors(self, api_client: APIClient, start, end, venue_ids, code):
        response = book(api_client, start, end, *venue_ids)

        assert response.status_code == 400
        assert response.json()["code"] == code
        assert api_client.get("/api/events").json() == []

    def test_missing_slots_without_all_day(self, api_client: APIClient):
        response = api_client.post(
            "/api/events",
            {"title": "x", "day": "2024-06-10", "venue_ids": ["A"]},
            format="json",
        )
        assert response.status_code == 400

    def test_all_day_booking(self, api_client: APIClient):
        response = api_client.post(
            "/api/events",
            {"title": "Fair", "day": "2024-06-10", "venue_ids": ["A"], "all_day": True},
            format="json",
        )

        assert response.status_code == 201
        assert response.json()["end"] == "2024-06-11T00:00:00"

    def test_list_events_by_day(self, api_client: APIClient):
        book(api_client, "10:00", "11:00", "A")
        book(api_client, "10:00", "11:00", "A", day="2024-06-11")

        response = api_client.get("/api/events", {"day": "2024-06-11"})

        assert [e["day"] for e in response.json()] == ["2024-06-11"]
        assert len(api_client.get("/api/events").json()) == 2

    def test_list_events_bad_day(self, api_client: APIClient):
        assert api_client.get("/api/events", {"day": "June"}).status_code == 400

    def test_edit_booking_over_own_slot(self, api_client: APIClient):
        event = book(api_client, "10:00", "11:00", "A").json()

        response = api_client.put(
            f"/api/events/{event['id']}",
            {
                "title": "Moved",
                "day": "2024-06-10",
                "start_slot": "10:30",
                "end_slot": "11:30",
                "venue_ids": ["A"],
            },
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["id"] == event["id"]
        assert response.json()["title"] == "Moved"

    def test_cancel_booking(self, api_client: APIClient):
        event = book(api_client, "10:00", "11:00", "A").json()

        assert api_client.delete(f"/api/events/{event['id']}").status_code == 204
        assert api_client.delete(f"/api/events/{event['id']}").status_code == 404

    def test_bookings_are_persisted(self, api_client: APIClient):
        from django.apps import apps

        event = book(api_client, "10:00", "11:00", "A").json()
        apps.get_app_config("timetable").reset_service()

        assert api_client.get(f"/api/events/{event['id']}").status_code == 200


@pytest.mark.django_db
class TestAvailabilityEndpoint:
    """Tests for GET /api/availability"""

    def test_reports_each_venue(self, api_client: APIClient):
        event = book(api_client, "10:00", "11:00", "B").json()
        query = {"day": "2024-06-10", "start_slot": "10:30", "end_slot": "12:00"}

        response = api_client.get("/api/availability", query)

        assert [(r["venue"]["id"], r["available"]) for r in response.json()] == [
            ("A", True),
            ("B", False),
            ("C", True),
        ]

        excluded = api_client.get("/api/availability", {**query, "exclude": event["id"]})
        assert all(r["available"] for r in excluded.json())

    def test_bad_slot(self, api_client: APIClient):
        response = api_client.get(
            "/api/availability",
            {"day": "2024-06-10", "start_slot": "10:00", "end_slot": "10:07"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_SLOT"


@pytest.mark.django_db
class TestDayEndpoints:
    """Tests for /api/days"""

    def test_day_layout(self, api_client: APIClient):
        book(api_client, "10:00", "11:00", "A", "C", title="Split")

        response = api_client.get("/api/days/2024-06-10/layout")

        assert response.status_code == 200
        body = response.json()
        assert [v["id"] for v in body["venues"]] == ["A", "B", "C"]
        assert [(b["left"], b["width"]) for b in body["blocks"]] == [(0, 250), (500, 250)]
        assert body["blocks"][0]["top"] == 40 * 80
        assert body["blocks"][0]["height"] == 4 * 80
        assert body["blocks"][0]["time_label"] == "10:00 AM - 11:00 AM"
        assert len(body["slot_labels"]) == 96
        assert body["slot_height"] == 80
        assert body["day_height"] == 96 * 80

    def test_layout_bad_day(self, api_client: APIClient):
        assert api_client.get("/api/days/2024-13-01/layout").status_code == 400

    def test_month_days(self, api_client: APIClient):
        response = api_client.get("/api/days", {"month": "2024-02"})

        days = response.json()
        assert len(days) == 29
        assert days[0] == "2024-02-01"

    def test_range_days(self, api_client: APIClient):
        response = api_client.get("/api/days", {"start": "2024-06-29", "end": "2024-07-01"})

        assert response.json() == ["2024-06-29", "2024-06-30", "2024-07-01"]

    def test_days_requires_range(self, api_client: APIClient):
        assert api_client.get("/api/days", {"start": "2024-06-29"}).status_code == 400
