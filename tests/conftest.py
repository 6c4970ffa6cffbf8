"""Pytest configuration and shared fixtures."""

from datetime import date, datetime

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from timetable.domain import Event, Venue
from timetable.services import TimetableService
from timetable.stores import InMemoryTimetableStore

DAY = date(2024, 6, 10)


def at(hour: int, minute: int = 0, day: date = DAY) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute)


def make_event(event_id: str, start: datetime, end: datetime, *venue_ids: str, **kwargs) -> Event:
    return Event(
        id=event_id,
        title=kwargs.pop("title", event_id),
        start=start,
        end=end,
        venue_ids=venue_ids,
        **kwargs,
    )


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def reset_service():
    config = apps.get_app_config("timetable")
    config.reset_service()
    yield
    config.reset_service()


@pytest.fixture
def venues() -> list[Venue]:
    return [
        Venue(id="A", name="Hall A", color="#FF6B6B", capacity=100),
        Venue(id="B", name="Hall B"),
        Venue(id="C", name="Hall C", capacity=20),
    ]


@pytest.fixture
def store(venues) -> InMemoryTimetableStore:
    return InMemoryTimetableStore.create(venues)


@pytest.fixture
def service(store) -> TimetableService:
    return TimetableService(store, clock=lambda: at(9, 40))
