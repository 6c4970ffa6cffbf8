"""Timetable settings, read from ``settings.TIMETABLE`` with defaults."""

from typing import Any

from django.conf import settings

from timetable.domain import TimeGrid, Venue

DEFAULTS: dict[str, Any] = {
    "SLOT_MINUTES": 15,
    "SLOT_HEIGHT": 80,
    "VENUE_WIDTH": 250,
    "DEFAULT_COLOR": "#3b82f6",
    "INITIAL_SCROLL_MARGIN": 100,
    "DEFAULT_VENUES": [],
}


def get(name: str) -> Any:
    return getattr(settings, "TIMETABLE", {}).get(name, DEFAULTS[name])


def time_grid() -> TimeGrid:
    return TimeGrid(
        slot_minutes=get("SLOT_MINUTES"),
        slot_height=get("SLOT_HEIGHT"),
        venue_width=get("VENUE_WIDTH"),
    )


def default_venues() -> list[Venue]:
    return [Venue(**record) for record in get("DEFAULT_VENUES")]
