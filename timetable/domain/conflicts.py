"""Booking conflict rules.

Intervals are half-open ``[start, end)``: an event ending at 11:00 does not
conflict with one starting at 11:00. Candidates are the events on the same
local calendar day (by date of ``start``) that use the venue.
"""

from datetime import date, datetime
from typing import Iterable

from timetable.domain.models import Event


def intervals_overlap(
    start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime
) -> bool:
    return start_a < end_b and end_a > start_b


def find_conflicts(
    events: Iterable[Event],
    venue_id: str,
    proposed_start: datetime,
    proposed_end: datetime,
    day: date,
    exclude_event_id: str | None = None,
) -> list[Event]:
    """Return the events that block ``venue_id`` for the proposed interval."""
    return [
        event
        for event in events
        if event.id != exclude_event_id
        and event.day == day
        and event.uses_venue(venue_id)
        and intervals_overlap(proposed_start, proposed_end, event.start, event.end)
    ]


def is_available(
    events: Iterable[Event],
    venue_id: str,
    proposed_start: datetime,
    proposed_end: datetime,
    day: date,
    exclude_event_id: str | None = None,
) -> bool:
    return not find_conflicts(
        events, venue_id, proposed_start, proposed_end, day, exclude_event_id
    )


def unavailable_venues(
    events: Iterable[Event],
    venue_ids: Iterable[str],
    proposed_start: datetime,
    proposed_end: datetime,
    day: date,
    exclude_event_id: str | None = None,
) -> list[str]:
    """Venues from ``venue_ids`` (in request order) that fail the check.

    A multi-venue booking is legal only when this list is empty.
    """
    events = list(events)
    return [
        venue_id
        for venue_id in venue_ids
        if not is_available(
            events, venue_id, proposed_start, proposed_end, day, exclude_event_id
        )
    ]
