"""Availability checks against the store's current events."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from timetable.domain import Event, Venue
from timetable.domain import conflicts
from timetable.domain.errors import VenueUnavailableError
from timetable.stores.interfaces import TimetableStore


@dataclass(frozen=True)
class VenueAvailability:
    venue: Venue
    available: bool


class ConflictEngine:
    """Decides whether a venue can take a proposed interval."""

    def __init__(self, store: TimetableStore) -> None:
        self._store = store

    def find_conflicts(
        self,
        venue_id: str,
        proposed_start: datetime,
        proposed_end: datetime,
        day: date,
        exclude_event_id: str | None = None,
    ) -> list[Event]:
        return conflicts.find_conflicts(
            self._store.events_on(day),
            venue_id,
            proposed_start,
            proposed_end,
            day,
            exclude_event_id,
        )

    def is_available(
        self,
        venue_id: str,
        proposed_start: datetime,
        proposed_end: datetime,
        day: date,
        exclude_event_id: str | None = None,
    ) -> bool:
        return not self.find_conflicts(
            venue_id, proposed_start, proposed_end, day, exclude_event_id
        )

    def availability(
        self,
        proposed_start: datetime,
        proposed_end: datetime,
        day: date,
        exclude_event_id: str | None = None,
    ) -> list[VenueAvailability]:
        """Availability of every venue, in display order."""
        events = self._store.events_on(day)
        return [
            VenueAvailability(
                venue=venue,
                available=conflicts.is_available(
                    events, venue.id, proposed_start, proposed_end, day, exclude_event_id
                ),
            )
            for venue in self._store.list_venues()
        ]

    def ensure_available(
        self,
        venue_ids: Iterable[str],
        proposed_start: datetime,
        proposed_end: datetime,
        day: date,
        exclude_event_id: str | None = None,
    ) -> None:
        """Check every venue independently; all must be free.

        Raises:
            VenueUnavailableError: Naming the first blocked venue.
        """
        blocked = conflicts.unavailable_venues(
            self._store.events_on(day),
            venue_ids,
            proposed_start,
            proposed_end,
            day,
            exclude_event_id,
        )
        if blocked:
            venue = self._store.get_venue(blocked[0])
            raise VenueUnavailableError(
                venue_id=blocked[0],
                venue_name=venue.name if venue else blocked[0],
                day=day,
                venue_ids=tuple(blocked),
            )
