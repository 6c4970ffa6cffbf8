"""In-process implementation of the TimetableStore.

The store owns the canonical collections and rejects any event write that
would leave two events overlapping on one venue. Every mutation builds the new
collections first and swaps them in with one assignment, then reports the
resulting snapshot to ``on_change`` (the persistence write-through).
"""

from dataclasses import replace
from datetime import date
from typing import Callable, Iterable, Self

from timetable.domain import CascadeResult, Event, StoreSnapshot, Venue
from timetable.domain.conflicts import unavailable_venues
from timetable.domain.errors import (
    DuplicateEventIdError,
    DuplicateVenueIdError,
    EmptyVenueSelectionError,
    EventNotFoundError,
    InvalidTimeRangeError,
    UnknownVenueError,
    VenueNotFoundError,
    VenueUnavailableError,
)
from timetable.stores.interfaces import TimetableStore

ChangeListener = Callable[[StoreSnapshot], None]


class InMemoryTimetableStore(TimetableStore):
    """Venue and event collections held in memory."""

    def __init__(self, on_change: ChangeListener | None = None) -> None:
        self._venues: tuple[Venue, ...] = ()
        self._events: tuple[Event, ...] = ()
        self._on_change = on_change

    @classmethod
    def create(
        cls,
        initial_venues: Iterable[Venue],
        initial_events: Iterable[Event] = (),
        on_change: ChangeListener | None = None,
    ) -> Self:
        """Build a store from initial state.

        Initial state is validated like any write but does not notify
        ``on_change``.
        """
        store = cls()
        for venue in initial_venues:
            store.add_venue(venue)
        for event in initial_events:
            store.add_event(event)
        store._on_change = on_change
        return store

    # Venues

    def list_venues(self) -> list[Venue]:
        return list(self._venues)

    def get_venue(self, venue_id: str) -> Venue | None:
        return next((v for v in self._venues if v.id == venue_id), None)

    def venue_exists(self, venue_id: str) -> bool:
        return self.get_venue(venue_id) is not None

    def add_venue(self, venue: Venue) -> Venue:
        if self.venue_exists(venue.id):
            raise DuplicateVenueIdError(venue.id)
        self._venues = (*self._venues, venue)
        self._changed()
        return venue

    def update_venue(self, venue: Venue) -> Venue:
        if not self.venue_exists(venue.id):
            raise VenueNotFoundError(venue.id)
        self._venues = tuple(venue if v.id == venue.id else v for v in self._venues)
        self._changed()
        return venue

    def delete_venue(self, venue_id: str) -> CascadeResult:
        venue = self.get_venue(venue_id)
        if venue is None:
            raise VenueNotFoundError(venue_id)

        events: list[Event] = []
        updated: list[str] = []
        deleted: list[str] = []
        for event in self._events:
            if not event.uses_venue(venue_id):
                events.append(event)
                continue
            remaining = tuple(v for v in event.venue_ids if v != venue_id)
            if remaining:
                events.append(replace(event, venue_ids=remaining))
                updated.append(event.id)
            else:
                deleted.append(event.id)

        self._events, self._venues = (
            tuple(events),
            tuple(v for v in self._venues if v.id != venue_id),
        )
        self._changed()
        return CascadeResult(
            venue=venue,
            updated_event_ids=tuple(updated),
            deleted_event_ids=tuple(deleted),
        )

    # Events

    def list_events(self) -> list[Event]:
        return list(self._events)

    def events_on(self, day: date) -> list[Event]:
        return [e for e in self._events if e.day == day]

    def get_event(self, event_id: str) -> Event | None:
        return next((e for e in self._events if e.id == event_id), None)

    def event_exists(self, event_id: str) -> bool:
        return self.get_event(event_id) is not None

    def add_event(self, event: Event) -> Event:
        if self.event_exists(event.id):
            raise DuplicateEventIdError(event.id)
        self._validate_event(event)
        self._events = (*self._events, event)
        self._changed()
        return event

    def update_event(self, event: Event) -> Event:
        if not self.event_exists(event.id):
            raise EventNotFoundError(event.id)
        self._validate_event(event)
        self._events = tuple(event if e.id == event.id else e for e in self._events)
        self._changed()
        return event

    def delete_event(self, event_id: str) -> Event:
        event = self.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        self._events = tuple(e for e in self._events if e.id != event_id)
        self._changed()
        return event

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(venues=self._venues, events=self._events)

    def _validate_event(self, event: Event) -> None:
        if event.end <= event.start:
            raise InvalidTimeRangeError()
        if not event.venue_ids:
            raise EmptyVenueSelectionError()
        unknown = tuple(v for v in event.venue_ids if not self.venue_exists(v))
        if unknown:
            raise UnknownVenueError(unknown)
        blocked = unavailable_venues(
            self._events,
            event.venue_ids,
            event.start,
            event.end,
            event.day,
            exclude_event_id=event.id,
        )
        if blocked:
            raise VenueUnavailableError(
                venue_id=blocked[0],
                venue_name=self.get_venue(blocked[0]).name,
                day=event.day,
                venue_ids=tuple(blocked),
            )

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self.snapshot())
