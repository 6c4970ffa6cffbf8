"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
The Django ORM model that stores them is in timetable/models.py.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from timetable.domain.value_objects import Capacity, Color, EventId, VenueId


@dataclass(frozen=True)
class Venue:
    """Domain representation of a Venue."""

    id: str
    name: str
    color: str | None = None
    capacity: int | None = None

    def __post_init__(self) -> None:
        VenueId(self.id)
        if self.color is not None:
            Color(self.color)
        if self.capacity is not None:
            Capacity(self.capacity)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    ``venue_ids`` keeps the order the venues were selected in. Duration and
    venue validity are checked by the store, not here, so that stale records
    can still be loaded and repaired.
    """

    id: str
    title: str
    start: datetime
    end: datetime
    venue_ids: tuple[str, ...]
    description: str | None = None
    color: str | None = None
    all_day: bool = False

    def __post_init__(self) -> None:
        EventId(self.id)
        if self.color is not None:
            Color(self.color)
        object.__setattr__(self, "venue_ids", tuple(self.venue_ids))

    @property
    def day(self) -> date:
        """Calendar day the event belongs to (local date of ``start``)."""
        return self.start.date()

    def uses_venue(self, venue_id: str) -> bool:
        return venue_id in self.venue_ids


@dataclass(frozen=True)
class BookingRequest:
    """A create/edit request as submitted by the booking form.

    ``start_slot``/``end_slot`` are ``"HH:MM"`` labels on the slot grid;
    ``"24:00"`` is accepted as an end slot.
    """

    title: str
    day: date
    start_slot: str
    end_slot: str
    venue_ids: tuple[str, ...]
    description: str | None = None
    color: str | None = None
    all_day: bool = False
    event_id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "venue_ids", tuple(self.venue_ids))


@dataclass(frozen=True)
class StoreSnapshot:
    """Immutable view of both collections at one point in time."""

    venues: tuple[Venue, ...] = ()
    events: tuple[Event, ...] = ()


@dataclass(frozen=True)
class CascadeResult:
    """Outcome of deleting a venue."""

    venue: Venue
    updated_event_ids: tuple[str, ...] = field(default=())
    deleted_event_ids: tuple[str, ...] = field(default=())
