"""Timetable service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants before any write
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Callable

from timetable.domain import (
    BookingRequest,
    CascadeResult,
    Event,
    EventId,
    TimeGrid,
    TimeRange,
    Venue,
    VenueId,
    VisualBlock,
    layout_day,
)
from timetable.domain.errors import (
    EmptyVenueSelectionError,
    EventNotFoundError,
    UnknownVenueError,
    VenueNotFoundError,
)
from timetable.services.conflict_engine import ConflictEngine, VenueAvailability
from timetable.stores.interfaces import TimetableStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayLayout:
    """Everything the timeline view needs to draw one day."""

    day: date
    venues: tuple[Venue, ...]
    blocks: tuple[VisualBlock, ...]
    slot_labels: tuple[str, ...]
    current_slot: str | None
    initial_scroll_top: float
    grid: TimeGrid


class TimetableService:
    """Service for venue and booking operations."""

    def __init__(
        self,
        store: TimetableStore,
        grid: TimeGrid | None = None,
        default_color: str = "#3b82f6",
        clock: Callable[[], datetime] = datetime.now,
        scroll_margin: float = 100,
    ) -> None:
        self._store = store
        self._grid = grid or TimeGrid()
        self._default_color = default_color
        self._clock = clock
        self._scroll_margin = scroll_margin
        self.conflicts = ConflictEngine(store)

    @property
    def grid(self) -> TimeGrid:
        return self._grid

    # Venues

    def list_venues(self) -> list[Venue]:
        return self._store.list_venues()

    def get_venue(self, venue_id: str) -> Venue:
        """Return a venue by ID.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """
        venue = self._store.get_venue(venue_id)
        if venue is None:
            raise VenueNotFoundError(venue_id)
        return venue

    def create_venue(
        self,
        name: str,
        color: str | None = None,
        capacity: int | None = None,
        venue_id: str | None = None,
    ) -> Venue:
        """Add a venue at the end of the display order.

        Without ``venue_id`` an id of the form ``venue_<epoch ms>`` is
        generated.
        """
        if venue_id is None:
            venue_id = self._unique_id(
                str(VenueId.generate(self._clock())), self._store.venue_exists
            )
        venue = self._store.add_venue(
            Venue(id=venue_id, name=name, color=color, capacity=capacity)
        )
        logger.info("Created venue %s (%s)", venue.id, venue.name)
        return venue

    def update_venue(
        self,
        venue_id: str,
        name: str,
        color: str | None = None,
        capacity: int | None = None,
    ) -> Venue:
        return self._store.update_venue(
            Venue(id=venue_id, name=name, color=color, capacity=capacity)
        )

    def delete_venue(self, venue_id: str) -> CascadeResult:
        """Delete a venue and detach it from its events.

        Events left without any venue are deleted with it.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """
        result = self._store.delete_venue(venue_id)
        logger.info(
            "Deleted venue %s: %d events reduced, %d events removed",
            venue_id,
            len(result.updated_event_ids),
            len(result.deleted_event_ids),
        )
        return result

    # Events

    def list_events(self, day: date | None = None) -> list[Event]:
        if day is None:
            return self._store.list_events()
        return self._store.events_on(day)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def book(self, request: BookingRequest) -> Event:
        """Create an event from a booking request.

        Raises:
            InvalidSlotError: If a slot label is not on the grid.
            InvalidTimeRangeError: If the end is not after the start.
            EmptyVenueSelectionError: If no venue is selected.
            UnknownVenueError: If a venue id does not exist.
            VenueUnavailableError: If any venue is already booked.
            DuplicateEventIdError: If a supplied event id is taken.
        """
        interval, venue_ids = self._validate(request)
        self.conflicts.ensure_available(
            venue_ids, interval.start, interval.end, request.day
        )
        event_id = request.event_id or self._unique_id(
            str(EventId.generate(interval.start, venue_ids)), self._store.event_exists
        )
        event = self._store.add_event(
            Event(
                id=event_id,
                title=request.title,
                description=request.description,
                start=interval.start,
                end=interval.end,
                color=request.color or self._default_color,
                all_day=request.all_day,
                venue_ids=venue_ids,
            )
        )
        logger.info(
            "Booked %s on %s for %s",
            event.id,
            request.day.isoformat(),
            ", ".join(venue_ids),
        )
        return event

    def update_booking(self, event_id: str, request: BookingRequest) -> Event:
        """Replace every field of an event; its own old slot never conflicts."""
        current = self.get_event(event_id)
        interval, venue_ids = self._validate(request)
        self.conflicts.ensure_available(
            venue_ids, interval.start, interval.end, request.day, exclude_event_id=event_id
        )
        event = self._store.update_event(
            replace(
                current,
                title=request.title,
                description=request.description,
                start=interval.start,
                end=interval.end,
                color=request.color or self._default_color,
                all_day=request.all_day,
                venue_ids=venue_ids,
            )
        )
        logger.info("Updated booking %s", event_id)
        return event

    def cancel_booking(self, event_id: str) -> Event:
        event = self._store.delete_event(event_id)
        logger.info("Cancelled booking %s", event_id)
        return event

    def availability(
        self,
        day: date,
        start_slot: str,
        end_slot: str,
        exclude_event_id: str | None = None,
    ) -> list[VenueAvailability]:
        interval = self._interval(day, start_slot, end_slot)
        return self.conflicts.availability(
            interval.start, interval.end, day, exclude_event_id
        )

    # Rendering

    def layout(self, day: date) -> DayLayout:
        venues = self._store.list_venues()
        now = self._clock()
        is_today = now.date() == day
        return DayLayout(
            day=day,
            venues=tuple(venues),
            blocks=tuple(layout_day(self._store.events_on(day), venues, day, self._grid)),
            slot_labels=tuple(self._grid.slot_labels()),
            current_slot=self._grid.slot_label(now) if is_today else None,
            initial_scroll_top=self._grid.initial_scroll_offset(now, self._scroll_margin),
            grid=self._grid,
        )

    def _interval(self, day: date, start_slot: str, end_slot: str) -> TimeRange:
        return TimeRange(
            start=self._grid.slot_to_datetime(day, start_slot),
            end=self._grid.slot_to_datetime(day, end_slot),
        )

    def _validate(self, request: BookingRequest) -> tuple[TimeRange, tuple[str, ...]]:
        if request.all_day:
            interval = self._interval(request.day, "00:00", "24:00")
        else:
            interval = self._interval(request.day, request.start_slot, request.end_slot)

        venue_ids = tuple(dict.fromkeys(request.venue_ids))
        if not venue_ids:
            raise EmptyVenueSelectionError()
        unknown = tuple(v for v in venue_ids if not self._store.venue_exists(v))
        if unknown:
            raise UnknownVenueError(unknown)
        return interval, venue_ids

    @staticmethod
    def _unique_id(base: str, exists: Callable[[str], bool]) -> str:
        candidate, n = base, 1
        while exists(candidate):
            n += 1
            candidate = f"{base}-{n}"
        return candidate
