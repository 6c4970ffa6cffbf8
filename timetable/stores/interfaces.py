"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any

from timetable.domain import CascadeResult, Event, StoreSnapshot, Venue


class TimetableStore(ABC):
    """Interface for the canonical venue and event collections."""

    @abstractmethod
    def list_venues(self) -> list[Venue]:
        """Return all venues in display order."""
        ...

    @abstractmethod
    def get_venue(self, venue_id: str) -> Venue | None:
        """Return a venue by ID, or None if not found."""
        ...

    @abstractmethod
    def venue_exists(self, venue_id: str) -> bool:
        """Check if a venue exists."""
        ...

    @abstractmethod
    def add_venue(self, venue: Venue) -> Venue:
        """Append a venue to the display order."""
        ...

    @abstractmethod
    def update_venue(self, venue: Venue) -> Venue:
        """Replace the venue with the same ID, keeping its position."""
        ...

    @abstractmethod
    def delete_venue(self, venue_id: str) -> CascadeResult:
        """Remove a venue and detach it from every event, atomically."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in insertion order."""
        ...

    @abstractmethod
    def events_on(self, day: date) -> list[Event]:
        """Return the events whose start falls on ``day``."""
        ...

    @abstractmethod
    def get_event(self, event_id: str) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: str) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def add_event(self, event: Event) -> Event:
        """Insert a new event.

        Raises:
            VenueUnavailableError: If it overlaps a stored event on any of its venues.
        """
        ...

    @abstractmethod
    def update_event(self, event: Event) -> Event:
        """Replace the event with the same ID."""
        ...

    @abstractmethod
    def delete_event(self, event_id: str) -> Event:
        """Remove an event and return it."""
        ...

    @abstractmethod
    def snapshot(self) -> StoreSnapshot:
        """Return both collections as an immutable snapshot."""
        ...


class CollectionStorage(ABC):
    """Key-value persistence for serialized collections."""

    @abstractmethod
    def load(self, key: str) -> list[dict[str, Any]] | None:
        """Return the records stored under ``key``, or None if never written."""
        ...

    @abstractmethod
    def save(self, key: str, records: list[dict[str, Any]]) -> None:
        """Replace the records stored under ``key``."""
        ...
