"""Domain error codes for the timetable module."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    VENUE_NOT_FOUND = "VENUE_NOT_FOUND"
    DUPLICATE_EVENT_ID = "DUPLICATE_EVENT_ID"
    DUPLICATE_VENUE_ID = "DUPLICATE_VENUE_ID"
    INVALID_TIME_RANGE = "INVALID_TIME_RANGE"
    INVALID_SLOT = "INVALID_SLOT"
    EMPTY_VENUE_SELECTION = "EMPTY_VENUE_SELECTION"
    UNKNOWN_VENUE = "UNKNOWN_VENUE"
    VENUE_UNAVAILABLE = "VENUE_UNAVAILABLE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class VenueNotFoundError(DomainError):
    """Raised when a venue is not found."""

    def __init__(self, venue_id: str) -> None:
        super().__init__(
            code=ErrorCode.VENUE_NOT_FOUND,
            message="Venue not found",
        )
        self.venue_id = venue_id


class DuplicateEventIdError(DomainError):
    """Raised when an event id is already taken."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_EVENT_ID,
            message="An event with this id already exists",
        )
        self.event_id = event_id


class DuplicateVenueIdError(DomainError):
    """Raised when a venue id is already taken."""

    def __init__(self, venue_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_VENUE_ID,
            message="A venue with this id already exists",
        )
        self.venue_id = venue_id


class InvalidTimeRangeError(DomainError):
    """Raised when an interval has zero or negative duration."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_RANGE,
            message="End time must be after start time",
        )


class InvalidSlotError(DomainError):
    """Raised when a slot label is malformed or off the slot grid."""

    def __init__(self, label: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SLOT,
            message=f"Invalid time slot: {label!r}",
        )
        self.label = label


class EmptyVenueSelectionError(DomainError):
    """Raised when a booking names no venue."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_VENUE_SELECTION,
            message="Please select at least one venue",
        )


class UnknownVenueError(DomainError):
    """Raised when a booking references venues that do not exist."""

    def __init__(self, venue_ids: tuple[str, ...]) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_VENUE,
            message=f"Unknown venue: {', '.join(venue_ids)}",
        )
        self.venue_ids = venue_ids


class VenueUnavailableError(DomainError):
    """Raised when at least one requested venue is already booked.

    ``venue_id``/``venue_name`` name the first failing venue in request
    order; ``venue_ids`` lists every failing venue.
    """

    def __init__(
        self,
        venue_id: str,
        venue_name: str,
        day: date,
        venue_ids: tuple[str, ...] = (),
    ) -> None:
        super().__init__(
            code=ErrorCode.VENUE_UNAVAILABLE,
            message=(
                f"Time slot is not available for venue: {venue_name} "
                f"on {day.isoformat()}"
            ),
        )
        self.venue_id = venue_id
        self.venue_name = venue_name
        self.day = day
        self.venue_ids = venue_ids or (venue_id,)
