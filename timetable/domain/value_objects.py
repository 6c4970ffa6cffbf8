"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Self

from timetable.domain.errors import InvalidTimeRangeError

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class VenueId:
    """Unique identifier for a Venue."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Venue id cannot be empty")

    @classmethod
    def generate(cls, now: datetime) -> Self:
        return cls(value=f"venue_{_epoch_millis(now)}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Event id cannot be empty")

    @classmethod
    def generate(cls, start: datetime, venue_ids: Iterable[str]) -> Self:
        """Build the deterministic id ``<start epoch ms>-<venue ids>``."""
        return cls(value="-".join([str(_epoch_millis(start)), *venue_ids]))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


@dataclass(frozen=True)
class Color:
    """CSS hex color such as ``#3b82f6``."""

    value: str

    def __post_init__(self) -> None:
        if not _HEX_COLOR.match(self.value):
            raise ValueError(f"Invalid color: {self.value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TimeRange:
    """Half-open interval ``[start, end)`` with positive duration."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise InvalidTimeRangeError()


def _epoch_millis(value: datetime) -> int:
    return int(value.timestamp() * 1000)
