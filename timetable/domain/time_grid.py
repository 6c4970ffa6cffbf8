"""Mapping between wall-clock time and the fixed slot grid of a day.

Slots quantize the timeline only. Stored event times are never snapped:
block geometry uses continuous minutes so off-slot times render in
proportion.
"""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from timetable.domain.errors import InvalidSlotError

MINUTES_PER_DAY = 24 * 60

_SLOT_LABEL = re.compile(r"^(\d{2}):(\d{2})$")


def minutes_since_midnight(instant: datetime | time) -> float:
    return (
        instant.hour * 60
        + instant.minute
        + instant.second / 60
        + instant.microsecond / 60_000_000
    )


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True)
class TimeGrid:
    """Slot granularity and pixel metrics of the day timeline."""

    slot_minutes: int = 15
    slot_height: float = 80
    venue_width: float = 250

    def __post_init__(self) -> None:
        if self.slot_minutes <= 0 or MINUTES_PER_DAY % self.slot_minutes:
            raise ValueError("Slot length must divide a day evenly")
        if self.slot_height <= 0 or self.venue_width <= 0:
            raise ValueError("Slot height and venue width must be positive")

    @property
    def slots_per_day(self) -> int:
        return MINUTES_PER_DAY // self.slot_minutes

    @property
    def day_height(self) -> float:
        return self.slots_per_day * self.slot_height

    def slot_index(self, instant: datetime | time) -> int:
        return math.floor(minutes_since_midnight(instant) / self.slot_minutes)

    def slot_to_offset(self, index: int) -> float:
        return index * self.slot_height

    def offset_for(self, instant: datetime | time) -> float:
        """Continuous vertical offset of ``instant`` from midnight."""
        return minutes_since_midnight(instant) / self.slot_minutes * self.slot_height

    def height_for(self, start: datetime, end: datetime) -> float:
        minutes = (end - start).total_seconds() / 60
        return minutes / self.slot_minutes * self.slot_height

    def slot_labels(self) -> list[str]:
        """Ruler labels, one per slot: ``00:00`` .. ``23:45``."""
        return [
            format_minutes(i * self.slot_minutes) for i in range(self.slots_per_day)
        ]

    def booking_slots(self) -> list[str]:
        """Selectable booking boundaries, ``00:00`` .. ``24:00`` inclusive."""
        return [*self.slot_labels(), format_minutes(MINUTES_PER_DAY)]

    def end_slot_options(self, start_slot: str) -> list[str]:
        start = self.parse_slot(start_slot)
        return [
            label for label in self.booking_slots() if self.parse_slot(label) > start
        ]

    def parse_slot(self, label: str) -> int:
        """Return minutes since midnight for an ``"HH:MM"`` slot label.

        Raises:
            InvalidSlotError: If the label is malformed, out of the day or
                not on a slot boundary.
        """
        match = _SLOT_LABEL.match(label or "")
        if not match:
            raise InvalidSlotError(label)
        hours, minutes = int(match.group(1)), int(match.group(2))
        total = hours * 60 + minutes
        if minutes >= 60 or total > MINUTES_PER_DAY or total % self.slot_minutes:
            raise InvalidSlotError(label)
        return total

    def slot_to_datetime(self, day: date, label: str) -> datetime:
        """Resolve a slot label on ``day``; ``"24:00"`` is the next midnight."""
        return datetime.combine(day, time.min) + timedelta(
            minutes=self.parse_slot(label)
        )

    def slot_label(self, instant: datetime | time) -> str:
        return format_minutes(self.slot_index(instant) * self.slot_minutes)

    def initial_scroll_offset(self, now: datetime | time, margin: float = 100) -> float:
        """Vertical scroll that brings the current slot into view."""
        return max(0.0, self.slot_to_offset(self.slot_index(now)) - margin)
