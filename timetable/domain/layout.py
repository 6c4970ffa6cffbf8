"""Day timeline layout.

Turns the events of one day into absolutely positioned blocks on the
venue grid. An event booked on non-adjacent venues renders as one block per
run of adjacent columns, so the venues in the gaps never look booked.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from timetable.domain.models import Event, Venue
from timetable.domain.time_grid import TimeGrid
from timetable.domain.venue_order import VenueOrdering


@dataclass(frozen=True)
class VisualBlock:
    """One contiguous-venue run of an event, in pixels."""

    event_id: str
    top: float
    height: float
    left: float
    width: float
    group_index: int
    venue_index: int
    venue_span: int
    title: str
    start: datetime
    end: datetime
    color: str | None = None
    description: str | None = None
    all_day: bool = False

    @property
    def time_label(self) -> str:
        if self.all_day:
            return ""
        return f"{format_clock(self.start)} - {format_clock(self.end)}"


def format_clock(value: datetime) -> str:
    """12-hour clock text, e.g. ``9:00 AM``."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def venue_runs(positions: Iterable[int]) -> list[list[int]]:
    """Partition positions into maximal runs of consecutive integers.

    >>> venue_runs([5, 0, 2, 1, 6])
    [[0, 1, 2], [5, 6]]
    """
    runs: list[list[int]] = []
    for position in sorted(set(positions)):
        if runs and position == runs[-1][-1] + 1:
            runs[-1].append(position)
        else:
            runs.append([position])
    return runs


def layout_event(
    event: Event, ordering: VenueOrdering, grid: TimeGrid
) -> list[VisualBlock]:
    top = grid.offset_for(event.start)
    height = grid.height_for(event.start, event.end)
    return [
        VisualBlock(
            event_id=event.id,
            top=top,
            height=height,
            left=run[0] * grid.venue_width,
            width=len(run) * grid.venue_width,
            group_index=group_index,
            venue_index=run[0],
            venue_span=len(run),
            title=event.title,
            start=event.start,
            end=event.end,
            color=event.color,
            description=event.description,
            all_day=event.all_day,
        )
        for group_index, run in enumerate(venue_runs(ordering.positions(event.venue_ids)))
    ]


def layout_day(
    events: Iterable[Event],
    venues: Iterable[Venue],
    day: date,
    grid: TimeGrid | None = None,
) -> list[VisualBlock]:
    """Compute the blocks for ``day``, ordered by ``(event_id, venue_index)``.

    Venue ids missing from ``venues`` contribute no geometry; an event with
    no displayed venue yields no block.
    """
    grid = grid or TimeGrid()
    ordering = VenueOrdering(venues)
    blocks = [
        block
        for event in events
        if event.day == day
        for block in layout_event(event, ordering, grid)
    ]
    return sorted(blocks, key=lambda block: (block.event_id, block.venue_index))
