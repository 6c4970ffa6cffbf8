"""Scroll synchronization between the three timeline panes.

The time ruler scrolls vertically, the venue header horizontally and the
grid body on both axes. The pane that receives a user scroll is the source
for that gesture: its offsets are written straight into the other panes,
which are then marked busy until the next tick so the scroll events they
echo back are ignored.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class Pane(Enum):
    TIME_RULER = "time_ruler"
    VENUE_HEADER = "venue_header"
    GRID = "grid"

    @property
    def horizontal(self) -> bool:
        return self is not Pane.TIME_RULER

    @property
    def vertical(self) -> bool:
        return self is not Pane.VENUE_HEADER


@dataclass
class PaneState:
    scroll_left: float = 0.0
    scroll_top: float = 0.0
    busy: bool = False


class TickScheduler(ABC):
    """Defers a callback to the next cooperative tick (animation frame)."""

    @abstractmethod
    def call_on_next_tick(self, callback: Callable[[], None]) -> None:
        ...


class ManualTickScheduler(TickScheduler):
    """Scheduler driven explicitly by ``tick()``."""

    def __init__(self) -> None:
        self._pending: list[Callable[[], None]] = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    def call_on_next_tick(self, callback: Callable[[], None]) -> None:
        self._pending.append(callback)

    def tick(self) -> None:
        # Callbacks scheduled while ticking run on the following tick.
        pending, self._pending = self._pending, []
        for callback in pending:
            callback()


ApplyListener = Callable[[Pane, PaneState], None]


class ScrollCoordinator:
    """Single-writer broadcast of scroll offsets across panes."""

    def __init__(
        self,
        scheduler: TickScheduler,
        on_apply: ApplyListener | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._on_apply = on_apply
        self._panes = {pane: PaneState() for pane in Pane}

    def state(self, pane: Pane) -> PaneState:
        return self._panes[pane]

    def is_busy(self, pane: Pane) -> bool:
        return self._panes[pane].busy

    def offsets(self) -> dict[str, dict[str, float]]:
        return {
            pane.value: {"scroll_left": s.scroll_left, "scroll_top": s.scroll_top}
            for pane, s in self._panes.items()
        }

    def on_user_scroll(
        self,
        source: Pane,
        scroll_left: float | None = None,
        scroll_top: float | None = None,
    ) -> bool:
        """Handle a raw scroll event from ``source``.

        Returns False when the event is an echo of a programmatic scroll
        (the pane is busy) and nothing was propagated.
        """
        origin = self._panes[source]
        if origin.busy:
            return False

        if source.horizontal and scroll_left is not None:
            origin.scroll_left = scroll_left
        if source.vertical and scroll_top is not None:
            origin.scroll_top = scroll_top

        targets = []
        for pane, state in self._panes.items():
            if pane is source:
                continue
            moved = False
            if pane.horizontal and source.horizontal and scroll_left is not None:
                state.scroll_left = origin.scroll_left
                moved = True
            if pane.vertical and source.vertical and scroll_top is not None:
                state.scroll_top = origin.scroll_top
                moved = True
            if moved:
                state.busy = True
                targets.append(pane)
                if self._on_apply is not None:
                    self._on_apply(pane, state)

        if targets:
            self._scheduler.call_on_next_tick(lambda: self._release(targets))
        return True

    def _release(self, panes: list[Pane]) -> None:
        for pane in panes:
            self._panes[pane].busy = False
