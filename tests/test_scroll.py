"""Unit tests for scroll synchronization between timeline panes.

Run with: pytest tests/test_scroll.py -v
"""

import pytest

from timetable.domain.scroll import ManualTickScheduler, Pane, ScrollCoordinator


@pytest.fixture
def scheduler() -> ManualTickScheduler:
    return ManualTickScheduler()


@pytest.fixture
def applied() -> list:
    return []


@pytest.fixture
def coordinator(scheduler, applied) -> ScrollCoordinator:
    return ScrollCoordinator(
        scheduler,
        on_apply=lambda pane, state: applied.append(
            (pane, state.scroll_left, state.scroll_top)
        ),
    )


class TestGridSource:
    """Tests for user scrolls on the grid pane."""

    def test_grid_scroll_moves_header_and_ruler(self, coordinator, applied):
        """The header follows horizontally and the ruler vertically."""
        assert coordinator.on_user_scroll(Pane.GRID, scroll_left=500, scroll_top=320)

        assert coordinator.state(Pane.VENUE_HEADER).scroll_left == 500
        assert coordinator.state(Pane.TIME_RULER).scroll_top == 320
        assert {pane for pane, _, _ in applied} == {Pane.VENUE_HEADER, Pane.TIME_RULER}

    def test_axes_are_respected(self, coordinator):
        """Neither follower moves on the axis it does not share."""
        coordinator.on_user_scroll(Pane.GRID, scroll_left=500, scroll_top=320)

        assert coordinator.state(Pane.VENUE_HEADER).scroll_top == 0
        assert coordinator.state(Pane.TIME_RULER).scroll_left == 0

    def test_echoed_events_are_ignored_until_next_tick(self, coordinator, scheduler):
        """Panes written to stay busy for one tick."""
        coordinator.on_user_scroll(Pane.GRID, scroll_left=500, scroll_top=320)

        assert coordinator.is_busy(Pane.VENUE_HEADER)
        assert not coordinator.on_user_scroll(Pane.VENUE_HEADER, scroll_left=500)
        assert not coordinator.on_user_scroll(Pane.TIME_RULER, scroll_top=320)
        assert not coordinator.is_busy(Pane.GRID)

        scheduler.tick()

        assert not coordinator.is_busy(Pane.VENUE_HEADER)
        assert not coordinator.is_busy(Pane.TIME_RULER)

    def test_no_feedback_loop(self, coordinator, scheduler, applied):
        """The echo from a programmatic scroll does not bounce back."""
        coordinator.on_user_scroll(Pane.GRID, scroll_left=250, scroll_top=0)
        coordinator.on_user_scroll(Pane.VENUE_HEADER, scroll_left=250)

        assert len(applied) == 2
        assert scheduler.pending == 1


class TestSingleAxisSources:
    """Tests for user scrolls on the header and ruler panes."""

    def test_header_scroll_moves_grid_horizontally(self, coordinator, scheduler):
        """The grid keeps its vertical offset when the header scrolls."""
        coordinator.on_user_scroll(Pane.GRID, scroll_left=0, scroll_top=800)
        scheduler.tick()
        coordinator.on_user_scroll(Pane.VENUE_HEADER, scroll_left=750)

        grid = coordinator.state(Pane.GRID)
        assert (grid.scroll_left, grid.scroll_top) == (750, 800)
        assert coordinator.state(Pane.TIME_RULER).scroll_top == 800

    def test_ruler_scroll_moves_grid_vertically_only(self, coordinator):
        """The header is untouched by a ruler scroll."""
        coordinator.on_user_scroll(Pane.TIME_RULER, scroll_top=1600)

        assert coordinator.state(Pane.GRID).scroll_top == 1600
        assert coordinator.is_busy(Pane.GRID)
        assert not coordinator.is_busy(Pane.VENUE_HEADER)

    def test_busy_grid_ignores_its_echo(self, coordinator, scheduler):
        """The grid's echo is dropped, a later real scroll propagates."""
        coordinator.on_user_scroll(Pane.TIME_RULER, scroll_top=1600)

        assert not coordinator.on_user_scroll(Pane.GRID, scroll_left=0, scroll_top=1600)

        scheduler.tick()
        assert coordinator.on_user_scroll(Pane.GRID, scroll_left=0, scroll_top=1680)
        assert coordinator.state(Pane.TIME_RULER).scroll_top == 1680


class TestManualTickScheduler:
    """Tests for the manual tick scheduler and offset snapshots."""

    def test_callbacks_scheduled_during_tick_wait_for_next(self, scheduler):
        """A callback queued while ticking runs on the following tick."""
        calls = []

        def first():
            calls.append("first")
            scheduler.call_on_next_tick(lambda: calls.append("second"))

        scheduler.call_on_next_tick(first)
        scheduler.tick()
        assert calls == ["first"]

        scheduler.tick()
        assert calls == ["first", "second"]

    def test_offsets_snapshot(self, coordinator):
        """offsets() reports every pane by name."""
        coordinator.on_user_scroll(Pane.GRID, scroll_left=10, scroll_top=20)

        assert coordinator.offsets()["venue_header"] == {"scroll_left": 10, "scroll_top": 0.0}
