"""Externally supplied left-to-right order of venue columns."""

from typing import Iterable

from timetable.domain.models import Venue


class VenueOrdering:
    """Stable venue column order with index lookup."""

    def __init__(self, venues: Iterable[Venue]) -> None:
        self._venues = tuple(venues)
        self._index: dict[str, int] = {}
        for position, venue in enumerate(self._venues):
            self._index.setdefault(venue.id, position)

    def index_of(self, venue_id: str) -> int | None:
        """Column of ``venue_id``, or None if it is not displayed."""
        return self._index.get(venue_id)

    def positions(self, venue_ids: Iterable[str]) -> list[int]:
        """Sorted, de-duplicated columns for ``venue_ids``; unknown ids are dropped."""
        found = {self.index_of(venue_id) for venue_id in venue_ids}
        found.discard(None)
        return sorted(found)
