from timetable.domain.layout import VisualBlock, layout_day
from timetable.domain.models import (
    BookingRequest,
    CascadeResult,
    Event,
    StoreSnapshot,
    Venue,
)
from timetable.domain.time_grid import TimeGrid
from timetable.domain.value_objects import Capacity, Color, EventId, TimeRange, VenueId
from timetable.domain.venue_order import VenueOrdering

__all__ = [
    "Venue",
    "Event",
    "BookingRequest",
    "StoreSnapshot",
    "CascadeResult",
    "VisualBlock",
    "TimeGrid",
    "VenueOrdering",
    "layout_day",
    "EventId",
    "VenueId",
    "Capacity",
    "Color",
    "TimeRange",
]
