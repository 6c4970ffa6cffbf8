from timetable.handlers.views import (
    AvailabilityView,
    DayLayoutView,
    DayListView,
    EventDetailView,
    EventListView,
    VenueDetailView,
    VenueListView,
)

__all__ = [
    "VenueListView",
    "VenueDetailView",
    "EventListView",
    "EventDetailView",
    "AvailabilityView",
    "DayListView",
    "DayLayoutView",
]
