from django.urls import path

from timetable.handlers import (
    AvailabilityView,
    DayLayoutView,
    DayListView,
    EventDetailView,
    EventListView,
    VenueDetailView,
    VenueListView,
)

urlpatterns = [
    path("venues", VenueListView.as_view(), name="venue-list"),
    path("venues/<str:venue_id>", VenueDetailView.as_view(), name="venue-detail"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("availability", AvailabilityView.as_view(), name="availability"),
    path("days", DayListView.as_view(), name="day-list"),
    path("days/<str:day>/layout", DayLayoutView.as_view(), name="day-layout"),
]
