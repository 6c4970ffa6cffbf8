from timetable.services.conflict_engine import ConflictEngine, VenueAvailability
from timetable.services.timetable_service import DayLayout, TimetableService

__all__ = [
    "ConflictEngine",
    "VenueAvailability",
    "TimetableService",
    "DayLayout",
]
