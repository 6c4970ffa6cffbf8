from timetable.stores.interfaces import CollectionStorage, TimetableStore
from timetable.stores.memory_store import InMemoryTimetableStore

__all__ = [
    "TimetableStore",
    "CollectionStorage",
    "InMemoryTimetableStore",
]
