"""Django ORM implementation of the CollectionStorage."""

from typing import Any

from django.db import transaction

from timetable.domain import StoreSnapshot
from timetable.models import StoredCollection
from timetable.stores.interfaces import CollectionStorage
from timetable.stores.records import EVENTS_KEY, VENUES_KEY, dump_snapshot, load_snapshot


class DjangoCollectionStorage(CollectionStorage):
    """Database-backed key-value storage using Django ORM."""

    def load(self, key: str) -> list[dict[str, Any]] | None:
        row = StoredCollection.objects.filter(key=key).first()
        return None if row is None else list(row.payload)

    def save(self, key: str, records: list[dict[str, Any]]) -> None:
        StoredCollection.objects.update_or_create(
            key=key, defaults={"payload": list(records)}
        )

    def load_snapshot(self) -> StoreSnapshot | None:
        """Return the stored collections, or None if nothing was ever saved."""
        venues = self.load(VENUES_KEY)
        if venues is None:
            return None
        return load_snapshot(venues, self.load(EVENTS_KEY) or [])

    def save_snapshot(self, snapshot: StoreSnapshot) -> None:
        """Write both collections in one transaction."""
        with transaction.atomic():
            for key, records in dump_snapshot(snapshot).items():
                self.save(key, records)
