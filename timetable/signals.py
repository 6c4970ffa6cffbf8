"""Django signals for persisting store changes.

Persistence is write-through and fire-and-forget: a failing receiver is
logged and the in-memory store stays authoritative.
"""

import logging

from django.dispatch import Signal, receiver

from timetable.domain import StoreSnapshot
from timetable.stores.django_store import DjangoCollectionStorage

logger = logging.getLogger(__name__)

# Sent with ``snapshot=StoreSnapshot`` after every store mutation.
store_changed = Signal()


def notify_store_changed(snapshot: StoreSnapshot) -> None:
    """Store change listener that broadcasts ``store_changed``."""
    responses = store_changed.send_robust(sender=StoreSnapshot, snapshot=snapshot)
    for handler, response in responses:
        if isinstance(response, Exception):
            logger.error(
                "Persisting timetable snapshot failed in %s",
                getattr(handler, "__qualname__", handler),
                exc_info=response,
            )


@receiver(store_changed)
def persist_snapshot(sender, snapshot: StoreSnapshot, **kwargs) -> None:
    """Write both collections to the database."""
    DjangoCollectionStorage().save_snapshot(snapshot)
    logger.debug(
        "Persisted %d venues and %d events",
        len(snapshot.venues),
        len(snapshot.events),
    )
