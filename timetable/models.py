"""Django ORM models (persistence layer).

Collections are stored as key-value rows. Domain logic lives in
domain/ and the in-memory store in stores/memory_store.py.
"""

from django.db import models


class StoredCollection(models.Model):
    """One serialized collection (``venues`` or ``events``)."""

    key = models.CharField(max_length=64, unique=True)
    payload = models.JSONField(default=list)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self) -> str:
        return self.key
