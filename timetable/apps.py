import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class TimetableConfig(AppConfig):
    """Owns the process-wide TimetableService used by the HTTP handlers."""

    name = "timetable"
    default_auto_field = "django.db.models.BigAutoField"
    _service = None

    def ready(self) -> None:
        from timetable import signals  # noqa: F401

    @property
    def service(self):
        if self._service is None:
            self._service = self.build_service()
        return self._service

    def reset_service(self) -> None:
        self._service = None

    def build_service(self):
        """Load the stored collections, or start from the default venues.

        Stored data that cannot be decoded, or that breaks a store rule such
        as overlapping events, is logged and replaced by the defaults.
        """
        from rest_framework.exceptions import ValidationError

        from timetable import conf
        from timetable.domain.errors import DomainError
        from timetable.services import TimetableService
        from timetable.signals import notify_store_changed
        from timetable.stores import InMemoryTimetableStore
        from timetable.stores.django_store import DjangoCollectionStorage

        store = None
        try:
            snapshot = DjangoCollectionStorage().load_snapshot()
            if snapshot is not None:
                store = InMemoryTimetableStore.create(
                    snapshot.venues, snapshot.events, on_change=notify_store_changed
                )
        except (ValidationError, DomainError):
            logger.exception("Stored timetable is unreadable, starting from defaults")

        if store is None:
            store = InMemoryTimetableStore.create(
                conf.default_venues(), on_change=notify_store_changed
            )
        logger.info(
            "Timetable loaded with %d venues and %d events",
            len(store.list_venues()),
            len(store.list_events()),
        )
        return TimetableService(
            store,
            grid=conf.time_grid(),
            default_color=conf.get("DEFAULT_COLOR"),
            scroll_margin=conf.get("INITIAL_SCROLL_MARGIN"),
        )
