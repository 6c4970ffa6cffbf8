"""Plain-record codec for the persisted collections.

``start``/``end`` are written as ISO-8601 strings and decoded back to
``datetime`` by the serializer fields of the same name.
"""

import logging
from dataclasses import replace

from rest_framework import serializers

from timetable.domain import Event, StoreSnapshot, Venue
from timetable.domain.value_objects import Color

VENUES_KEY = "venues"
EVENTS_KEY = "events"

logger = logging.getLogger(__name__)


def validate_color(value: str | None) -> str | None:
    if value is None:
        return value
    try:
        Color(value)
    except ValueError as exc:
        raise serializers.ValidationError(str(exc)) from exc
    return value


class VenueRecordSerializer(serializers.Serializer):
    """Serializer for Venue domain model."""

    id = serializers.CharField(max_length=255)
    name = serializers.CharField(max_length=255)
    color = serializers.CharField(
        required=False, allow_null=True, default=None, validators=[validate_color]
    )
    capacity = serializers.IntegerField(
        required=False, allow_null=True, default=None, min_value=0
    )

    def create(self, validated_data: dict) -> Venue:
        return Venue(**validated_data)


class EventRecordSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(max_length=255)
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, default=None
    )
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()
    color = serializers.CharField(
        required=False, allow_null=True, default=None, validators=[validate_color]
    )
    all_day = serializers.BooleanField(required=False, default=False)
    venue_ids = serializers.ListField(
        child=serializers.CharField(max_length=255), allow_empty=False
    )

    def validate(self, attrs: dict) -> dict:
        if attrs["end"] <= attrs["start"]:
            raise serializers.ValidationError("End time must be after start time")
        return attrs

    def create(self, validated_data: dict) -> Event:
        return Event(**validated_data)


def dump_snapshot(snapshot: StoreSnapshot) -> dict[str, list[dict]]:
    return {
        VENUES_KEY: VenueRecordSerializer(snapshot.venues, many=True).data,
        EVENTS_KEY: EventRecordSerializer(snapshot.events, many=True).data,
    }


def load_snapshot(
    venue_records: list[dict], event_records: list[dict]
) -> StoreSnapshot:
    """Decode stored records and drop references to venues that are gone.

    A venue id missing from the stored venues is removed from its event;
    an event left with no venue is dropped.

    Raises:
        serializers.ValidationError: If any record is malformed.
    """
    venues = VenueRecordSerializer(data=venue_records, many=True)
    venues.is_valid(raise_exception=True)
    events = EventRecordSerializer(data=event_records, many=True)
    events.is_valid(raise_exception=True)
    return repair_references(
        StoreSnapshot(venues=tuple(venues.save()), events=tuple(events.save()))
    )


def repair_references(snapshot: StoreSnapshot) -> StoreSnapshot:
    known = {venue.id for venue in snapshot.venues}
    events = []
    for event in snapshot.events:
        venue_ids = tuple(v for v in event.venue_ids if v in known)
        if not venue_ids:
            logger.warning("Dropping stored event %s: none of its venues exist", event.id)
            continue
        if venue_ids != event.venue_ids:
            logger.warning(
                "Stored event %s referenced missing venues %s",
                event.id,
                ", ".join(v for v in event.venue_ids if v not in known),
            )
            event = replace(event, venue_ids=venue_ids)
        events.append(event)
    return replace(snapshot, events=tuple(events))
