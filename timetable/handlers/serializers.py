"""Serializers for transforming domain models to API responses and back."""

from rest_framework import serializers

from timetable.domain import BookingRequest
from timetable.stores.records import (
    EventRecordSerializer,
    VenueRecordSerializer,
    validate_color,
)


class VenueSerializer(VenueRecordSerializer):
    """Venue as exposed over the API; ``id`` is generated when omitted."""

    id = serializers.CharField(max_length=255, required=False)


class VenueUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    color = serializers.CharField(
        required=False, allow_null=True, default=None, validators=[validate_color]
    )
    capacity = serializers.IntegerField(
        required=False, allow_null=True, default=None, min_value=0
    )


class EventSerializer(EventRecordSerializer):
    """Serializer for Event domain model."""

    day = serializers.DateField(read_only=True)


class BookingRequestSerializer(serializers.Serializer):
    """Create/edit form payload. Slot labels are checked by the service."""

    id = serializers.CharField(max_length=255, required=False)
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, default=None
    )
    day = serializers.DateField()
    start_slot = serializers.CharField(max_length=5, required=False, default="")
    end_slot = serializers.CharField(max_length=5, required=False, default="")
    color = serializers.CharField(
        required=False, allow_null=True, default=None, validators=[validate_color]
    )
    all_day = serializers.BooleanField(required=False, default=False)
    venue_ids = serializers.ListField(child=serializers.CharField(max_length=255))

    def validate(self, attrs: dict) -> dict:
        if not attrs["all_day"] and not (attrs["start_slot"] and attrs["end_slot"]):
            raise serializers.ValidationError(
                "start_slot and end_slot are required unless all_day is set"
            )
        return attrs

    def to_request(self) -> BookingRequest:
        data = self.validated_data
        return BookingRequest(
            title=data["title"],
            description=data["description"],
            day=data["day"],
            start_slot=data["start_slot"],
            end_slot=data["end_slot"],
            color=data["color"],
            all_day=data["all_day"],
            venue_ids=tuple(data["venue_ids"]),
            event_id=data.get("id"),
        )


class AvailabilityQuerySerializer(serializers.Serializer):
    day = serializers.DateField()
    start_slot = serializers.CharField(max_length=5)
    end_slot = serializers.CharField(max_length=5)
    exclude = serializers.CharField(required=False, default=None)


class DayRangeQuerySerializer(serializers.Serializer):
    """Either ``month=YYYY-MM`` or an inclusive ``start``/``end`` range."""

    month = serializers.DateField(
        required=False, input_formats=["%Y-%m"], default=None
    )
    start = serializers.DateField(required=False, default=None)
    end = serializers.DateField(required=False, default=None)

    def validate(self, attrs: dict) -> dict:
        if attrs["month"] is None and (attrs["start"] is None or attrs["end"] is None):
            raise serializers.ValidationError("Provide month, or both start and end")
        if attrs["start"] and attrs["end"] and attrs["end"] < attrs["start"]:
            raise serializers.ValidationError("end must not be before start")
        return attrs


class VenueAvailabilitySerializer(serializers.Serializer):
    venue = VenueRecordSerializer()
    available = serializers.BooleanField()


class VisualBlockSerializer(serializers.Serializer):
    event_id = serializers.CharField()
    top = serializers.FloatField()
    height = serializers.FloatField()
    left = serializers.FloatField()
    width = serializers.FloatField()
    group_index = serializers.IntegerField()
    venue_index = serializers.IntegerField()
    venue_span = serializers.IntegerField()
    title = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()
    color = serializers.CharField(allow_null=True)
    all_day = serializers.BooleanField()
    time_label = serializers.CharField()


class DayLayoutSerializer(serializers.Serializer):
    day = serializers.DateField()
    venues = VenueRecordSerializer(many=True)
    blocks = VisualBlockSerializer(many=True)
    slot_labels = serializers.ListField(child=serializers.CharField())
    current_slot = serializers.CharField(allow_null=True)
    initial_scroll_top = serializers.FloatField()
    slot_height = serializers.FloatField(source="grid.slot_height")
    venue_width = serializers.FloatField(source="grid.venue_width")
    day_height = serializers.FloatField(source="grid.day_height")
