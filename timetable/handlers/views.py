"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging
from functools import wraps

from django.apps import apps
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from timetable.domain.calendar import days_in_range, month_bounds
from timetable.domain.errors import DomainError, ErrorCode
from timetable.handlers.serializers import (
    AvailabilityQuerySerializer,
    BookingRequestSerializer,
    DayLayoutSerializer,
    DayRangeQuerySerializer,
    EventSerializer,
    VenueAvailabilitySerializer,
    VenueSerializer,
    VenueUpdateSerializer,
)
from timetable.services import TimetableService

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VENUE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_EVENT_ID: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_VENUE_ID: status.HTTP_409_CONFLICT,
    ErrorCode.VENUE_UNAVAILABLE: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_TIME_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_SLOT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_VENUE_SELECTION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNKNOWN_VENUE: status.HTTP_400_BAD_REQUEST,
}


def get_service() -> TimetableService:
    return apps.get_app_config("timetable").service


def error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    venue_ids = getattr(error, "venue_ids", None)
    if venue_ids:
        body["venue_ids"] = list(venue_ids)
    return Response(body, status=STATUS_BY_CODE.get(error.code, 400))


def maps_domain_errors(handler):
    """Turn DomainError raised by ``handler`` into a JSON error response."""

    @wraps(handler)
    def wrapper(*args, **kwargs):
        try:
            return handler(*args, **kwargs)
        except DomainError as error:
            logger.info("Request rejected: %s", error)
            return error_response(error)

    return wrapper


def parse_day(value: str):
    return serializers.DateField().run_validation(value)


class VenueListView(APIView):
    """Handler for GET/POST /api/venues"""

    def get(self, request: Request) -> Response:
        return Response(VenueSerializer(get_service().list_venues(), many=True).data)

    @maps_domain_errors
    def post(self, request: Request) -> Response:
        serializer = VenueSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        venue = get_service().create_venue(
            name=data["name"],
            color=data["color"],
            capacity=data["capacity"],
            venue_id=data.get("id"),
        )
        return Response(VenueSerializer(venue).data, status=status.HTTP_201_CREATED)


class VenueDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/venues/{venue_id}"""

    @maps_domain_errors
    def get(self, request: Request, venue_id: str) -> Response:
        return Response(VenueSerializer(get_service().get_venue(venue_id)).data)

    @maps_domain_errors
    def put(self, request: Request, venue_id: str) -> Response:
        serializer = VenueUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        venue = get_service().update_venue(venue_id, **serializer.validated_data)
        return Response(VenueSerializer(venue).data)

    @maps_domain_errors
    def delete(self, request: Request, venue_id: str) -> Response:
        result = get_service().delete_venue(venue_id)
        return Response(
            {
                "venue_id": result.venue.id,
                "updated_event_ids": list(result.updated_event_ids),
                "deleted_event_ids": list(result.deleted_event_ids),
            }
        )


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        day = request.query_params.get("day")
        events = get_service().list_events(parse_day(day) if day else None)
        return Response(EventSerializer(events, many=True).data)

    @maps_domain_errors
    def post(self, request: Request) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_service().book(serializer.to_request())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    @maps_domain_errors
    def get(self, request: Request, event_id: str) -> Response:
        return Response(EventSerializer(get_service().get_event(event_id)).data)

    @maps_domain_errors
    def put(self, request: Request, event_id: str) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_service().update_booking(event_id, serializer.to_request())
        return Response(EventSerializer(event).data)

    @maps_domain_errors
    def delete(self, request: Request, event_id: str) -> Response:
        get_service().cancel_booking(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AvailabilityView(APIView):
    """Handler for GET /api/availability"""

    @maps_domain_errors
    def get(self, request: Request) -> Response:
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        data = query.validated_data
        result = get_service().availability(
            data["day"], data["start_slot"], data["end_slot"], data["exclude"]
        )
        return Response(VenueAvailabilitySerializer(result, many=True).data)


class DayListView(APIView):
    """Handler for GET /api/days"""

    def get(self, request: Request) -> Response:
        query = DayRangeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        data = query.validated_data
        if data["month"] is not None:
            start, end = month_bounds(data["month"])
        else:
            start, end = data["start"], data["end"]
        return Response([day.isoformat() for day in days_in_range(start, end)])


class DayLayoutView(APIView):
    """Handler for GET /api/days/{day}/layout"""

    def get(self, request: Request, day: str) -> Response:
        layout = get_service().layout(parse_day(day))
        return Response(DayLayoutSerializer(layout).data)
