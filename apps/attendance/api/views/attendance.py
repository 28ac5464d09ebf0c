"""Views for geofenced check-in / check-out and attendance history."""

from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.attendance.api.filtersets import AttendanceRecordFilterSet, MyAttendanceFilterSet
from apps.attendance.api.serializers import (
    AttendanceEventErrorSerializer,
    AttendanceEventInputSerializer,
    AttendanceEventResponseSerializer,
    AttendanceRecordSerializer,
    SimpleOfficeLocationSerializer,
)
from apps.attendance.constants import AttendanceErrorKind
from apps.attendance.exceptions import InvalidInputError
from apps.attendance.models import AttendanceRecord
from apps.attendance.services import AttendanceEventService, AttendanceResult
from libs import BaseReadOnlyModelViewSet
from libs.request_utils import get_client_info

ERROR_STATUS_CODES = {
    AttendanceErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    AttendanceErrorKind.ALREADY_CHECKED_IN: status.HTTP_409_CONFLICT,
    AttendanceErrorKind.NO_ACTIVE_CHECK_IN: status.HTTP_409_CONFLICT,
    AttendanceErrorKind.OUT_OF_RANGE: status.HTTP_403_FORBIDDEN,
    AttendanceErrorKind.NO_OFFICES_CONFIGURED: status.HTTP_503_SERVICE_UNAVAILABLE,
}

EVENT_REQUEST_EXAMPLE = OpenApiExample(
    "Request",
    value={"latitude": 28.6140, "longitude": 77.2091, "accuracy": 12.5},
    request_only=True,
)

OUT_OF_RANGE_EXAMPLE = OpenApiExample(
    "Error - Out Of Range",
    value={
        "success": False,
        "data": None,
        "error": {
            "kind": "out_of_range",
            "message": "You are 13058 meters away from Main Chamber. Please move closer to the office.",
            "details": {
                "nearestOffice": "Main Chamber",
                "distance": 13058,
                "allowedRadius": 100,
                "officeCoordinates": {"latitude": 28.6139, "longitude": 77.209},
                "yourCoordinates": {"latitude": 28.7, "longitude": 77.3},
            },
        },
    },
    response_only=True,
    status_codes=["403"],
)

EVENT_ERROR_RESPONSES = {
    400: AttendanceEventErrorSerializer,
    403: AttendanceEventErrorSerializer,
    409: AttendanceEventErrorSerializer,
    503: AttendanceEventErrorSerializer,
}

HISTORY_PARAMETERS = [
    OpenApiParameter("start_date", type=str, description="Inclusive start date (YYYY-MM-DD)"),
    OpenApiParameter("end_date", type=str, description="Inclusive end date (YYYY-MM-DD)"),
]


@extend_schema_view(
    list=extend_schema(
        summary="List my attendance",
        description="Current user's attendance records, newest first. "
        "Pagination: 25 items per page by default (customizable via page_size parameter).",
        tags=["Attendance"],
        parameters=HISTORY_PARAMETERS,
    ),
    retrieve=extend_schema(
        summary="Get one of my attendance records",
        tags=["Attendance"],
    ),
)
class MyAttendanceViewSet(BaseReadOnlyModelViewSet):
    """Check-in, check-out and history for the authenticated user."""

    serializer_class = AttendanceRecordSerializer
    filterset_class = MyAttendanceFilterSet
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    ordering_fields = ["date", "check_in_at"]
    ordering = ["-date", "-check_in_at"]

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return AttendanceRecord.objects.none()
        return AttendanceRecord.objects.for_user(self.request.user).select_related(
            "user", "check_in_office", "check_out_office"
        )

    def get_event_service(self) -> AttendanceEventService:
        return AttendanceEventService()

    @extend_schema(
        summary="Check in",
        description="Record today's check-in. The reading must fall inside the radius of an active office location. "
        "GPS accuracy is recorded but never used to reject the request.",
        tags=["Attendance"],
        request=AttendanceEventInputSerializer,
        responses={201: AttendanceEventResponseSerializer, **EVENT_ERROR_RESPONSES},
        examples=[
            EVENT_REQUEST_EXAMPLE,
            OUT_OF_RANGE_EXAMPLE,
            OpenApiExample(
                "Error - Already Checked In",
                value={
                    "success": False,
                    "data": None,
                    "error": {"kind": "already_checked_in", "message": "Already checked in today", "details": {}},
                },
                response_only=True,
                status_codes=["409"],
            ),
        ],
    )
    @action(detail=False, methods=["post"], url_path="checkin")
    def check_in(self, request):
        """Check in at an authorized office."""
        serializer = AttendanceEventInputSerializer(data=request.data)
        if not serializer.is_valid():
            return self._invalid_input_response(serializer)
        result = self.get_event_service().check_in(
            request.user, serializer.to_coordinate(), get_client_info(request)
        )
        return self._event_response(result, status.HTTP_201_CREATED)

    @extend_schema(
        summary="Check out",
        description="Complete today's attendance record. The check-out location is verified against every active "
        "office independently of where the user checked in.",
        tags=["Attendance"],
        request=AttendanceEventInputSerializer,
        responses={200: AttendanceEventResponseSerializer, **EVENT_ERROR_RESPONSES},
        examples=[
            EVENT_REQUEST_EXAMPLE,
            OUT_OF_RANGE_EXAMPLE,
            OpenApiExample(
                "Error - No Active Check-in",
                value={
                    "success": False,
                    "data": None,
                    "error": {"kind": "no_active_check_in", "message": "No active check-in found", "details": {}},
                },
                response_only=True,
                status_codes=["409"],
            ),
        ],
    )
    @action(detail=False, methods=["post"], url_path="checkout")
    def check_out(self, request):
        """Check out at an authorized office."""
        serializer = AttendanceEventInputSerializer(data=request.data)
        if not serializer.is_valid():
            return self._invalid_input_response(serializer)
        result = self.get_event_service().check_out(
            request.user, serializer.to_coordinate(), get_client_info(request)
        )
        return self._event_response(result, status.HTTP_200_OK)

    @extend_schema(
        summary="Get today's attendance",
        description="Current user's record for today, or null when not checked in yet.",
        tags=["Attendance"],
        responses={200: AttendanceRecordSerializer},
    )
    @action(detail=False, methods=["get"], url_path="today")
    def today(self, request):
        record = self.get_queryset().on_date(timezone.localdate()).first()
        if record is None:
            return Response(None)
        return Response(self.get_serializer(record).data)

    def _invalid_input_response(self, serializer) -> Response:
        """Malformed bodies share the failure shape of the service, with field errors as details."""
        error = InvalidInputError(details=serializer.errors)
        return self._event_response(AttendanceResult.failure(error), status.HTTP_400_BAD_REQUEST)

    def _event_response(self, result: AttendanceResult, success_status: int) -> Response:
        if not result.success:
            payload = {"kind": result.kind, "message": result.message, "details": result.details}
            return Response(payload, status=ERROR_STATUS_CODES[result.kind])

        payload = {
            "message": result.message,
            "record": AttendanceRecordSerializer(result.record, context=self.get_serializer_context()).data,
            "office": SimpleOfficeLocationSerializer(result.office).data,
            "distance": round(result.distance_m),
            "advisory": result.advisory,
        }
        return Response(payload, status=success_status)


@extend_schema_view(
    list=extend_schema(
        summary="List all attendance records",
        description="Attendance records of every user. Administrators only. "
        "Filter by user, status and an inclusive start_date/end_date range.",
        tags=["Attendance Record"],
        parameters=HISTORY_PARAMETERS,
    ),
    retrieve=extend_schema(
        summary="Get attendance record details",
        tags=["Attendance Record"],
    ),
)
class AttendanceRecordViewSet(BaseReadOnlyModelViewSet):
    queryset = AttendanceRecord.objects.select_related("user", "check_in_office", "check_out_office")
    serializer_class = AttendanceRecordSerializer
    filterset_class = AttendanceRecordFilterSet
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    ordering_fields = ["date", "check_in_at", "work_hours"]
    ordering = ["-date", "-check_in_at"]
    admin_actions = frozenset({"list", "retrieve"})
