from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import OpenApiExample, extend_schema, extend_schema_view
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.response import Response

from apps.attendance.api.filtersets import OfficeLocationFilterSet
from apps.attendance.api.serializers import OfficeLocationSerializer
from apps.attendance.models import OfficeLocation
from libs import BaseModelViewSet

OFFICE_LOCATION_EXAMPLE = {
    "id": 1,
    "name": "Main Chamber",
    "address": "Chamber 12, High Court Complex, New Delhi",
    "latitude": "28.61390000000000000",
    "longitude": "77.20900000000000000",
    "radius_m": 100,
    "is_active": True,
    "deactivated_at": None,
    "description": "",
    "created_by": {"id": 1, "username": "admin", "email": "admin@example.com", "full_name": "Admin"},
    "updated_by": {"id": 1, "username": "admin", "email": "admin@example.com", "full_name": "Admin"},
    "created_at": "2025-11-14T03:00:00Z",
    "updated_at": "2025-11-14T03:00:00Z",
}


@extend_schema_view(
    list=extend_schema(
        summary="List office locations",
        description="Retrieve a paginated list of office locations. Use ?active=true|false to filter by status.",
        tags=["Office Location"],
    ),
    create=extend_schema(
        summary="Create office location",
        description="Create a new office geofence. Administrators only. "
        "The radius must stay within the configured minimum and maximum.",
        tags=["Office Location"],
        examples=[
            OpenApiExample(
                "Request",
                value={
                    "name": "Main Chamber",
                    "address": "Chamber 12, High Court Complex, New Delhi",
                    "latitude": "28.6139",
                    "longitude": "77.2090",
                    "radius_m": 100,
                },
                request_only=True,
            ),
            OpenApiExample(
                "Success",
                value={"success": True, "data": OFFICE_LOCATION_EXAMPLE, "error": None},
                response_only=True,
            ),
        ],
    ),
    retrieve=extend_schema(summary="Get office location details", tags=["Office Location"]),
    update=extend_schema(summary="Update office location", tags=["Office Location"]),
    partial_update=extend_schema(summary="Partially update office location", tags=["Office Location"]),
    destroy=extend_schema(
        summary="Deactivate office location",
        description="Soft-delete: the location is deactivated and kept for attendance history. "
        "Returns the deactivated location.",
        tags=["Office Location"],
        responses={200: OfficeLocationSerializer},
    ),
)
class OfficeLocationViewSet(BaseModelViewSet):
    queryset = OfficeLocation.objects.select_related("created_by", "updated_by")
    serializer_class = OfficeLocationSerializer
    filterset_class = OfficeLocationFilterSet
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    search_fields = ["name", "address"]
    ordering_fields = ["name", "radius_m", "created_at"]
    ordering = ["name"]
    admin_actions = frozenset({"create", "update", "partial_update", "destroy"})

    @extend_schema(
        summary="List active office locations",
        description="Every active office location ordered by name. Available to all authenticated users.",
        tags=["Office Location"],
        responses={200: OfficeLocationSerializer(many=True)},
    )
    @action(detail=False, methods=["get"], url_path="active", pagination_class=None)
    def active(self, request):
        queryset = self.get_queryset().active().order_by("name")
        return Response(self.get_serializer(queryset, many=True).data)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        instance.deactivate(user=request.user)
        return Response(self.get_serializer(instance).data)
