from django.urls import include, path
from rest_framework.routers import DefaultRouter

from apps.attendance.api.views import AttendanceRecordViewSet, MyAttendanceViewSet, OfficeLocationViewSet

app_name = "attendance"

router = DefaultRouter()
router.include_format_suffixes = False
router.register(r"attendance", MyAttendanceViewSet, basename="attendance")
router.register(r"attendance-records", AttendanceRecordViewSet, basename="attendance-record")
router.register(r"office-locations", OfficeLocationViewSet, basename="office-location")

urlpatterns = [
    path("", include(router.urls)),
]
