import django_filters

from apps.attendance.models import AttendanceRecord


class MyAttendanceFilterSet(django_filters.FilterSet):
    """FilterSet for the current user's attendance history."""

    start_date = django_filters.DateFilter(field_name="date", lookup_expr="gte")
    end_date = django_filters.DateFilter(field_name="date", lookup_expr="lte")

    class Meta:
        model = AttendanceRecord
        fields = ["start_date", "end_date", "status"]


class AttendanceRecordFilterSet(MyAttendanceFilterSet):
    """FilterSet for AttendanceRecord model."""

    user = django_filters.NumberFilter(field_name="user__id")

    class Meta:
        model = AttendanceRecord
        fields = ["user", "start_date", "end_date", "status"]
