from rest_framework import serializers

from apps.attendance.models import AttendanceRecord
from apps.core.api.serializers import SimpleUserSerializer

from .office_location import SimpleOfficeLocationSerializer


class CheckInSerializer(serializers.Serializer):
    timestamp = serializers.DateTimeField(source="check_in_at")
    latitude = serializers.DecimalField(source="check_in_latitude", max_digits=20, decimal_places=17)
    longitude = serializers.DecimalField(source="check_in_longitude", max_digits=20, decimal_places=17)
    accuracy = serializers.FloatField(source="check_in_accuracy")
    address = serializers.CharField(source="check_in_address")
    address_degraded = serializers.BooleanField(source="check_in_address_degraded")
    office = SimpleOfficeLocationSerializer(source="check_in_office")
    distance_m = serializers.FloatField(source="check_in_distance_m")


class CheckOutSerializer(serializers.Serializer):
    timestamp = serializers.DateTimeField(source="check_out_at")
    latitude = serializers.DecimalField(source="check_out_latitude", max_digits=20, decimal_places=17)
    longitude = serializers.DecimalField(source="check_out_longitude", max_digits=20, decimal_places=17)
    accuracy = serializers.FloatField(source="check_out_accuracy")
    address = serializers.CharField(source="check_out_address")
    address_degraded = serializers.BooleanField(source="check_out_address_degraded")
    office = SimpleOfficeLocationSerializer(source="check_out_office")
    distance_m = serializers.FloatField(source="check_out_distance_m")


class AttendanceRecordSerializer(serializers.ModelSerializer):
    """Read-only representation of an attendance day"""

    user = SimpleUserSerializer(read_only=True)
    check_in = CheckInSerializer(source="*", read_only=True)
    check_out = serializers.SerializerMethodField()

    class Meta:
        model = AttendanceRecord
        fields = [
            "id",
            "user",
            "date",
            "check_in",
            "check_out",
            "work_hours",
            "status",
            "ip_address",
            "user_agent",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_check_out(self, obj) -> dict | None:
        if not obj.is_checked_out:
            return None
        return CheckOutSerializer(obj).data
