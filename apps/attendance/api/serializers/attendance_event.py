from rest_framework import serializers

from apps.attendance.constants import AttendanceErrorKind
from apps.attendance.utils.geolocation import Coordinate

from .attendance_record import AttendanceRecordSerializer
from .office_location import SimpleOfficeLocationSerializer


class AttendanceEventInputSerializer(serializers.Serializer):
    """GPS reading submitted on check-in / check-out.

    Only the shape is checked here. Range validation belongs to the service so
    that out-of-range readings come back as ``invalid_input``.
    """

    latitude = serializers.FloatField()
    longitude = serializers.FloatField()
    accuracy = serializers.FloatField(required=False, default=0.0)

    def to_coordinate(self) -> Coordinate:
        data = self.validated_data
        return Coordinate(
            latitude=data["latitude"],
            longitude=data["longitude"],
            accuracy_m=data.get("accuracy") or 0.0,
        )


class AttendanceEventResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    record = AttendanceRecordSerializer()
    office = SimpleOfficeLocationSerializer()
    distance = serializers.IntegerField()
    advisory = serializers.CharField(allow_null=True)


class AttendanceEventErrorSerializer(serializers.Serializer):
    kind = serializers.ChoiceField(choices=AttendanceErrorKind.choices)
    message = serializers.CharField()
    details = serializers.DictField()
