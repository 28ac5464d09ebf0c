from .attendance_event import (
    AttendanceEventErrorSerializer,
    AttendanceEventInputSerializer,
    AttendanceEventResponseSerializer,
)
from .attendance_record import AttendanceRecordSerializer
from .office_location import OfficeLocationSerializer, SimpleOfficeLocationSerializer

__all__ = [
    "AttendanceEventErrorSerializer",
    "AttendanceEventInputSerializer",
    "AttendanceEventResponseSerializer",
    "AttendanceRecordSerializer",
    "OfficeLocationSerializer",
    "SimpleOfficeLocationSerializer",
]
