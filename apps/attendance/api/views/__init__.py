from .attendance import AttendanceRecordViewSet, MyAttendanceViewSet
from .office_location import OfficeLocationViewSet

__all__ = ["AttendanceRecordViewSet", "MyAttendanceViewSet", "OfficeLocationViewSet"]
