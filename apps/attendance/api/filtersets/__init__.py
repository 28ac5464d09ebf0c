from .attendance_record import AttendanceRecordFilterSet, MyAttendanceFilterSet
from .office_location import OfficeLocationFilterSet

__all__ = ["AttendanceRecordFilterSet", "MyAttendanceFilterSet", "OfficeLocationFilterSet"]
