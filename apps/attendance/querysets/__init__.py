from .attendance_record import AttendanceRecordQuerySet
from .office_location import OfficeLocationQuerySet

__all__ = ["AttendanceRecordQuerySet", "OfficeLocationQuerySet"]
