from .attendance_record import AttendanceRecord
from .office_location import OfficeLocation

__all__ = ["AttendanceRecord", "OfficeLocation"]
