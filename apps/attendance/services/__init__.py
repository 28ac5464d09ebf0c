from .attendance_events import AttendanceEventService, AttendanceResult, check_in, check_out
from .geocoding import AddressResult, ReverseGeocoder, reverse_geocode
from .geofence import GeofenceResult, evaluate
from .office_directory import list_active

__all__ = [
    "AddressResult",
    "AttendanceEventService",
    "AttendanceResult",
    "GeofenceResult",
    "ReverseGeocoder",
    "check_in",
    "check_out",
    "evaluate",
    "list_active",
    "reverse_geocode",
]
