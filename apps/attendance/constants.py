# Attendance Module Constants
from django.db import models
from django.utils.translation import gettext_lazy as _

# Office locations
DEFAULT_OFFICE_RADIUS_M = 1000

# Coordinates are echoed back with this many decimal places (~0.1m)
COORDINATE_DISPLAY_PLACES = 6

# Stored precision of AttendanceRecord.work_hours
WORK_HOURS_DECIMAL_PLACES = 2

ADDRESS_NOT_AVAILABLE = "Address not available"


class AttendanceStatus(models.TextChoices):
    PRESENT = "present", _("Present")
    HALF_DAY = "half-day", _("Half day")
    ABSENT = "absent", _("Absent")
    LATE = "late", _("Late")


class AttendanceEvent(models.TextChoices):
    CHECK_IN = "check_in", _("Check-in")
    CHECK_OUT = "check_out", _("Check-out")


class AttendanceErrorKind(models.TextChoices):
    """Machine-readable failure kinds returned by check-in/check-out."""

    INVALID_INPUT = "invalid_input", _("Invalid input")
    ALREADY_CHECKED_IN = "already_checked_in", _("Already checked in")
    NO_ACTIVE_CHECK_IN = "no_active_check_in", _("No active check-in")
    OUT_OF_RANGE = "out_of_range", _("Out of range")
    NO_OFFICES_CONFIGURED = "no_offices_configured", _("No office locations configured")


class GeofenceFailureReason(models.TextChoices):
    OUT_OF_RANGE = "out_of_range", _("Out of range")
    NO_OFFICES_CONFIGURED = "no_offices_configured", _("No office locations configured")
