"""Exception classes for attendance check-in/check-out."""

from django.utils.translation import gettext_lazy as _

from .constants import AttendanceErrorKind


class AttendanceError(Exception):
    """Base exception for this module.

    Every subclass carries a machine-readable ``kind`` plus optional
    ``details`` so callers can branch without parsing the message.
    """

    kind = None
    default_message = ""

    def __init__(self, message=None, details=None):
        self.message = str(message or self.default_message)
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(AttendanceError):
    """Raised when the submitted coordinate is malformed or out of range."""

    kind = AttendanceErrorKind.INVALID_INPUT
    default_message = _("Invalid location coordinates")


class AlreadyCheckedInError(AttendanceError):
    """Raised when the user already has an attendance record for today."""

    kind = AttendanceErrorKind.ALREADY_CHECKED_IN
    default_message = _("Already checked in today")


class NoActiveCheckInError(AttendanceError):
    """Raised on check-out when there is no open check-in for today."""

    kind = AttendanceErrorKind.NO_ACTIVE_CHECK_IN
    default_message = _("No active check-in found")


class OutOfRangeError(AttendanceError):
    """Raised when the reading lies outside every active office radius."""

    kind = AttendanceErrorKind.OUT_OF_RANGE
    default_message = _("You are outside the allowed office radius")


class NoOfficesConfiguredError(AttendanceError):
    """Raised when there are no active office locations to check against."""

    kind = AttendanceErrorKind.NO_OFFICES_CONFIGURED
    default_message = _("No active office locations found")
