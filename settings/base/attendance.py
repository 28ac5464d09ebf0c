"""Geofenced attendance settings."""

from .base import config

# A work span shorter than this (in hours) is recorded as a half day at checkout.
ATTENDANCE_HALF_DAY_THRESHOLD_HOURS = config("ATTENDANCE_HALF_DAY_THRESHOLD_HOURS", default=4, cast=float)

# Readings less accurate than this get a non-blocking advisory. Never used to reject.
ATTENDANCE_ACCURACY_ADVISORY_METERS = config("ATTENDANCE_ACCURACY_ADVISORY_METERS", default=1000, cast=float)

ATTENDANCE_OFFICE_RADIUS_MIN_METERS = config("ATTENDANCE_OFFICE_RADIUS_MIN_METERS", default=50, cast=int)
ATTENDANCE_OFFICE_RADIUS_MAX_METERS = config("ATTENDANCE_OFFICE_RADIUS_MAX_METERS", default=1000, cast=int)

REVERSE_GEOCODING_ENABLED = config("REVERSE_GEOCODING_ENABLED", default=True, cast=bool)
REVERSE_GEOCODING_URL = config("REVERSE_GEOCODING_URL", default="https://nominatim.openstreetmap.org/reverse")
# Nominatim's usage policy requires an identifying User-Agent.
REVERSE_GEOCODING_USER_AGENT = config("REVERSE_GEOCODING_USER_AGENT", default="LegalOfficeManagement/1.0")
REVERSE_GEOCODING_TIMEOUT = config("REVERSE_GEOCODING_TIMEOUT", default=5.0, cast=float)
REVERSE_GEOCODING_ZOOM = config("REVERSE_GEOCODING_ZOOM", default=18, cast=int)
