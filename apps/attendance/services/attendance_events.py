"""Check-in / check-out orchestration.

Per (user, date) a record moves NoRecord -> CheckedIn -> Complete. Both
transitions validate the reading, run the geofence against every active
office, resolve the address (best-effort, outside any transaction) and then
write the record. The unique (user, date) constraint serializes concurrent
check-ins; check-out uses a row lock plus a conditional update.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone
from django.utils.translation import gettext as _

from apps.attendance.constants import WORK_HOURS_DECIMAL_PLACES, AttendanceEvent, AttendanceStatus
from apps.attendance.exceptions import (
    AlreadyCheckedInError,
    AttendanceError,
    InvalidInputError,
    NoActiveCheckInError,
    NoOfficesConfiguredError,
    OutOfRangeError,
)
from apps.attendance.models import AttendanceRecord, OfficeLocation
from apps.attendance.utils.geolocation import Coordinate, format_coordinate, is_valid_coordinate
from libs.datetimes import hours_between
from libs.decimals import quantize_decimal
from libs.request_utils import ClientInfo

from .geocoding import AddressResult, ReverseGeocoder
from .geofence import GeofenceResult, evaluate
from .office_directory import list_active

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("audit_logging")


@dataclass
class AttendanceResult:
    """Structured outcome of a check-in or check-out.

    Failures never raise across the service boundary. They come back with
    ``success=False`` and a ``kind`` the caller can branch on.
    """

    success: bool
    message: str
    record: Optional[AttendanceRecord] = None
    office: Optional[OfficeLocation] = None
    distance_m: Optional[float] = None
    advisory: Optional[str] = None
    kind: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def failure(cls, error: AttendanceError) -> "AttendanceResult":
        return cls(success=False, message=error.message, kind=error.kind, details=error.details)


class AttendanceEventService:
    def __init__(self, geocoder: Optional[ReverseGeocoder] = None):
        self.geocoder = geocoder or ReverseGeocoder()

    def check_in(self, user, coordinate: Coordinate, client_info: Optional[ClientInfo] = None) -> AttendanceResult:
        try:
            result = self._check_in(user, coordinate, client_info)
        except AttendanceError as e:
            return self._fail(AttendanceEvent.CHECK_IN, user, coordinate, e)
        self._audit(AttendanceEvent.CHECK_IN, user, result)
        return result

    def check_out(self, user, coordinate: Coordinate, client_info: Optional[ClientInfo] = None) -> AttendanceResult:
        try:
            result = self._check_out(user, coordinate, client_info)
        except AttendanceError as e:
            return self._fail(AttendanceEvent.CHECK_OUT, user, coordinate, e)
        self._audit(AttendanceEvent.CHECK_OUT, user, result)
        return result

    def _check_in(self, user, coordinate, client_info) -> AttendanceResult:
        self._validate(coordinate)
        today = timezone.localdate()

        # Complete records also block a second check-in: one record per day
        if AttendanceRecord.objects.for_user(user).on_date(today).exists():
            raise AlreadyCheckedInError()

        geofence = self._verify_location(coordinate)
        address = self._resolve_address(coordinate)
        client_info = client_info or ClientInfo(None, "")

        try:
            with transaction.atomic():
                record = AttendanceRecord.objects.create(
                    user=user,
                    date=today,
                    check_in_at=timezone.now(),
                    check_in_latitude=_to_decimal(coordinate.latitude),
                    check_in_longitude=_to_decimal(coordinate.longitude),
                    check_in_accuracy=coordinate.accuracy_m,
                    check_in_address=address.display,
                    check_in_address_degraded=address.degraded,
                    check_in_office=geofence.location,
                    check_in_distance_m=geofence.distance_m,
                    status=AttendanceStatus.PRESENT,
                    ip_address=client_info.ip_address,
                    user_agent=client_info.user_agent,
                )
        except IntegrityError:
            # Lost the race against a concurrent check-in for the same day
            if AttendanceRecord.objects.for_user(user).on_date(today).exists():
                raise AlreadyCheckedInError()
            raise

        return self._success(_("Checked in successfully"), record, geofence, coordinate)

    def _check_out(self, user, coordinate, client_info) -> AttendanceResult:
        self._validate(coordinate)
        today = timezone.localdate()

        if not AttendanceRecord.objects.for_user(user).on_date(today).open().exists():
            raise NoActiveCheckInError()

        geofence = self._verify_location(coordinate)
        address = self._resolve_address(coordinate)

        with transaction.atomic():
            record = (
                AttendanceRecord.objects.select_for_update().for_user(user).on_date(today).open().first()
            )
            if record is None:
                raise NoActiveCheckInError()

            now = timezone.now()
            if now <= record.check_in_at:
                raise InvalidInputError(_("Check-out time must be after check-in time"))

            work_hours = quantize_decimal(
                hours_between(record.check_in_at, now), WORK_HOURS_DECIMAL_PLACES
            )
            status = (
                AttendanceStatus.HALF_DAY
                if work_hours < Decimal(str(settings.ATTENDANCE_HALF_DAY_THRESHOLD_HOURS))
                else AttendanceStatus.PRESENT
            )

            updated = AttendanceRecord.objects.filter(pk=record.pk, check_out_at__isnull=True).update(
                check_out_at=now,
                check_out_latitude=_to_decimal(coordinate.latitude),
                check_out_longitude=_to_decimal(coordinate.longitude),
                check_out_accuracy=coordinate.accuracy_m,
                check_out_address=address.display,
                check_out_address_degraded=address.degraded,
                check_out_office=geofence.location,
                check_out_distance_m=geofence.distance_m,
                work_hours=work_hours,
                status=status,
                updated_at=now,
            )
            if not updated:
                raise NoActiveCheckInError()

        record.refresh_from_db()
        return self._success(_("Checked out successfully"), record, geofence, coordinate)

    def _validate(self, coordinate):
        if not is_valid_coordinate(coordinate):
            raise InvalidInputError(
                _("Latitude must be within [-90, 90], longitude within [-180, 180] and accuracy non-negative")
            )

    def _verify_location(self, coordinate: Coordinate) -> GeofenceResult:
        geofence = evaluate(coordinate, list_active())
        if geofence.passed:
            return geofence

        if geofence.nearest_location is None:
            raise NoOfficesConfiguredError()

        office = geofence.nearest_location
        distance = round(geofence.distance_m)
        raise OutOfRangeError(
            _("You are {distance} meters away from {office}. Please move closer to the office.").format(
                distance=distance, office=office.name
            ),
            details={
                "nearestOffice": office.name,
                "distance": distance,
                "allowedRadius": geofence.allowed_radius_m,
                "officeCoordinates": office.coordinate.as_dict(),
                "yourCoordinates": coordinate.as_dict(),
            },
        )

    def _resolve_address(self, coordinate: Coordinate) -> AddressResult:
        address = self.geocoder.resolve(coordinate)
        if address.degraded:
            return address

        advisory = accuracy_advisory(coordinate)
        if advisory:
            return AddressResult(
                display=f"{address.display} ({advisory})",
                components=address.components,
                degraded=False,
            )
        return address

    def _success(self, prefix, record, geofence: GeofenceResult, coordinate) -> AttendanceResult:
        distance = round(geofence.distance_m)
        return AttendanceResult(
            success=True,
            message=_("{prefix} from {distance}m away from {office}").format(
                prefix=prefix, distance=distance, office=geofence.location.name
            ),
            record=record,
            office=geofence.location,
            distance_m=geofence.distance_m,
            advisory=accuracy_advisory(coordinate),
        )

    def _fail(self, event, user, coordinate, error: AttendanceError) -> AttendanceResult:
        audit_logger.info(
            f"{event} rejected for user={user.pk} kind={error.kind} "
            f"at {_describe(coordinate)}: {error.message}"
        )
        return AttendanceResult.failure(error)

    def _audit(self, event, user, result: AttendanceResult):
        record = result.record
        address = record.check_out_address if event == AttendanceEvent.CHECK_OUT else record.check_in_address
        audit_logger.info(
            f"{event} accepted for user={user.pk} record={record.pk} office={result.office.name} "
            f"distance={round(result.distance_m)}m address={address!r}"
        )


def accuracy_advisory(coordinate: Coordinate) -> Optional[str]:
    """Non-blocking note for readings with poor GPS accuracy, e.g. "Approximate location, accuracy: ±1.5km"."""
    if coordinate.accuracy_m > settings.ATTENDANCE_ACCURACY_ADVISORY_METERS:
        return _("Approximate location, accuracy: ±{km:.1f}km").format(km=coordinate.accuracy_m / 1000)
    return None


def _to_decimal(value: float) -> Decimal:
    return Decimal(str(value))


def _describe(coordinate) -> str:
    if is_valid_coordinate(coordinate):
        return format_coordinate(coordinate)
    return repr(coordinate)


def check_in(user, coordinate: Coordinate, client_info: Optional[ClientInfo] = None) -> AttendanceResult:
    return AttendanceEventService().check_in(user, coordinate, client_info)


def check_out(user, coordinate: Coordinate, client_info: Optional[ClientInfo] = None) -> AttendanceResult:
    return AttendanceEventService().check_out(user, coordinate, client_info)
