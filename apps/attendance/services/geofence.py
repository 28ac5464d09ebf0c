"""Geofence evaluation against the set of authorized office locations."""

from dataclasses import dataclass
from typing import Iterable, Optional

from apps.attendance.constants import GeofenceFailureReason
from apps.attendance.models import OfficeLocation
from apps.attendance.utils.geolocation import Coordinate, distance_meters


@dataclass(frozen=True)
class GeofenceResult:
    """Outcome of a geofence check.

    When ``passed`` is true ``location`` is the matched office. Otherwise it is
    the nearest active office overall (or None when no office is configured)
    and ``reason`` explains the failure.
    """

    passed: bool
    location: Optional[OfficeLocation] = None
    distance_m: Optional[float] = None
    allowed_radius_m: Optional[int] = None
    reason: Optional[str] = None

    @property
    def matched_location(self) -> Optional[OfficeLocation]:
        return self.location if self.passed else None

    @property
    def nearest_location(self) -> Optional[OfficeLocation]:
        return None if self.passed else self.location


def evaluate(reading: Coordinate, locations: Iterable[OfficeLocation]) -> GeofenceResult:
    """Check a reading against every active location.

    A location matches when the reading lies within its own radius. Among
    matches the closest one wins; ties go to the first location in input
    order. GPS accuracy plays no part in the decision.
    """
    matched = None
    nearest = None

    for location in locations:
        if not location.is_active:
            continue
        distance = distance_meters(reading, location.coordinate)

        if nearest is None or distance < nearest[1]:
            nearest = (location, distance)
        if distance <= location.radius_m and (matched is None or distance < matched[1]):
            matched = (location, distance)

    if matched is not None:
        location, distance = matched
        return GeofenceResult(
            passed=True,
            location=location,
            distance_m=distance,
            allowed_radius_m=location.radius_m,
        )

    if nearest is None:
        return GeofenceResult(passed=False, reason=GeofenceFailureReason.NO_OFFICES_CONFIGURED)

    location, distance = nearest
    return GeofenceResult(
        passed=False,
        location=location,
        distance_m=distance,
        allowed_radius_m=location.radius_m,
        reason=GeofenceFailureReason.OUT_OF_RANGE,
    )
