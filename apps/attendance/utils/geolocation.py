"""Geolocation utilities for attendance tracking.

This module provides the coordinate type used across the attendance app and
helpers for validating coordinates and measuring great-circle distances with
the Haversine formula.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from apps.attendance.constants import COORDINATE_DISPLAY_PLACES

# Earth's mean radius in meters
EARTH_RADIUS_M = 6371000

Number = Union[float, int, Decimal]


@dataclass(frozen=True)
class Coordinate:
    """A point-in-time GPS reading.

    ``accuracy_m`` is the radius of uncertainty reported by the device. It is
    kept for the audit trail only and never affects distance calculations.
    """

    latitude: float
    longitude: float
    accuracy_m: float = 0.0

    @classmethod
    def of(cls, latitude: Number, longitude: Number, accuracy_m: Number = 0.0) -> "Coordinate":
        return cls(float(latitude), float(longitude), float(accuracy_m or 0.0))

    def as_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}


def haversine_distance(lat1: Number, lon1: Number, lat2: Number, lon2: Number) -> float:
    """Calculate the great-circle distance between two points on Earth.

    Args:
        lat1: Latitude of first point in degrees
        lon1: Longitude of first point in degrees
        lat2: Latitude of second point in degrees
        lon2: Longitude of second point in degrees

    Returns:
        Distance between the two points in meters

    Example:
        >>> round(haversine_distance(28.6139, 77.2090, 28.6140, 77.2091))
        15
    """
    lat1_rad = math.radians(float(lat1))
    lon1_rad = math.radians(float(lon1))
    lat2_rad = math.radians(float(lat2))
    lon2_rad = math.radians(float(lon2))

    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    # Rounding can push ``a`` a hair above 1 for antipodal points
    c = 2 * math.asin(math.sqrt(min(1.0, a)))

    return EARTH_RADIUS_M * c


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    """Distance in meters between two coordinates. Accuracy is ignored."""
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def is_valid_latitude(value) -> bool:
    return _is_finite_number(value) and -90 <= float(value) <= 90


def is_valid_longitude(value) -> bool:
    return _is_finite_number(value) and -180 <= float(value) <= 180


def is_valid_coordinate(coordinate) -> bool:
    """Return True when latitude/longitude are in range and accuracy is a non-negative number."""
    if coordinate is None:
        return False
    accuracy = getattr(coordinate, "accuracy_m", 0.0)
    return (
        is_valid_latitude(getattr(coordinate, "latitude", None))
        and is_valid_longitude(getattr(coordinate, "longitude", None))
        and _is_finite_number(accuracy)
        and float(accuracy) >= 0
    )


def format_coordinate(coordinate: Coordinate, places: int = COORDINATE_DISPLAY_PLACES) -> str:
    """Render ``"lat, lon"`` with a fixed number of decimal places."""
    return f"{coordinate.latitude:.{places}f}, {coordinate.longitude:.{places}f}"


def _is_finite_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    return math.isfinite(float(value))
