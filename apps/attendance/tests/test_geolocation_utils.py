"""Tests for coordinate helpers and the haversine distance."""

import math
from decimal import Decimal

import pytest

from apps.attendance.utils.geolocation import (
    Coordinate,
    distance_meters,
    format_coordinate,
    haversine_distance,
    is_valid_coordinate,
)

from .conftest import METERS_PER_DEGREE


class TestHaversineDistance:
    def test_same_point_is_zero(self):
        assert haversine_distance(28.6139, 77.2090, 28.6139, 77.2090) == 0

    @pytest.mark.parametrize(
        "a, b",
        [
            ((28.6139, 77.2090), (28.7000, 77.3000)),
            ((-33.8688, 151.2093), (51.5074, -0.1278)),
            ((0, 179.9), (0, -179.9)),
        ],
    )
    def test_symmetric(self, a, b):
        assert haversine_distance(*a, *b) == pytest.approx(haversine_distance(*b, *a))

    def test_one_degree_of_latitude(self):
        assert haversine_distance(0, 0, 1, 0) == pytest.approx(METERS_PER_DEGREE)

    def test_short_distance_in_new_delhi(self):
        # 0.0001 degrees in each axis near New Delhi is roughly 15 meters
        assert haversine_distance(28.6139, 77.2090, 28.6140, 77.2091) == pytest.approx(14.8, abs=0.5)

    def test_km_scale_distance(self):
        assert haversine_distance(28.6139, 77.2090, 28.7000, 77.3000) == pytest.approx(13058, abs=50)

    def test_antipodal_points(self):
        assert haversine_distance(0, 0, 0, 180) == pytest.approx(math.pi * 6371000)

    def test_accepts_decimals(self):
        assert haversine_distance(Decimal("28.6139"), Decimal("77.2090"), 28.6139, 77.2090) == 0


class TestDistanceMeters:
    def test_ignores_accuracy(self):
        a = Coordinate(28.6139, 77.2090, accuracy_m=5)
        b = Coordinate(28.6140, 77.2091, accuracy_m=5000)
        assert distance_meters(a, b) == haversine_distance(28.6139, 77.2090, 28.6140, 77.2091)

    def test_same_coordinate(self):
        a = Coordinate(51.5, -0.12)
        assert distance_meters(a, a) == 0


class TestIsValidCoordinate:
    @pytest.mark.parametrize(
        "coordinate",
        [
            Coordinate(0, 0),
            Coordinate(90, 180),
            Coordinate(-90, -180),
            Coordinate(28.6139, 77.2090, accuracy_m=1500),
        ],
    )
    def test_valid(self, coordinate):
        assert is_valid_coordinate(coordinate)

    @pytest.mark.parametrize(
        "coordinate",
        [
            Coordinate(90.0001, 0),
            Coordinate(-91, 0),
            Coordinate(0, 180.5),
            Coordinate(0, -181),
            Coordinate(0, 0, accuracy_m=-1),
            Coordinate(float("nan"), 0),
            Coordinate(0, float("inf")),
            None,
        ],
    )
    def test_invalid(self, coordinate):
        assert not is_valid_coordinate(coordinate)

    def test_non_numeric_values_are_invalid(self):
        assert not is_valid_coordinate(Coordinate("28.6", 77.2))
        assert not is_valid_coordinate(Coordinate(True, 77.2))


def test_format_coordinate_uses_six_decimals():
    assert format_coordinate(Coordinate(28.7, 77.3)) == "28.700000, 77.300000"
    assert format_coordinate(Coordinate(-33.86881234567, 151.2)) == "-33.868812, 151.200000"


def test_coordinate_of_converts_decimals():
    coordinate = Coordinate.of(Decimal("28.6139"), Decimal("77.2090"))
    assert coordinate == Coordinate(28.6139, 77.209, 0.0)
    assert coordinate.as_dict() == {"latitude": 28.6139, "longitude": 77.209}
