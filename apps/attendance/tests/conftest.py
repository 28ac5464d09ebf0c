import math
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from apps.attendance.models import OfficeLocation
from apps.attendance.services import AddressResult, AttendanceEventService
from apps.attendance.services.geocoding import ReverseGeocoder

# Length of one degree of latitude on the haversine sphere
METERS_PER_DEGREE = math.pi * 6371000 / 180

MAIN_CHAMBER = (Decimal("28.6139"), Decimal("77.2090"))


def north_of(latitude, meters):
    """Latitude ``meters`` due north of ``latitude`` (exact along a meridian)."""
    return float(latitude) + meters / METERS_PER_DEGREE


@pytest.fixture
def make_office(db):
    def _make(name="Office", latitude=MAIN_CHAMBER[0], longitude=MAIN_CHAMBER[1], radius_m=100, **kwargs):
        return OfficeLocation.objects.create(
            name=name,
            latitude=latitude,
            longitude=longitude,
            radius_m=radius_m,
            **kwargs,
        )

    return _make


@pytest.fixture
def main_chamber(make_office):
    return make_office(name="Main Chamber", address="Chamber 12, High Court Complex, New Delhi")


@pytest.fixture
def fake_geocoder():
    geocoder = MagicMock(spec=ReverseGeocoder)
    geocoder.resolve.return_value = AddressResult(
        display="Janpath, Connaught Place, New Delhi, Delhi, 110001, India",
        components={"road": "Janpath", "city": "New Delhi"},
    )
    return geocoder


@pytest.fixture
def event_service(fake_geocoder):
    return AttendanceEventService(geocoder=fake_geocoder)
