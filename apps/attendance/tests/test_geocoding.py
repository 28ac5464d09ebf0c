"""Tests for reverse geocoding with fallback."""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

import pytest
import requests

from apps.attendance.services.geocoding import AddressResult, ReverseGeocoder, reverse_geocode
from apps.attendance.utils.geolocation import Coordinate

COORDINATE = Coordinate(28.6140, 77.2091, accuracy_m=12)

NOMINATIM_PAYLOAD = {
    "display_name": "Janpath, Connaught Place, New Delhi, Delhi, 110001, India",
    "address": {
        "road": "Janpath",
        "suburb": "Connaught Place",
        "city": "New Delhi",
        "state": "Delhi",
        "postcode": "110001",
        "country": "India",
        "country_code": "in",
    },
}


def mock_response(payload, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


@pytest.fixture
def geocoder():
    return ReverseGeocoder(
        url="https://geocoder.test/reverse",
        user_agent="LegalOfficeManagement/1.0",
        timeout=1.0,
        zoom=18,
        enabled=True,
    )


class TestReverseGeocoder:
    @patch("apps.attendance.services.geocoding.requests.get")
    def test_resolves_structured_address(self, mock_get, geocoder):
        mock_get.return_value = mock_response(NOMINATIM_PAYLOAD)

        result = geocoder.resolve(COORDINATE)

        assert result.display == "Janpath, Connaught Place, New Delhi, Delhi, 110001, India"
        assert not result.degraded
        assert result.components["road"] == "Janpath"
        assert result.components["city"] == "New Delhi"
        assert "country_code" not in result.components

    @patch("apps.attendance.services.geocoding.requests.get")
    def test_sends_single_identified_request(self, mock_get, geocoder):
        mock_get.return_value = mock_response(NOMINATIM_PAYLOAD)

        geocoder.resolve(COORDINATE)

        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        assert args == ("https://geocoder.test/reverse",)
        assert kwargs["headers"] == {"User-Agent": "LegalOfficeManagement/1.0"}
        assert kwargs["params"] == {
            "lat": 28.6140,
            "lon": 77.2091,
            "format": "json",
            "addressdetails": 1,
            "zoom": 18,
        }
        assert kwargs["timeout"] == (1.0, 1.0)

    @patch("apps.attendance.services.geocoding.requests.get")
    def test_town_or_village_stands_in_for_city(self, mock_get, geocoder):
        mock_get.return_value = mock_response(
            {"address": {"road": "MG Road", "village": "Rampur", "state": "Uttar Pradesh", "country": "India"}}
        )

        result = geocoder.resolve(COORDINATE)

        assert result.display == "MG Road, Rampur, Uttar Pradesh, India"

    @patch("apps.attendance.services.geocoding.requests.get")
    def test_display_name_used_without_address_parts(self, mock_get, geocoder):
        mock_get.return_value = mock_response({"display_name": "Somewhere, India", "address": {}})

        result = geocoder.resolve(COORDINATE)

        assert result.display == "Somewhere, India"
        assert not result.degraded

    @patch("apps.attendance.services.geocoding.requests.get")
    def test_address_not_available(self, mock_get, geocoder):
        mock_get.return_value = mock_response({"place_id": 1})

        result = geocoder.resolve(COORDINATE)

        assert result.display == "Address not available"
        assert not result.degraded

    @pytest.mark.parametrize(
        "side_effect",
        [
            requests.Timeout("read timed out"),
            requests.ConnectionError("connection refused"),
        ],
    )
    def test_network_failure_falls_back_to_coordinates(self, geocoder, side_effect):
        with patch("apps.attendance.services.geocoding.requests.get", side_effect=side_effect):
            result = geocoder.resolve(COORDINATE)

        assert result == AddressResult(display="28.614000, 77.209100", degraded=True)

    @patch("apps.attendance.services.geocoding.requests.get")
    def test_http_error_falls_back(self, mock_get, geocoder):
        mock_get.return_value = mock_response({}, status_code=503)

        result = geocoder.resolve(COORDINATE)

        assert result.degraded
        assert result.display == "28.614000, 77.209100"

    @patch("apps.attendance.services.geocoding.requests.get")
    def test_provider_error_payload_falls_back(self, mock_get, geocoder):
        mock_get.return_value = mock_response({"error": "Unable to geocode"})

        result = geocoder.resolve(COORDINATE)

        assert result.degraded

    @patch("apps.attendance.services.geocoding.requests.get")
    def test_invalid_json_falls_back(self, mock_get, geocoder):
        response = mock_response(None)
        response.json.side_effect = ValueError("No JSON object could be decoded")
        mock_get.return_value = response

        result = geocoder.resolve(COORDINATE)

        assert result.degraded

    @patch("apps.attendance.services.geocoding.requests.get")
    def test_degradation_is_logged_as_warning(self, mock_get, geocoder):
        mock_get.side_effect = requests.ConnectionError("connection refused")

        with patch("apps.attendance.services.geocoding.logger") as mock_logger:
            geocoder.resolve(COORDINATE)

        mock_logger.warning.assert_called_once()

    def test_stalled_provider_is_cut_off_at_timeout(self):
        release = threading.Event()

        def stall(*args, **kwargs):
            release.wait(5)
            return mock_response(NOMINATIM_PAYLOAD)

        geocoder = ReverseGeocoder(url="https://geocoder.test/reverse", timeout=0.05, enabled=True)
        try:
            with patch("apps.attendance.services.geocoding.requests.get", side_effect=stall):
                result = geocoder.resolve(COORDINATE)
        finally:
            release.set()

        assert result.degraded
        assert result.display == "28.614000, 77.209100"

    def test_stalled_lookups_do_not_delay_other_users(self):
        release = threading.Event()
        stalled = Coordinate(28.6500, 77.2500)

        def provider(url, params, **kwargs):
            if params["lat"] == stalled.latitude:
                release.wait(5)
            return mock_response(NOMINATIM_PAYLOAD)

        geocoder = ReverseGeocoder(url="https://geocoder.test/reverse", timeout=0.2, enabled=True)
        try:
            with patch("apps.attendance.services.geocoding.requests.get", side_effect=provider):
                with ThreadPoolExecutor(max_workers=4) as callers:
                    stalled_results = list(callers.map(geocoder.resolve, [stalled] * 4))
                result = geocoder.resolve(COORDINATE)
        finally:
            release.set()

        assert all(stalled_result.degraded for stalled_result in stalled_results)
        assert not result.degraded
        assert result.display == "Janpath, Connaught Place, New Delhi, Delhi, 110001, India"

    @patch("apps.attendance.services.geocoding.requests.get")
    def test_disabled_geocoder_makes_no_request(self, mock_get):
        geocoder = ReverseGeocoder(enabled=False)

        result = geocoder.resolve(COORDINATE)

        mock_get.assert_not_called()
        assert result == AddressResult(display="28.614000, 77.209100", degraded=True)


@patch("apps.attendance.services.geocoding.requests.get")
def test_reverse_geocode_reads_settings(mock_get, settings):
    settings.REVERSE_GEOCODING_ENABLED = True
    settings.REVERSE_GEOCODING_URL = "https://other-geocoder.test/reverse"
    settings.REVERSE_GEOCODING_USER_AGENT = "LegalOfficeManagement/2.0"
    mock_get.return_value = mock_response(NOMINATIM_PAYLOAD)

    result = reverse_geocode(COORDINATE)

    assert not result.degraded
    args, kwargs = mock_get.call_args
    assert args == ("https://other-geocoder.test/reverse",)
    assert kwargs["headers"]["User-Agent"] == "LegalOfficeManagement/2.0"
