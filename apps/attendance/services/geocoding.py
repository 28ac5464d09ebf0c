"""Reverse geocoding of attendance coordinates.

Resolution is best-effort: a lookup makes exactly one request to the
provider and is hard-bounded by ``REVERSE_GEOCODING_TIMEOUT``. Any error,
timeout or unusable payload produces a degraded result whose display string
is the raw coordinate, so callers never have to handle a failure.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass, field
from typing import Any, Optional

import requests
from django.conf import settings

from apps.attendance.constants import ADDRESS_NOT_AVAILABLE
from apps.attendance.utils.geolocation import Coordinate, format_coordinate

logger = logging.getLogger(__name__)

# Order in which address components are joined into the display string
ADDRESS_PARTS = (
    "house_number",
    "road",
    "neighbourhood",
    "suburb",
    "city",
    "state_district",
    "state",
    "postcode",
    "country",
)

@dataclass(frozen=True)
class AddressResult:
    display: str
    components: dict[str, Any] = field(default_factory=dict)
    degraded: bool = False

    @classmethod
    def fallback(cls, coordinate: Coordinate) -> "AddressResult":
        return cls(display=format_coordinate(coordinate), degraded=True)


class GeocodingError(Exception):
    """Raised internally when the provider response cannot be used."""


class ReverseGeocoder:
    def __init__(
        self,
        url: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        zoom: Optional[int] = None,
        enabled: Optional[bool] = None,
    ):
        self.url = url or settings.REVERSE_GEOCODING_URL
        self.user_agent = user_agent or settings.REVERSE_GEOCODING_USER_AGENT
        self.timeout = timeout if timeout is not None else settings.REVERSE_GEOCODING_TIMEOUT
        self.zoom = zoom if zoom is not None else settings.REVERSE_GEOCODING_ZOOM
        self.enabled = enabled if enabled is not None else settings.REVERSE_GEOCODING_ENABLED

    def resolve(self, coordinate: Coordinate) -> AddressResult:
        """Resolve a coordinate to an address. Never raises."""
        if not self.enabled:
            return AddressResult.fallback(coordinate)

        # One worker per lookup: a stalled call only ever holds its own thread
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="reverse-geocoding")
        future = executor.submit(self._lookup, coordinate)
        try:
            payload = future.result(timeout=self.timeout)
            return self._parse(payload)
        except FutureTimeoutError:
            logger.warning(
                f"Reverse geocoding timed out after {self.timeout}s for {format_coordinate(coordinate)}"
            )
        except (requests.RequestException, ValueError, GeocodingError) as e:
            logger.warning(f"Reverse geocoding failed for {format_coordinate(coordinate)}: {e}")
        finally:
            executor.shutdown(wait=False)
        return AddressResult.fallback(coordinate)

    def _lookup(self, coordinate: Coordinate) -> dict:
        response = requests.get(
            self.url,
            params={
                "lat": coordinate.latitude,
                "lon": coordinate.longitude,
                "format": "json",
                "addressdetails": 1,
                "zoom": self.zoom,
            },
            headers={"User-Agent": self.user_agent},
            timeout=(self.timeout, self.timeout),
        )
        response.raise_for_status()
        return response.json()

    def _parse(self, payload) -> AddressResult:
        if not isinstance(payload, dict):
            raise GeocodingError("Unexpected response payload")
        if payload.get("error"):
            raise GeocodingError(payload["error"])

        display_name = payload.get("display_name")
        address = payload.get("address")
        if not isinstance(address, dict):
            return AddressResult(display=display_name or ADDRESS_NOT_AVAILABLE)

        components = {key: address.get(key) for key in ADDRESS_PARTS}
        components["city"] = address.get("city") or address.get("town") or address.get("village")
        display = ", ".join(str(components[key]) for key in ADDRESS_PARTS if components[key])
        components["display_name"] = display_name

        return AddressResult(
            display=display or display_name or ADDRESS_NOT_AVAILABLE,
            components={key: value for key, value in components.items() if value},
        )


def reverse_geocode(coordinate: Coordinate) -> AddressResult:
    return ReverseGeocoder().resolve(coordinate)
