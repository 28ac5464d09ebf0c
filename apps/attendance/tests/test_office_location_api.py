"""Tests for OfficeLocation API endpoints."""

from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.attendance.models import OfficeLocation


class APITestMixin:
    """Mixin to handle wrapped API responses and data extraction."""

    def get_response_data(self, response):
        """Extract data from wrapped API response."""
        content = response.json()
        if "data" in content:
            data = content["data"]
            if isinstance(data, dict) and "results" in data:
                return data["results"]
            return data
        return content


@pytest.mark.django_db
class TestOfficeLocationAPI(APITestMixin):
    @pytest.fixture(autouse=True)
    def offices(self, make_office):
        self.main = make_office(name="Main Chamber", address="Chamber 12, High Court Complex")
        self.saket = make_office(name="Saket Chamber", latitude=Decimal("28.5245"), longitude=Decimal("77.2066"))
        self.closed = make_office(name="Old Chamber", is_active=False)

    def test_list_office_locations(self, api_client):
        response = api_client.get(reverse("attendance:office-location-list"))

        assert response.status_code == status.HTTP_200_OK
        names = [item["name"] for item in self.get_response_data(response)]
        assert names == ["Main Chamber", "Old Chamber", "Saket Chamber"]

    @pytest.mark.parametrize(
        "active, expected",
        [("true", ["Main Chamber", "Saket Chamber"]), ("false", ["Old Chamber"])],
    )
    def test_filter_by_active(self, api_client, active, expected):
        response = api_client.get(reverse("attendance:office-location-list"), {"active": active})

        assert [item["name"] for item in self.get_response_data(response)] == expected

    def test_active_endpoint_is_open_to_employees(self, employee_client):
        response = employee_client.get(reverse("attendance:office-location-active"))

        assert response.status_code == status.HTTP_200_OK
        data = self.get_response_data(response)
        assert [item["name"] for item in data] == ["Main Chamber", "Saket Chamber"]

    def test_create_office_location(self, api_client, superuser):
        payload = {
            "name": "Dwarka Chamber",
            "address": "Sector 10, Dwarka, New Delhi",
            "latitude": "28.5823",
            "longitude": "77.0500",
            "radius_m": 150,
            "description": "District court chamber",
        }

        response = api_client.post(reverse("attendance:office-location-list"), payload, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        data = self.get_response_data(response)
        assert data["name"] == "Dwarka Chamber"
        assert data["radius_m"] == 150
        assert data["is_active"] is True
        assert data["created_by"]["username"] == superuser.username

        office = OfficeLocation.objects.get(name="Dwarka Chamber")
        assert office.latitude == Decimal("28.5823")
        assert office.created_by == superuser
        assert office.updated_by == superuser

    def test_radius_defaults_to_one_kilometer(self, api_client):
        response = api_client.post(
            reverse("attendance:office-location-list"),
            {"name": "Noida Chamber", "latitude": "28.5355", "longitude": "77.3910"},
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert self.get_response_data(response)["radius_m"] == 1000

    @pytest.mark.parametrize("radius_m", [10, 49, 1001, 5000])
    def test_radius_outside_bounds_rejected(self, api_client, radius_m):
        response = api_client.post(
            reverse("attendance:office-location-list"),
            {"name": "Bad Radius", "latitude": "28.5", "longitude": "77.1", "radius_m": radius_m},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not OfficeLocation.objects.filter(name="Bad Radius").exists()

    @pytest.mark.parametrize("latitude, longitude", [("95", "77.1"), ("28.5", "-181")])
    def test_coordinates_outside_range_rejected(self, api_client, latitude, longitude):
        response = api_client.post(
            reverse("attendance:office-location-list"),
            {"name": "Bad Coordinates", "latitude": latitude, "longitude": longitude},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_office_location(self, api_client, superuser):
        response = api_client.patch(
            reverse("attendance:office-location-detail", args=[self.main.id]),
            {"radius_m": 250},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        self.main.refresh_from_db()
        assert self.main.radius_m == 250
        assert self.main.updated_by == superuser

    def test_deactivate_through_update(self, api_client):
        response = api_client.patch(
            reverse("attendance:office-location-detail", args=[self.main.id]),
            {"is_active": False},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        self.main.refresh_from_db()
        assert not self.main.is_active
        assert self.main.deactivated_at is not None

    def test_reactivate_clears_deactivation_time(self, api_client):
        response = api_client.patch(
            reverse("attendance:office-location-detail", args=[self.closed.id]),
            {"is_active": True},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        self.closed.refresh_from_db()
        assert self.closed.is_active
        assert self.closed.deactivated_at is None

    def test_delete_deactivates(self, api_client, superuser):
        response = api_client.delete(reverse("attendance:office-location-detail", args=[self.main.id]))

        assert response.status_code == status.HTTP_200_OK
        data = self.get_response_data(response)
        assert data["id"] == self.main.id
        assert data["is_active"] is False
        assert data["deactivated_at"] is not None

        self.main.refresh_from_db()
        assert not self.main.is_active
        assert self.main.updated_by == superuser

    def test_employee_cannot_create(self, employee_client):
        response = employee_client.post(
            reverse("attendance:office-location-list"),
            {"name": "Rogue Chamber", "latitude": "28.5", "longitude": "77.1"},
            format="json",
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not OfficeLocation.objects.filter(name="Rogue Chamber").exists()

    def test_employee_cannot_delete(self, employee_client):
        response = employee_client.delete(reverse("attendance:office-location-detail", args=[self.main.id]))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        self.main.refresh_from_db()
        assert self.main.is_active

    @pytest.mark.rbp
    def test_unauthenticated_cannot_list(self, api_client):
        response = api_client.get(reverse("attendance:office-location-list"))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
