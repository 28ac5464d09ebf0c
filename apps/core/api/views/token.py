"""Token management views with API documentation."""

from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework_simplejwt.views import (
    TokenObtainPairView as SimpleJWTTokenObtainPairView,
    TokenRefreshView as SimpleJWTTokenRefreshView,
)


class TokenObtainPairView(SimpleJWTTokenObtainPairView):
    """Exchange username and password for an access/refresh token pair."""

    @extend_schema(
        summary="Obtain access token",
        tags=["1.1: Auth"],
        responses={401: OpenApiResponse(description="Invalid credentials")},
        examples=[
            OpenApiExample(
                "Login request",
                value={"username": "advocate01", "password": "<password>"},
                request_only=True,
            ),
        ],
    )
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)


class TokenRefreshView(SimpleJWTTokenRefreshView):
    """Use a refresh token to obtain a new access token."""

    @extend_schema(
        summary="Refresh access token",
        tags=["1.1: Auth"],
        responses={401: OpenApiResponse(description="Invalid or expired refresh token")},
    )
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)
