from django.urls import path

from .api.views import TokenObtainPairView, TokenRefreshView

app_name = "core"

urlpatterns = [
    path("auth/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
]
