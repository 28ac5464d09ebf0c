from .token import TokenObtainPairView, TokenRefreshView

__all__ = ["TokenObtainPairView", "TokenRefreshView"]
