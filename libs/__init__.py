from .drf.base_viewset import BaseModelViewSet, BaseReadOnlyModelViewSet
from .drf.pagination import PageNumberWithSizePagination
from .models import BaseModel

__all__ = [
    "BaseModel",
    "BaseModelViewSet",
    "BaseReadOnlyModelViewSet",
    "PageNumberWithSizePagination",
]
