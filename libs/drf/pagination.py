"""
Custom pagination classes for the API.

Provides pagination classes with configurable page size via query parameters.
"""

from rest_framework.pagination import PageNumberPagination


class PageNumberWithSizePagination(PageNumberPagination):
    """
    Page number pagination that lets clients choose the page size.

    Query Parameters:
        - page: Page number (default: 1)
        - page_size: Number of items per page (default: PAGE_SIZE, max: 100)

    Example:
        GET /api/attendance/?page=2&page_size=50
    """

    page_size_query_param = "page_size"
    max_page_size = 100
