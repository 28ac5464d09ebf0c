"""Helpers for reading client metadata off an HTTP request."""

from typing import NamedTuple, Optional

from django.http import HttpRequest


class ClientInfo(NamedTuple):
    ip_address: Optional[str]
    user_agent: str


def get_client_ip(request: HttpRequest) -> Optional[str]:
    """Return the originating client IP.

    The first hop of ``X-Forwarded-For`` wins over ``REMOTE_ADDR`` so that
    requests arriving through the load balancer are attributed correctly.
    """
    forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip() or None
    return request.META.get("REMOTE_ADDR")


def get_client_info(request: HttpRequest) -> ClientInfo:
    return ClientInfo(
        ip_address=get_client_ip(request),
        user_agent=request.META.get("HTTP_USER_AGENT", "")[:255],
    )
