from django.utils.translation import gettext_lazy as _
from rest_framework.permissions import BasePermission


class IsAdminRole(BasePermission):
    """Allow superusers and users holding one of the administrator roles."""

    message = _("You do not have permission to perform this action")

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return bool(getattr(user, "is_admin_role", False))
