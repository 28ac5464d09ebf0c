"""
Base ViewSets shared by every API module.

Actions listed in ``admin_actions`` additionally require an administrator
role; every other action uses the globally configured permission classes.
"""

from rest_framework import viewsets

from apps.core.api.permissions import IsAdminRole


class AdminActionPermissionMixin:
    """Mixin that guards selected actions with :class:`IsAdminRole`.

    Example:
        class OfficeLocationViewSet(BaseModelViewSet):
            admin_actions = {"create", "update", "partial_update", "destroy"}
    """

    admin_actions: frozenset = frozenset()

    def get_permissions(self):
        permissions = super().get_permissions()
        if getattr(self, "action", None) in self.admin_actions:
            permissions.append(IsAdminRole())
        return permissions


class BaseModelViewSet(AdminActionPermissionMixin, viewsets.ModelViewSet):
    pass


class BaseReadOnlyModelViewSet(AdminActionPermissionMixin, viewsets.ReadOnlyModelViewSet):
    pass
