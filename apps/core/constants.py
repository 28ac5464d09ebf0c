"""Centralized constants for the core app."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class UserRole(models.TextChoices):
    SUPER_ADMIN = "super-admin", _("Super Admin")
    SUB_ADMIN = "sub-admin", _("Sub Admin")
    ADMIN = "admin", _("Admin")
    SENIOR_ADVOCATE = "senior-advocate", _("Senior Advocate")
    JUNIOR_ADVOCATE = "junior-advocate", _("Junior Advocate")
    CLERK = "clerk", _("Clerk")
    INTERN = "intern", _("Intern")
    EMPLOYEE = "employee", _("Employee")


# Roles allowed to manage office locations and read everyone's attendance
ADMIN_ROLES = frozenset({UserRole.SUPER_ADMIN, UserRole.SUB_ADMIN, UserRole.ADMIN})

__all__ = [
    "ADMIN_ROLES",
    "UserRole",
]
