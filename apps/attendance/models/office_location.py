from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from libs.models import BaseModel

from ..constants import DEFAULT_OFFICE_RADIUS_M
from ..querysets import OfficeLocationQuerySet
from ..utils.geolocation import Coordinate


def validate_latitude(value):
    """Validate latitude is between -90 and 90"""
    if value < -90 or value > 90:
        raise ValidationError(_("Latitude must be between -90 and 90 degrees"))


def validate_longitude(value):
    """Validate longitude is between -180 and 180"""
    if value < -180 or value > 180:
        raise ValidationError(_("Longitude must be between -180 and 180 degrees"))


def validate_radius(value):
    """Validate radius is positive"""
    if value <= 0:
        raise ValidationError(_("Radius must be a positive number of meters"))


class OfficeLocation(BaseModel):
    """Office premises with a circular geofence used to validate attendance"""

    name = models.CharField(max_length=200, verbose_name=_("Office name"))
    address = models.TextField(blank=True, verbose_name=_("Address"))

    latitude = models.DecimalField(
        max_digits=20,
        decimal_places=17,
        verbose_name=_("Latitude"),
        help_text="Latitude coordinate",
        validators=[validate_latitude],
    )
    longitude = models.DecimalField(
        max_digits=20,
        decimal_places=17,
        verbose_name=_("Longitude"),
        help_text="Longitude coordinate",
        validators=[validate_longitude],
    )

    radius_m = models.PositiveIntegerField(
        default=DEFAULT_OFFICE_RADIUS_M,
        validators=[validate_radius],
        verbose_name=_("Radius (meters)"),
        help_text="Radius in meters for geofencing",
    )

    is_active = models.BooleanField(default=True, verbose_name=_("Active"))
    deactivated_at = models.DateTimeField(null=True, blank=True, verbose_name=_("Deactivated at"))
    description = models.TextField(blank=True, verbose_name=_("Description"))

    created_by = models.ForeignKey(
        "core.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_office_locations",
        verbose_name=_("Created by"),
    )
    updated_by = models.ForeignKey(
        "core.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="updated_office_locations",
        verbose_name=_("Updated by"),
    )

    objects = OfficeLocationQuerySet.as_manager()

    class Meta:
        verbose_name = _("Office Location")
        verbose_name_plural = _("Office Locations")
        db_table = "attendance_office_location"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_active"], name="att_office_active_idx"),
        ]

    def __str__(self):
        return self.name

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate.of(self.latitude, self.longitude)

    def deactivate(self, user=None):
        """Soft delete: hide from geofence evaluation but keep history intact"""
        self.is_active = False
        self.deactivated_at = timezone.now()
        update_fields = ["is_active", "deactivated_at", "updated_at"]
        if user is not None:
            self.updated_by = user
            update_fields.append("updated_by")
        self.save(update_fields=update_fields)

    def delete(self, using=None, keep_parents=False):
        self.deactivate()
