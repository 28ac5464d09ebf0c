from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _

from libs.models import BaseModel

from ..constants import WORK_HOURS_DECIMAL_PLACES, AttendanceStatus
from ..querysets import AttendanceRecordQuerySet


class AttendanceRecord(BaseModel):
    """One attendance day for one user.

    The check-in block is written when the record is created. The check-out
    block stays empty until the user checks out, after which the record is
    complete and ``work_hours`` is filled in.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="attendance_records",
        verbose_name=_("User"),
    )
    date = models.DateField(verbose_name=_("Date"), db_index=True)

    # Check-in
    check_in_at = models.DateTimeField(verbose_name=_("Check-in time"))
    check_in_latitude = models.DecimalField(max_digits=20, decimal_places=17, verbose_name=_("Check-in latitude"))
    check_in_longitude = models.DecimalField(max_digits=20, decimal_places=17, verbose_name=_("Check-in longitude"))
    check_in_accuracy = models.FloatField(default=0, verbose_name=_("Check-in accuracy (meters)"))
    check_in_address = models.TextField(blank=True, verbose_name=_("Check-in address"))
    check_in_address_degraded = models.BooleanField(default=False, verbose_name=_("Check-in address degraded"))
    check_in_office = models.ForeignKey(
        "attendance.OfficeLocation",
        on_delete=models.PROTECT,
        related_name="check_ins",
        verbose_name=_("Check-in office"),
    )
    check_in_distance_m = models.FloatField(verbose_name=_("Check-in distance (meters)"))

    # Check-out
    check_out_at = models.DateTimeField(null=True, blank=True, verbose_name=_("Check-out time"))
    check_out_latitude = models.DecimalField(
        max_digits=20, decimal_places=17, null=True, blank=True, verbose_name=_("Check-out latitude")
    )
    check_out_longitude = models.DecimalField(
        max_digits=20, decimal_places=17, null=True, blank=True, verbose_name=_("Check-out longitude")
    )
    check_out_accuracy = models.FloatField(null=True, blank=True, verbose_name=_("Check-out accuracy (meters)"))
    check_out_address = models.TextField(blank=True, verbose_name=_("Check-out address"))
    check_out_address_degraded = models.BooleanField(default=False, verbose_name=_("Check-out address degraded"))
    check_out_office = models.ForeignKey(
        "attendance.OfficeLocation",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="check_outs",
        verbose_name=_("Check-out office"),
    )
    check_out_distance_m = models.FloatField(null=True, blank=True, verbose_name=_("Check-out distance (meters)"))

    work_hours = models.DecimalField(
        max_digits=5, decimal_places=WORK_HOURS_DECIMAL_PLACES, null=True, blank=True, verbose_name=_("Work hours")
    )
    status = models.CharField(
        max_length=20,
        choices=AttendanceStatus.choices,
        default=AttendanceStatus.PRESENT,
        verbose_name=_("Status"),
    )

    # Device info
    ip_address = models.GenericIPAddressField(null=True, blank=True, verbose_name=_("IP address"))
    user_agent = models.CharField(max_length=255, blank=True, verbose_name=_("User agent"))

    objects = AttendanceRecordQuerySet.as_manager()

    class Meta:
        verbose_name = _("Attendance Record")
        verbose_name_plural = _("Attendance Records")
        db_table = "attendance_attendance_record"
        ordering = ["-date", "-check_in_at"]
        constraints = [
            models.UniqueConstraint(fields=["user", "date"], name="attendance_record_unique_user_date"),
            models.CheckConstraint(
                condition=Q(check_out_at__isnull=True) | Q(check_out_at__gt=models.F("check_in_at")),
                name="attendance_record_check_out_after_check_in",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "date"], name="att_record_user_date_idx"),
            models.Index(fields=["status"], name="att_record_status_idx"),
        ]

    def __str__(self):
        return f"{self.user} - {self.date}"

    @property
    def is_checked_out(self) -> bool:
        return self.check_out_at is not None
