import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import apps.attendance.models.office_location


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="OfficeLocation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=200, verbose_name="Office name")),
                ("address", models.TextField(blank=True, verbose_name="Address")),
                (
                    "latitude",
                    models.DecimalField(
                        decimal_places=17,
                        help_text="Latitude coordinate",
                        max_digits=20,
                        validators=[apps.attendance.models.office_location.validate_latitude],
                        verbose_name="Latitude",
                    ),
                ),
                (
                    "longitude",
                    models.DecimalField(
                        decimal_places=17,
                        help_text="Longitude coordinate",
                        max_digits=20,
                        validators=[apps.attendance.models.office_location.validate_longitude],
                        verbose_name="Longitude",
                    ),
                ),
                (
                    "radius_m",
                    models.PositiveIntegerField(
                        default=1000,
                        help_text="Radius in meters for geofencing",
                        validators=[apps.attendance.models.office_location.validate_radius],
                        verbose_name="Radius (meters)",
                    ),
                ),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                ("deactivated_at", models.DateTimeField(blank=True, null=True, verbose_name="Deactivated at")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="created_office_locations",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Created by",
                    ),
                ),
                (
                    "updated_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="updated_office_locations",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Updated by",
                    ),
                ),
            ],
            options={
                "verbose_name": "Office Location",
                "verbose_name_plural": "Office Locations",
                "db_table": "attendance_office_location",
                "ordering": ["name"],
                "indexes": [models.Index(fields=["is_active"], name="att_office_active_idx")],
            },
        ),
        migrations.CreateModel(
            name="AttendanceRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("date", models.DateField(db_index=True, verbose_name="Date")),
                ("check_in_at", models.DateTimeField(verbose_name="Check-in time")),
                (
                    "check_in_latitude",
                    models.DecimalField(decimal_places=17, max_digits=20, verbose_name="Check-in latitude"),
                ),
                (
                    "check_in_longitude",
                    models.DecimalField(decimal_places=17, max_digits=20, verbose_name="Check-in longitude"),
                ),
                ("check_in_accuracy", models.FloatField(default=0, verbose_name="Check-in accuracy (meters)")),
                ("check_in_address", models.TextField(blank=True, verbose_name="Check-in address")),
                (
                    "check_in_address_degraded",
                    models.BooleanField(default=False, verbose_name="Check-in address degraded"),
                ),
                ("check_in_distance_m", models.FloatField(verbose_name="Check-in distance (meters)")),
                ("check_out_at", models.DateTimeField(blank=True, null=True, verbose_name="Check-out time")),
                (
                    "check_out_latitude",
                    models.DecimalField(
                        blank=True, decimal_places=17, max_digits=20, null=True, verbose_name="Check-out latitude"
                    ),
                ),
                (
                    "check_out_longitude",
                    models.DecimalField(
                        blank=True, decimal_places=17, max_digits=20, null=True, verbose_name="Check-out longitude"
                    ),
                ),
                (
                    "check_out_accuracy",
                    models.FloatField(blank=True, null=True, verbose_name="Check-out accuracy (meters)"),
                ),
                ("check_out_address", models.TextField(blank=True, verbose_name="Check-out address")),
                (
                    "check_out_address_degraded",
                    models.BooleanField(default=False, verbose_name="Check-out address degraded"),
                ),
                (
                    "check_out_distance_m",
                    models.FloatField(blank=True, null=True, verbose_name="Check-out distance (meters)"),
                ),
                (
                    "work_hours",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=5, null=True, verbose_name="Work hours"
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("present", "Present"),
                            ("half-day", "Half day"),
                            ("absent", "Absent"),
                            ("late", "Late"),
                        ],
                        default="present",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("ip_address", models.GenericIPAddressField(blank=True, null=True, verbose_name="IP address")),
                ("user_agent", models.CharField(blank=True, max_length=255, verbose_name="User agent")),
                (
                    "check_in_office",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="check_ins",
                        to="attendance.officelocation",
                        verbose_name="Check-in office",
                    ),
                ),
                (
                    "check_out_office",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="check_outs",
                        to="attendance.officelocation",
                        verbose_name="Check-out office",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="attendance_records",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="User",
                    ),
                ),
            ],
            options={
                "verbose_name": "Attendance Record",
                "verbose_name_plural": "Attendance Records",
                "db_table": "attendance_attendance_record",
                "ordering": ["-date", "-check_in_at"],
                "indexes": [
                    models.Index(fields=["user", "date"], name="att_record_user_date_idx"),
                    models.Index(fields=["status"], name="att_record_status_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "date"), name="attendance_record_unique_user_date"),
                    models.CheckConstraint(
                        condition=models.Q(
                            ("check_out_at__isnull", True),
                            ("check_out_at__gt", models.F("check_in_at")),
                            _connector="OR",
                        ),
                        name="attendance_record_check_out_after_check_in",
                    ),
                ],
            },
        ),
    ]
