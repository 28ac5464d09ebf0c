import django.utils.timezone
from django.db import migrations, models

import apps.core.querysets.user


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("username", models.CharField(max_length=100, unique=True, verbose_name="Username")),
                ("email", models.EmailField(max_length=254, unique=True, verbose_name="Email")),
                (
                    "phone_number",
                    models.CharField(blank=True, max_length=15, null=True, verbose_name="Phone number"),
                ),
                ("first_name", models.CharField(blank=True, max_length=30, verbose_name="First name")),
                ("last_name", models.CharField(blank=True, max_length=30, verbose_name="Last name")),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("super-admin", "Super Admin"),
                            ("sub-admin", "Sub Admin"),
                            ("admin", "Admin"),
                            ("senior-advocate", "Senior Advocate"),
                            ("junior-advocate", "Junior Advocate"),
                            ("clerk", "Clerk"),
                            ("intern", "Intern"),
                            ("employee", "Employee"),
                        ],
                        default="employee",
                        max_length=20,
                        verbose_name="Role",
                    ),
                ),
                (
                    "employee_code",
                    models.CharField(blank=True, max_length=50, null=True, unique=True, verbose_name="Employee code"),
                ),
                ("designation", models.CharField(blank=True, max_length=100, verbose_name="Designation")),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                ("is_staff", models.BooleanField(default=False, verbose_name="Staff")),
                (
                    "date_joined",
                    models.DateTimeField(default=django.utils.timezone.now, verbose_name="Date joined"),
                ),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "verbose_name": "User",
                "verbose_name_plural": "Users",
                "db_table": "core_user",
            },
            managers=[
                ("objects", apps.core.querysets.user.UserManager()),
            ],
        ),
    ]
