DJANGO_APPs = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
]

EXTERNAL_APPS = [
    "django_filters",
    "corsheaders",
    "rest_framework",
    "rest_framework_simplejwt",
    "drf_standardized_errors",
    "drf_spectacular",
]

INTERNAL_APPS = [
    "apps.core",
    "apps.attendance",
]

INSTALLED_APPS = DJANGO_APPs + EXTERNAL_APPS + INTERNAL_APPS
