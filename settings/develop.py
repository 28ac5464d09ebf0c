"""
This configuration file overrides some necessary configs
to deploy the app to the develop environment.
"""

from decouple import Csv

from .base import *  # noqa
from .base import config

INSTALLED_APPS += [  # NOQA
    "django.contrib.staticfiles",  # for API admin in local & develop
]


ALLOWED_HOSTS = config("ALLOWED_HOSTS", cast=Csv())

STATIC_ROOT = "staticfiles"

CSRF_TRUSTED_ORIGINS = config("CSRF_TRUSTED_ORIGINS", default="", cast=Csv())
CORS_ALLOWED_ORIGINS = config("CORS_ALLOWED_ORIGINS", default="", cast=Csv())
