# ruff: noqa

from .base import *
from .apps import *
from .attendance import *
from .database import *
from .drf import *
from .internationalization import *
from .logging import *
from .middleware import *
from .sentry import *
from .templates import *
