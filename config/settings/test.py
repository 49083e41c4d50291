# config/settings/test.py
from .base import *  # noqa

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Health check pings the test database.
HS_DB_CONFIGURED = True

LOGGING["loggers"]["hs_core"]["level"] = "WARNING"  # noqa: F405
