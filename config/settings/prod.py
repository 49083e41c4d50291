# config/settings/prod.py
from .base import *  # noqa

DEBUG = False

CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ALLOWED_ORIGINS", "https://housing.yourdomain.com").split(",")  # noqa: F405
    if o.strip()
]
CORS_ALLOW_CREDENTIALS = True
