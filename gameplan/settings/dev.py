# ----------------------------------------------
# For developing locally
# ----------------------------------------------
from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

from .base import *  # noqa E402 F403 F401

print("----------------------------------")
print("GamePlan DEV settings")
print("----------------------------------")


# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv(
    "SECRET_KEY", "django-insecure-4q!g#m2x7v^r0k&zj9t=p5c8w1n$e6h3u+ya_gameplan-dev"
)

# SECURITY WARNING: define the correct hosts in production!
ALLOWED_HOSTS = ["*"]

# Anything Django mails, such as admin error reports, goes to the console.
EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"

LOGGING["root"]["level"] = os.getenv("LOG_LEVEL", "DEBUG")  # noqa F405
# Set DJANGO_DB_LOG=1 to print every SQL query.
if os.getenv("DJANGO_DB_LOG"):
    LOGGING["loggers"]["django.db.backends"] = {  # noqa F405
        "handlers": ["console"],
        "level": "DEBUG",
        "propagate": False,
    }

BASE_URL = os.getenv("BASE_URL", "http://localhost:8000")

try:
    from .local import *  # noqa F403 F401
except ImportError:
    pass
