import os

import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from .base import *

DEBUG = bool(os.getenv("DEBUG"))

SECRET_KEY = os.getenv("SECRET_KEY")

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("ALLOWED_HOSTS", "gameplan.app").split(",")
    if host.strip()
]
CSRF_TRUSTED_ORIGINS = [f"https://{host}" for host in ALLOWED_HOSTS]

# dj_database_url doesn't render an OPTIONS dictionary
# unless there was a setting that needs it.
DATABASES["default"].setdefault("OPTIONS", {})["sslmode"] = "require"

STORAGES["staticfiles"][
    "BACKEND"
] = "django.contrib.staticfiles.storage.ManifestStaticFilesStorage"

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

SENTRY_DNS = os.environ.get("SENTRY_DNS")
sentry_sdk.init(
    dsn=SENTRY_DNS,
    # Set traces_sample_rate to 1.0 to capture 100% of transactions for performance monitoring.
    traces_sample_rate=0.25,
    # Set profiles_sample_rate to 1.0 to profile 100% of sampled transactions.
    profiles_sample_rate=0.1,
    integrations=[
        DjangoIntegration(
            transaction_style="url",
            middleware_spans=True,
            signals_spans=False,
            cache_spans=False,
        ),
        LoggingIntegration(),
    ],
)

BASE_URL = os.getenv("BASE_URL", "https://gameplan.app")
