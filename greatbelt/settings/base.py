"""Base settings shared by every environment.

Environment-specific modules (development, test) set their defaults in
os.environ and then ``from .base import *``.
"""
import os
from pathlib import Path

import dj_database_url
from django.core.exceptions import ImproperlyConfigured

from apps.plugin.greate_belt import GreateBeltPlugin

BASE_DIR = Path(__file__).resolve().parent.parent.parent


def require_env(name):
    """Return an environment variable or fail loudly at start-up."""
    value = os.environ.get(name)
    if not value:
        raise ImproperlyConfigured(f"Required environment variable {name} is not set.")
    return value


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = require_env("SECRET_KEY")
DEBUG = False
ALLOWED_HOSTS = [h for h in os.environ.get("ALLOWED_HOSTS", "").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "apps.sdk",
    "apps.items_planning",
    "apps.reports",
    "apps.plugin",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    # Must run after AuthenticationMiddleware (reads request.user)
    "greatbelt.middleware.safe_locale.SafeLocaleMiddleware",
]

ROOT_URLCONF = "greatbelt.urls"
WSGI_APPLICATION = "greatbelt.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
            ],
        },
    },
]

# ---------------------------------------------------------------------------
# Databases
# ---------------------------------------------------------------------------
# "default" is the eForm SDK database (cases, sites, templates).
# "items_planning" belongs to the Items Planning plugin. When it is not
# configured explicitly it is derived from DATABASE_URL the same way the
# host derives it from the plugin's own connection string.

_plugin = GreateBeltPlugin()
_sdk_database_url = require_env("DATABASE_URL")

DATABASES = {
    "default": dj_database_url.parse(_sdk_database_url, conn_max_age=600),
    "items_planning": (
        dj_database_url.parse(os.environ["ITEMS_PLANNING_DATABASE_URL"], conn_max_age=600)
        if os.environ.get("ITEMS_PLANNING_DATABASE_URL")
        else _plugin.configure_db_context(_sdk_database_url)
    ),
}
DATABASE_ROUTERS = ["greatbelt.db_router.ItemsPlanningRouter"]

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ---------------------------------------------------------------------------
# Internationalization
# ---------------------------------------------------------------------------

LANGUAGE_CODE = "da"
LANGUAGES = [
    ("da", "Dansk"),
    ("en", "English"),
]
USE_I18N = True
USE_TZ = True
TIME_ZONE = "Europe/Copenhagen"

# ---------------------------------------------------------------------------
# Report behaviour
# ---------------------------------------------------------------------------

# False keeps the historical behaviour: only the requested page is sorted.
GREATBELT_REPORT_SORT_BEFORE_PAGINATE = env_bool("GREATBELT_REPORT_SORT_BEFORE_PAGINATE", False)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": os.environ.get("DJANGO_LOG_LEVEL", "WARNING").upper(),
            "propagate": False,
        },
    },
}

CSRF_FAILURE_VIEW = "greatbelt.error_views.csrf_failure"

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
LANGUAGE_COOKIE_SECURE = True
