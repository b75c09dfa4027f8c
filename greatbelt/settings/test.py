"""Test settings: two in-memory SQLite databases, no MariaDB needed.

CI can point DATABASE_URL / ITEMS_PLANNING_DATABASE_URL at file-based
SQLite instead (e.g. sqlite:///ci-sdk.db).
"""
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")
os.environ.setdefault("ITEMS_PLANNING_DATABASE_URL", "sqlite://:memory:")

from .base import *  # noqa: F401, F403

import dj_database_url  # noqa: E402

DEBUG = True
ALLOWED_HOSTS = ["*"]
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
LANGUAGE_COOKIE_SECURE = False

DATABASES = {
    "default": dj_database_url.parse(os.environ["DATABASE_URL"], conn_max_age=0),
    "items_planning": dj_database_url.parse(
        os.environ["ITEMS_PLANNING_DATABASE_URL"], conn_max_age=0,
    ),
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

LOG_LEVEL = "WARNING"
LOGGING["root"]["level"] = LOG_LEVEL  # noqa: F405
