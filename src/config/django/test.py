"""
Test settings.

Optimized for speed. Uses in-memory SQLite and a simple hasher.
"""

from src.config.django.base import *  # noqa: F401, F403

# ── Speed ───────────────────────────────────────────────────────────────

DEBUG = False
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# ── Database (SQLite for fast test runs) ────────────────────────────────

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    },
}

# ── Cache (local memory) ───────────────────────────────────────────────

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    },
}

# ── Static files ────────────────────────────────────────────────────────
# Plain storage: {% static %} works without a collectstatic manifest.

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

# Request logging from django-structlog is noisy under pytest.
DJANGO_STRUCTLOG_COMMAND_LOGGING_ENABLED = False
