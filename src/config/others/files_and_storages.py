"""
Static files, media files, and storage configuration.

Static files ship with the code (css/js/images under version control) and are
gathered into STATIC_ROOT by ``collectstatic``. Media files are uploaded by
users at runtime and land under MEDIA_ROOT. The two trees never overlap.
"""

from src.config.env import BASE_DIR, env

# ── Static files ────────────────────────────────────────────────────────

STATIC_URL = "/static/"
STATIC_ROOT = env.static_root

# Project-wide assets; per-app assets live in <app>/static/<app>/.
STATICFILES_DIRS = [
    BASE_DIR / "static",
]

STATICFILES_FINDERS = [
    "django.contrib.staticfiles.finders.FileSystemFinder",
    "django.contrib.staticfiles.finders.AppDirectoriesFinder",
]

# ── Media files ─────────────────────────────────────────────────────────

MEDIA_URL = "/media/"
MEDIA_ROOT = env.media_root

# Serve MEDIA_URL from Django itself (see src/urls.py). Only for development.
SERVE_MEDIA = env.SERVE_MEDIA

MAX_UPLOAD_SIZE = env.max_upload_size

# ── Storages ────────────────────────────────────────────────────────────
# "default" replaces DEFAULT_FILE_STORAGE, "staticfiles" replaces
# STATICFILES_STORAGE. The manifest storage needs collectstatic to have run,
# so it is only switched on for production (prod.py).

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}
