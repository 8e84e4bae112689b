"""
System checks for the static/media layout.

Run with ``manage.py check`` (or ``check --deploy``). Django already refuses
MEDIA_URL == STATIC_URL at startup; these checks cover the directory layout
and the WhiteNoise middleware position as well.
"""

from pathlib import Path

from django.conf import settings
from django.core import checks

SECURITY_MIDDLEWARE = "django.middleware.security.SecurityMiddleware"
WHITENOISE_MIDDLEWARE = "whitenoise.middleware.WhiteNoiseMiddleware"


def _is_within(child: Path, parent: Path) -> bool:
    try:
        child.relative_to(parent)
    except ValueError:
        return False
    return True


def _staticfiles_dirs() -> list[Path]:
    dirs = []
    for entry in getattr(settings, "STATICFILES_DIRS", []):
        # Entries may be (prefix, path) tuples.
        if isinstance(entry, (list, tuple)):
            entry = entry[1]
        dirs.append(Path(entry).resolve())
    return dirs


@checks.register(checks.Tags.staticfiles)
def check_urls(app_configs=None, **kwargs):
    errors = []
    static_url = settings.STATIC_URL or ""
    media_url = settings.MEDIA_URL or ""

    if not static_url:
        errors.append(
            checks.Error("STATIC_URL is empty.", id="storage.E001")
        )
    if not media_url:
        errors.append(
            checks.Error("MEDIA_URL is empty.", id="storage.E001")
        )
    if static_url and media_url and static_url == media_url:
        errors.append(
            checks.Error(
                "STATIC_URL and MEDIA_URL must differ.",
                hint="Static files and uploads are served by different handlers.",
                id="storage.E002",
            )
        )
    return errors


@checks.register(checks.Tags.staticfiles)
def check_roots(app_configs=None, **kwargs):
    errors = []
    static_root = settings.STATIC_ROOT
    media_root = settings.MEDIA_ROOT

    for name, value in (("STATIC_ROOT", static_root), ("MEDIA_ROOT", media_root)):
        if not value or not Path(value).is_absolute():
            errors.append(
                checks.Error(
                    f"{name} must be an absolute path, got {value!r}.",
                    id="storage.E003",
                )
            )
    if errors:
        return errors

    static_root = Path(static_root).resolve()
    media_root = Path(media_root).resolve()

    if _is_within(static_root, media_root) or _is_within(media_root, static_root):
        errors.append(
            checks.Error(
                "STATIC_ROOT and MEDIA_ROOT must be separate directories.",
                hint="collectstatic would overwrite or publish user uploads.",
                id="storage.E004",
            )
        )

    for directory in _staticfiles_dirs():
        if directory == static_root:
            errors.append(
                checks.Error(
                    "STATIC_ROOT must not be listed in STATICFILES_DIRS.",
                    obj=str(directory),
                    id="storage.E004",
                )
            )
        elif not directory.is_dir():
            errors.append(
                checks.Warning(
                    f"STATICFILES_DIRS entry {str(directory)!r} does not exist.",
                    id="storage.W001",
                )
            )
    return errors


@checks.register(checks.Tags.staticfiles)
def check_whitenoise_position(app_configs=None, **kwargs):
    middleware = list(settings.MIDDLEWARE)
    if WHITENOISE_MIDDLEWARE not in middleware:
        return [
            checks.Error(
                "WhiteNoiseMiddleware is not installed.",
                id="storage.E005",
            )
        ]
    white_idx = middleware.index(WHITENOISE_MIDDLEWARE)
    expected = 0
    if SECURITY_MIDDLEWARE in middleware:
        expected = middleware.index(SECURITY_MIDDLEWARE) + 1
    if white_idx != expected:
        return [
            checks.Error(
                "WhiteNoiseMiddleware must directly follow SecurityMiddleware.",
                hint="Place it above every middleware except SecurityMiddleware.",
                id="storage.E005",
            )
        ]
    return []
