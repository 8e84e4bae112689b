"""
Introspection helpers for the static/media configuration.

Used by the ``storageinfo`` command and the ``/api/v1/storage/`` endpoint.
Discovery goes through Django's own finders, the same code path
``collectstatic`` and ``findstatic`` use.
"""

from collections.abc import Iterator
from pathlib import Path

from django.conf import settings
from django.contrib.staticfiles import finders


def describe_storage() -> dict:
    storages = settings.STORAGES
    return {
        "static_url": settings.STATIC_URL,
        "static_root": str(settings.STATIC_ROOT),
        "media_url": settings.MEDIA_URL,
        "media_root": str(settings.MEDIA_ROOT),
        "staticfiles_storage": storages["staticfiles"]["BACKEND"],
        "default_storage": storages["default"]["BACKEND"],
        "serve_media": bool(getattr(settings, "SERVE_MEDIA", False)),
    }


def iter_static_sources() -> Iterator[tuple[str, str]]:
    """
    Yield ``(relative_path, source_path)`` for every static file the
    configured finders discover. When two sources provide the same relative
    path only the first one is yielded; it is the one collectstatic keeps.
    """
    seen = set()
    for finder in finders.get_finders():
        for path, storage in finder.list(["CVS", ".*", "*~"]):
            prefix = getattr(storage, "prefix", None)
            rel = f"{prefix}/{path}" if prefix else path
            rel = rel.replace("\\", "/")
            if rel in seen:
                continue
            seen.add(rel)
            yield rel, storage.path(path)


def iter_media_files() -> Iterator[tuple[str, int]]:
    """Yield ``(relative_path, size)`` for every file under MEDIA_ROOT."""
    root = Path(settings.MEDIA_ROOT)
    if not root.is_dir():
        return
    for path in sorted(root.rglob("*")):
        if path.is_file():
            yield path.relative_to(root).as_posix(), path.stat().st_size
