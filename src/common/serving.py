"""
Development serving of uploaded media files.

Media files are never handled by WhiteNoise (it only knows STATIC_ROOT as it
was at startup). In production a reverse proxy or object storage serves
MEDIA_URL; here Django serves it only when explicitly allowed.
"""

import re

from django.conf import settings
from django.conf.urls.static import static
from django.urls import re_path
from django.views.static import serve


def media_urlpatterns() -> list:
    """URL patterns serving MEDIA_URL from MEDIA_ROOT, or [] when disabled."""
    if settings.DEBUG:
        return static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

    # static() is a no-op without DEBUG, so SERVE_MEDIA wires serve() itself.
    if getattr(settings, "SERVE_MEDIA", False):
        prefix = settings.MEDIA_URL.lstrip("/")
        return [
            re_path(
                r"^%s(?P<path>.*)$" % re.escape(prefix),
                serve,
                {"document_root": settings.MEDIA_ROOT},
            ),
        ]
    return []
