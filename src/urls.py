"""
Root URL configuration.

- /                → Home page (static files in use)
- /profiles/       → Uploaded media files (list + upload form)
- /api/v1/         → NinjaExtraAPI (profiles, storage info)
- /admin/          → Django admin
- MEDIA_URL        → Uploaded files, served by Django only in development

Static files are not routed here: runserver serves them while DEBUG is on,
and WhiteNoise serves them in production.
"""

from django.contrib import admin
from django.urls import include, path
from ninja_extra import NinjaExtraAPI

from src.apps.profiles.apis import router as profiles_router
from src.apps.profiles.apis import storage_router
from src.common.exceptions import configure_exception_handlers
from src.common.serving import media_urlpatterns

# ── API ─────────────────────────────────────────────────────────────────

api = NinjaExtraAPI(
    title="Static & Media API",
    version="1.0.0",
    description="Uploads (media files) and static/media configuration",
    urls_namespace="api",
)

configure_exception_handlers(api)

api.add_router("/", profiles_router)
api.add_router("/", storage_router)

# ── URL patterns ────────────────────────────────────────────────────────

urlpatterns = [
    path("api/v1/", api.urls),
    path("admin/", admin.site.urls),
    path("profiles/", include("src.apps.profiles.urls")),
    path("", include("src.apps.pages.urls")),
]

urlpatterns += media_urlpatterns()
