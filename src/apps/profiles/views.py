"""
Profile views: the HTML side of media uploads.

Failures are answered in plain text; there is no error page template.
"""

import structlog
from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from src.apps.profiles import selectors as profile_selectors
from src.apps.profiles import services as profile_services
from src.apps.profiles.forms import UploadForm
from src.common.exceptions import ValidationError

logger = structlog.get_logger(__name__)

INVALID_FORM_MESSAGE = "Upload failed: the form is not valid."


def _plain_text_failure(message: str) -> HttpResponse:
    return HttpResponse(message, content_type="text/plain; charset=utf-8", status=400)


@require_http_methods(["GET", "POST"])
def upload_view(request):
    if request.method == "GET":
        return render(request, "profiles/upload.html", {"form": UploadForm()})

    form = UploadForm(request.POST, request.FILES)
    if not form.is_valid():
        logger.info("upload_rejected", errors=form.errors.get_json_data())
        return _plain_text_failure(INVALID_FORM_MESSAGE)

    try:
        profile_services.create_profile(file=form.cleaned_data["avatar"])
    except ValidationError as exc:
        return _plain_text_failure(f"Upload failed: {exc.message}")

    return redirect("profiles:list")


def profile_list_view(request):
    profiles = profile_selectors.list_profiles()
    return render(request, "profiles/list.html", {"profiles": profiles})
