from pathlib import Path

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse

from src.apps.profiles import selectors, services
from src.apps.profiles.forms import UploadForm
from src.apps.profiles.models import Profile
from src.apps.profiles.views import INVALID_FORM_MESSAGE
from src.common.exceptions import ValidationError

pytestmark = pytest.mark.django_db


# ── Services ─────────────────────────────────────────────────────────────


def test_create_profile_stores_file_under_media_root(settings, png_upload):
    profile = services.create_profile(file=png_upload())

    assert profile.avatar.name == "avatars/photo.png"
    assert (Path(settings.MEDIA_ROOT) / "avatars" / "photo.png").is_file()
    assert profile.url == "/media/avatars/photo.png"
    assert profile.filename == "photo.png"
    assert profile.size == profile.avatar.size


def test_name_collision_gets_unique_suffix(png_upload):
    first = services.create_profile(file=png_upload())
    second = services.create_profile(file=png_upload())

    assert first.avatar.name == "avatars/photo.png"
    assert second.avatar.name != first.avatar.name
    assert second.avatar.name.startswith("avatars/photo_")
    assert second.avatar.name.endswith(".png")
    assert Profile.objects.count() == 2


def test_rejects_disallowed_extension():
    upload = SimpleUploadedFile("run.exe", b"MZ\x90\x00", content_type="application/octet-stream")
    with pytest.raises(ValidationError, match="not allowed"):
        services.create_profile(file=upload)
    assert Profile.objects.count() == 0


def test_rejects_oversized_upload(settings, png_upload):
    settings.MAX_UPLOAD_SIZE = 10
    with pytest.raises(ValidationError, match="too large"):
        services.create_profile(file=png_upload())


def test_rejects_empty_upload(png_upload):
    with pytest.raises(ValidationError, match="empty"):
        services.create_profile(file=png_upload(content=b""))


def test_delete_profile_removes_file_and_row(settings, png_upload):
    profile = services.create_profile(file=png_upload())
    stored = Path(settings.MEDIA_ROOT) / profile.avatar.name

    services.delete_profile(profile=profile)

    assert not stored.exists()
    assert Profile.objects.count() == 0


def test_delete_profile_with_missing_file(settings, png_upload):
    profile = services.create_profile(file=png_upload())
    (Path(settings.MEDIA_ROOT) / profile.avatar.name).unlink()
    assert profile.size is None

    services.delete_profile(profile=profile)

    assert Profile.objects.count() == 0


# ── Selectors ────────────────────────────────────────────────────────────


def test_list_profiles_newest_first(png_upload):
    older = services.create_profile(file=png_upload("a.png"))
    newer = services.create_profile(file=png_upload("b.png"))
    assert list(selectors.list_profiles()) == [newer, older]


def test_get_profile_by_id_unknown():
    import uuid

    assert selectors.get_profile_by_id(profile_id=uuid.uuid4()) is None


# ── Form ─────────────────────────────────────────────────────────────────


def test_upload_form_requires_a_file():
    form = UploadForm(data={}, files={})
    assert not form.is_valid()
    assert "avatar" in form.errors


# ── Views ────────────────────────────────────────────────────────────────


def test_upload_page_renders_form(client):
    response = client.get(reverse("profiles:upload"))
    assert response.status_code == 200
    assert b'enctype="multipart/form-data"' in response.content
    assert b"/static/profiles/css/profiles.css" in response.content


def test_valid_upload_redirects_to_list(client, png_upload):
    response = client.post(reverse("profiles:upload"), {"avatar": png_upload()})

    assert response.status_code == 302
    assert response["Location"] == reverse("profiles:list")
    assert Profile.objects.count() == 1


def test_invalid_upload_returns_plain_text(client):
    response = client.post(reverse("profiles:upload"), {})

    assert response.status_code == 400
    assert response["Content-Type"].startswith("text/plain")
    assert response.content.decode() == INVALID_FORM_MESSAGE
    assert Profile.objects.count() == 0


def test_rejected_extension_returns_plain_text(client):
    upload = SimpleUploadedFile("script.sh", b"echo hi", content_type="text/x-sh")
    response = client.post(reverse("profiles:upload"), {"avatar": upload})

    assert response.status_code == 400
    assert response["Content-Type"].startswith("text/plain")
    assert "not allowed" in response.content.decode()


def test_upload_view_rejects_other_methods(client):
    response = client.put(reverse("profiles:upload"))
    assert response.status_code == 405


def test_list_page_links_to_media_urls(client, png_upload):
    services.create_profile(file=png_upload())
    response = client.get(reverse("profiles:list"))

    assert response.status_code == 200
    assert b'href="/media/avatars/photo.png"' in response.content


def test_list_page_empty(client):
    response = client.get(reverse("profiles:list"))
    assert b"Nothing uploaded yet." in response.content


def test_rejects_svg_upload():
    upload = SimpleUploadedFile(
        "x.svg",
        b'<svg xmlns="http://www.w3.org/2000/svg"><script>alert(1)</script></svg>',
        content_type="image/svg+xml",
    )
    with pytest.raises(ValidationError, match="'.svg' not allowed"):
        services.create_profile(file=upload)
    assert Profile.objects.count() == 0


def test_svg_upload_through_form_is_refused(client, settings):
    upload = SimpleUploadedFile("logo.svg", b"<svg></svg>", content_type="image/svg+xml")
    response = client.post(reverse("profiles:upload"), {"avatar": upload})

    assert response.status_code == 400
    assert "not allowed" in response.content.decode()
    assert not (Path(settings.MEDIA_ROOT) / "avatars" / "logo.svg").exists()
