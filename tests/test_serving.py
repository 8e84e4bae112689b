from pathlib import Path

from django.test import RequestFactory

from src.common.serving import media_urlpatterns


def test_media_not_served_outside_development(settings):
    settings.DEBUG = False
    settings.SERVE_MEDIA = False
    assert media_urlpatterns() == []


def test_media_served_in_debug(settings):
    settings.DEBUG = True
    patterns = media_urlpatterns()
    assert len(patterns) == 1
    assert patterns[0].resolve("media/avatars/photo.png").kwargs["path"] == "avatars/photo.png"


def test_serve_media_flag_serves_uploads(settings):
    settings.DEBUG = False
    settings.SERVE_MEDIA = True
    upload = Path(settings.MEDIA_ROOT) / "avatars" / "note.txt"
    upload.parent.mkdir(parents=True)
    upload.write_bytes(b"uploaded")

    (pattern,) = media_urlpatterns()
    match = pattern.resolve("media/avatars/note.txt")
    request = RequestFactory().get("/media/avatars/note.txt")
    response = match.func(request, *match.args, **match.kwargs)

    assert response.status_code == 200
    assert b"".join(response.streaming_content) == b"uploaded"


def test_static_prefix_is_not_a_media_route(settings):
    settings.DEBUG = True
    (pattern,) = media_urlpatterns()
    assert pattern.resolve("static/css/site.css") is None
