from src.common.checks import (
    SECURITY_MIDDLEWARE,
    WHITENOISE_MIDDLEWARE,
    check_roots,
    check_urls,
    check_whitenoise_position,
)


def _ids(messages):
    return [m.id for m in messages]


def test_project_settings_pass_every_check():
    assert check_urls() == []
    assert check_roots() == []
    assert check_whitenoise_position() == []


def test_identical_urls(settings):
    settings.MEDIA_URL = settings.STATIC_URL
    assert _ids(check_urls()) == ["storage.E002"]


def test_missing_media_url(settings):
    # "" would be turned into "/" by the script-prefix handling.
    settings.MEDIA_URL = None
    assert _ids(check_urls()) == ["storage.E001"]


def test_relative_static_root(settings):
    settings.STATIC_ROOT = "staticfiles"
    assert _ids(check_roots()) == ["storage.E003"]


def test_media_root_inside_static_root(settings, tmp_path):
    settings.STATIC_ROOT = tmp_path / "public"
    settings.MEDIA_ROOT = tmp_path / "public" / "media"
    assert "storage.E004" in _ids(check_roots())


def test_static_root_listed_as_source(settings, tmp_path):
    settings.STATIC_ROOT = tmp_path / "collected"
    (tmp_path / "collected").mkdir()
    settings.STATICFILES_DIRS = [tmp_path / "collected"]
    assert _ids(check_roots()) == ["storage.E004"]


def test_missing_source_directory_is_a_warning(settings, tmp_path):
    settings.STATICFILES_DIRS = [("vendor", tmp_path / "does-not-exist")]
    messages = check_roots()
    assert _ids(messages) == ["storage.W001"]
    assert not messages[0].is_serious()


def test_whitenoise_missing(settings):
    settings.MIDDLEWARE = [m for m in settings.MIDDLEWARE if m != WHITENOISE_MIDDLEWARE]
    assert _ids(check_whitenoise_position()) == ["storage.E005"]


def test_whitenoise_after_session_middleware(settings):
    mw = [m for m in settings.MIDDLEWARE if m != WHITENOISE_MIDDLEWARE]
    mw.insert(mw.index(SECURITY_MIDDLEWARE) + 2, WHITENOISE_MIDDLEWARE)
    settings.MIDDLEWARE = mw
    assert _ids(check_whitenoise_position()) == ["storage.E005"]


def test_whitenoise_first_without_security_middleware(settings):
    settings.MIDDLEWARE = [WHITENOISE_MIDDLEWARE] + [
        m for m in settings.MIDDLEWARE
        if m not in (WHITENOISE_MIDDLEWARE, SECURITY_MIDDLEWARE)
    ]
    assert check_whitenoise_position() == []
