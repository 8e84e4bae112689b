"""
Environment configuration via pydantic_settings.

This is the SINGLE SOURCE OF TRUTH for all environment variables.
Django settings files import from here — they never read os.environ directly.

Usage:
    from src.config.env import env
    env.SECRET_KEY
    env.static_root

Environment switching:
    - DJANGO_ENV is read ONCE here to determine the environment. When it is
      unset, an already exported DJANGO_SETTINGS_MODULE (pytest-django does
      this) picks the matching environment instead.
    - DJANGO_SETTINGS_MODULE is set accordingly in manage.py / wsgi.py / asgi.py.
    - The .env file is loaded automatically (defaults to .env.backend).
"""

from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parent.parent.parent  # project root (above src/)

SETTINGS_MODULES = {
    "production": "src.config.django.prod",
    "test": "src.config.django.test",
    "development": "src.config.django.base",
}


class AppSettings(BaseSettings):
    """
    All environment variables in one place.
    Fields have sensible dev defaults; production overrides via .env.backend.
    """

    model_config = SettingsConfigDict(
        env_file=".env.backend",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore env vars not declared here
        case_sensitive=False,
    )

    # ── Environment switch ──────────────────────────────────────────────
    # "development" | "production" | "test"
    DJANGO_ENV: str = Field(default="development")
    # Set by pytest-django, manage.py, wsgi.py. When DJANGO_ENV itself is not
    # given, a known settings module decides the environment.
    DJANGO_SETTINGS_MODULE: str = ""

    # ── Django core ─────────────────────────────────────────────────────
    SECRET_KEY: str = "insecure-dev-key-change-in-production"
    DEBUG: bool = True
    ALLOWED_HOSTS: list[str] = ["localhost", "127.0.0.1"]

    # ── Database ────────────────────────────────────────────────────────
    # "sqlite" | "postgresql"
    DB_ENGINE: str = "sqlite"
    SQLITE_PATH: str = "db.sqlite3"
    POSTGRES_USER: str = "staticmedia"
    POSTGRES_PASSWORD: str = "changeme_postgres"
    POSTGRES_DB: str = "staticmedia"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_ENGINE == "sqlite":
            return f"sqlite:///{self.sqlite_path}"
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def sqlite_path(self) -> Path:
        return _resolve(self.SQLITE_PATH)

    # ── Static & media ──────────────────────────────────────────────────
    # Empty means "use the default directory next to src/".
    STATIC_ROOT: str = ""
    MEDIA_ROOT: str = ""
    SERVE_MEDIA: bool = False
    MAX_UPLOAD_SIZE_MB: int = 5

    @property
    def static_root(self) -> Path:
        return _resolve(self.STATIC_ROOT or "staticfiles")

    @property
    def media_root(self) -> Path:
        return _resolve(self.MEDIA_ROOT or "mediafiles")

    @property
    def max_upload_size(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    # ── Gunicorn ────────────────────────────────────────────────────────
    GUNICORN_WORKERS: int = 2
    GUNICORN_BIND: str = "0.0.0.0:8000"

    @field_validator("DJANGO_ENV")
    @classmethod
    def validate_env(cls, v: str) -> str:
        allowed = set(SETTINGS_MODULES)
        if v not in allowed:
            msg = f"DJANGO_ENV must be one of {allowed}, got '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("DB_ENGINE")
    @classmethod
    def validate_db_engine(cls, v: str) -> str:
        allowed = {"sqlite", "postgresql"}
        if v not in allowed:
            msg = f"DB_ENGINE must be one of {allowed}, got '{v}'"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def env_from_settings_module(self) -> "AppSettings":
        if "DJANGO_ENV" in self.model_fields_set:
            return self
        for django_env, module in SETTINGS_MODULES.items():
            if module == self.DJANGO_SETTINGS_MODULE:
                self.DJANGO_ENV = django_env
                break
        return self

    @property
    def is_production(self) -> bool:
        return self.DJANGO_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.DJANGO_ENV == "development"

    @property
    def is_test(self) -> bool:
        return self.DJANGO_ENV == "test"

    @property
    def settings_module(self) -> str:
        return SETTINGS_MODULES.get(self.DJANGO_ENV, SETTINGS_MODULES["development"])


def _resolve(path: str) -> Path:
    """Relative paths are anchored at BASE_DIR so the roots are always absolute."""
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = BASE_DIR / p
    return p.resolve()


# ── Singleton ───────────────────────────────────────────────────────────
# Instantiated once at import time. All Django settings files use this.
env = AppSettings()
