"""
Logging configuration with structlog + django-structlog.

Everything goes to one console handler through structlog's
ProcessorFormatter, so stdlib records from Django (runserver's static
requests, collectstatic, whitenoise warnings) and our own events
(profile_created, storageinfo_completed, ...) share a single format:

    development   colored console
    test          key=value lines, event first
    production    one JSON object per line
"""

import structlog

from src.config.env import env


if env.is_production:
    renderer = structlog.processors.JSONRenderer()
elif env.is_test:
    renderer = structlog.processors.KeyValueRenderer(key_order=["event", "logger"])
else:
    renderer = structlog.dev.ConsoleRenderer(colors=True)


structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


def _console(level: str) -> dict:
    return {"handlers": ["console"], "level": level, "propagate": False}


# Our own modules: DEBUG while developing, INFO otherwise.
APP_LOG_LEVEL = "DEBUG" if env.is_development else "INFO"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "structlog": {
            "()": structlog.stdlib.ProcessorFormatter,
            # Records from plain stdlib loggers get the same metadata.
            "foreign_pre_chain": [
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
            "processors": [
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "structlog",
        },
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "django": _console("INFO"),
        # runserver logs every /static/ and /media/ hit here.
        "django.server": _console("INFO"),
        "django.db.backends": _console("WARNING"),
        "whitenoise": _console("WARNING"),
        "django_structlog": _console("INFO"),
        "src": _console(APP_LOG_LEVEL),
    },
}

DJANGO_STRUCTLOG_COMMAND_LOGGING_ENABLED = True
