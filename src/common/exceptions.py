"""
Application exceptions and django-ninja error handlers.

Services raise these exceptions; the API layer catches them
via ninja's exception handlers and returns proper HTTP responses.
HTML views catch them themselves and answer in plain text.
"""

import structlog
from django.http import HttpRequest, HttpResponse
from ninja import NinjaAPI

logger = structlog.get_logger(__name__)


class ApplicationError(Exception):
    """Base for all business-logic errors."""

    status_code = 400

    def __init__(self, message: str, extra: dict | None = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}


class NotFoundError(ApplicationError):
    """Resource not found."""
    status_code = 404


class ValidationError(ApplicationError):
    """Uploaded content or input failed validation."""
    status_code = 400


def configure_exception_handlers(api: NinjaAPI) -> None:
    """Register custom exception handlers on a NinjaAPI instance."""

    @api.exception_handler(ApplicationError)
    def handle_application_error(request: HttpRequest, exc: ApplicationError) -> HttpResponse:
        logger.info(
            "application_error",
            error=type(exc).__name__,
            message=exc.message,
            path=request.path,
        )
        return api.create_response(
            request,
            {"detail": exc.message, **exc.extra},
            status=exc.status_code,
        )
