"""API errors and validation helpers."""

from app.errors import MetricsError, UnsupportedMetric

from .schemas import ErrorResponse


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def validate_site_id(site_id: int) -> None:
    """Validate site_id is a positive integer."""
    if isinstance(site_id, bool) or not isinstance(site_id, int) or site_id < 1:
        raise ValidationError(f"Invalid site_id: {site_id!r}. Must be a positive integer")


def to_error_response(exc: MetricsError) -> ErrorResponse:
    """Typed error payload for the request router."""
    return ErrorResponse(
        kind=exc.kind,
        message=exc.message,
        faq_url=exc.faq_url if isinstance(exc, UnsupportedMetric) else None,
    )
