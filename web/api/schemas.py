"""Shared API response schemas."""

from pydantic import BaseModel

from app.errors import ErrorKind


class ErrorResponse(BaseModel):
    """Failed request."""

    kind: ErrorKind
    message: str
    faq_url: str | None = None
