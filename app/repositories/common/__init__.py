"""Common repositories."""

from app.repositories.common.cache import TransientCache

__all__ = [
    "TransientCache",
]
