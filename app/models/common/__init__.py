"""Common models - base classes and cache values."""

from app.models.common.base import BaseEntity
from app.models.common.cache import CacheEntry, CacheKey

__all__ = [
    "BaseEntity",
    "CacheEntry",
    "CacheKey",
]
