"""Transient cache key and entry."""

from dataclasses import dataclass

from app.models.common.base import BaseEntity


@dataclass(frozen=True)
class CacheKey(BaseEntity):
    """Identity of a memoized computation within one cache scope.

    Built from the fields of the query, never from concatenated strings, so
    two keys are equal exactly when every field is equal.
    """

    operation: str
    site_id: int
    period: str
    date: str
    segment_hash: str = ""

    def __str__(self) -> str:
        return f"{self.operation}.{self.site_id}.{self.period}.{self.date}.{self.segment_hash}"


@dataclass(frozen=True)
class CacheEntry(BaseEntity):
    """Value stored under a key."""

    key: CacheKey
    value: bool | int | float
