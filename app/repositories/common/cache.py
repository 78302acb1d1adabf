"""Transient cache - memoized values for one request or process scope."""

from collections.abc import Callable

from loguru import logger

from app.models.common.cache import CacheEntry, CacheKey


class TransientCache:
    """In-memory key/value store that lives as long as its owner.

    One instance per execution scope; it is never shared across requests,
    so it takes no locks. Concurrent misses on one key may both compute,
    the last write wins.
    """

    def __init__(self):
        self._entries: dict[CacheKey, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def contains(self, key: CacheKey) -> bool:
        return key in self._entries

    def fetch(self, key: CacheKey) -> bool | int | float | None:
        """Cached value, or None on a miss."""
        entry = self._entries.get(key)
        return entry.value if entry is not None else None

    def save(self, key: CacheKey, value: bool | int | float) -> None:
        self._entries[key] = CacheEntry(key=key, value=value)

    def delete(self, key: CacheKey) -> None:
        self._entries.pop(key, None)

    def flush_all(self) -> None:
        """Drop every entry (explicit end of scope)."""
        self._entries.clear()
        logger.debug("Transient cache flushed")

    def get_or_compute(self, key: CacheKey, compute_fn: Callable[[], bool | int | float]) -> bool | int | float:
        """Return the cached value, computing and saving it on the first miss."""
        if not self.contains(key):
            self.save(key, compute_fn())
            logger.debug("Cache miss: {}", key)
        else:
            logger.debug("Cache hit: {}", key)
        return self.fetch(key)
