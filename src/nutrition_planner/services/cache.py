"""Simple TTL cache for catalog snapshots."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Cache(Protocol):
    """Cache interface for simple key-value data."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a cached value with a TTL in seconds."""

    def invalidate(self, prefix: str = "") -> None:
        """Drop cached values whose key starts with ``prefix``."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class _CacheEntry:
    value: object
    expires_at: datetime


class InMemoryCache(Cache):
    """Process-local cache; each worker keeps its own copy."""

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._entries: dict[str, _CacheEntry] = {}
        self._clock = clock

    def get(self, key: str) -> object | None:
        """Return a cached value if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a value; a non-positive TTL stores nothing."""
        if ttl_seconds <= 0:
            return
        expires_at = self._clock() + timedelta(seconds=ttl_seconds)
        self._entries[key] = _CacheEntry(value=value, expires_at=expires_at)

    def invalidate(self, prefix: str = "") -> None:
        """Drop cached values whose key starts with ``prefix``."""
        for key in [key for key in self._entries if key.startswith(prefix)]:
            del self._entries[key]
