"""Bounded in-memory caches with expiry."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Cache(Protocol):
    """Cache interface for simple key-value data."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int | None = None) -> None:
        """Store a cached value, optionally overriding the default TTL."""

    def clear(self) -> None:
        """Drop every entry."""


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class _CacheEntry:
    value: object
    expires_at: datetime | None


@dataclass
class BoundedTTLCache(Cache):
    """Insertion-ordered cache that evicts the oldest entry when full.

    A ``ttl_seconds`` of ``None`` keeps entries until they are evicted by size.
    Re-setting an existing key moves it to the newest position.
    """

    max_entries: int = 1000
    ttl_seconds: int | None = 3600
    clock: Callable[[], datetime] = utc_now
    _entries: dict[str, _CacheEntry] = field(default_factory=dict, init=False, repr=False)

    def get(self, key: str) -> object | None:
        """Return a cached value if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at is not None and self.clock() >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: str, value: object, ttl_seconds: int | None = None) -> None:
        """Store a value, evicting the oldest entries beyond ``max_entries``."""
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        expires_at = None if ttl is None else self.clock() + timedelta(seconds=ttl)
        self._entries.pop(key, None)
        self._entries[key] = _CacheEntry(value=value, expires_at=expires_at)
        while len(self._entries) > max(1, self.max_entries):
            oldest = next(iter(self._entries))
            del self._entries[oldest]

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None
