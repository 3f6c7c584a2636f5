"""Expiring in-memory cache for lookup results."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Cache(Protocol):
    """Cache interface for simple key-value data."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a value for ttl_seconds."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class TtlCache(Cache):
    """Process-local cache; entries vanish on restart."""

    clock: Callable[[], datetime] = _utcnow
    _entries: dict[str, tuple[object, datetime]] = field(
        init=False, default_factory=dict
    )

    def get(self, key: str) -> object | None:
        cached = self._entries.get(key)
        if cached is None:
            return None
        value, expires_at = cached
        if self.clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        self._entries[key] = (value, self.clock() + timedelta(seconds=ttl_seconds))
