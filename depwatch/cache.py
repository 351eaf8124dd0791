"""In-memory TTL cache for fetched changelog content."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import timedelta

DEFAULT_TTL = 600.0


@dataclass(frozen=True)
class CacheEntry:
    """Cached content and the monotonic time it was stored."""

    content: str
    fetched_at: float


class Cache:
    """Thread-safe cache whose entries expire after ttl seconds."""

    def __init__(self, ttl: float | timedelta = DEFAULT_TTL) -> None:
        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        self.ttl = float(ttl) if ttl > 0 else DEFAULT_TTL
        self._lock = threading.Lock()
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> str | None:
        """Return cached content for key, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None or time.monotonic() - entry.fetched_at > self.ttl:
            return None
        return entry.content

    def set(self, key: str, content: str) -> None:
        """Store content for key, stamped with the current time."""
        with self._lock:
            self._entries[key] = CacheEntry(content=content, fetched_at=time.monotonic())

    def invalidate(self, key: str) -> None:
        """Remove key from the cache if present."""
        with self._lock:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)