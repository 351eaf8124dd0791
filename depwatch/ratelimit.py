"""Sliding-window rate limiting per key.

Prevents excessive requests to upstream changelog sources during a polling
cycle: call allow (or wait) before each fetch.
"""

from __future__ import annotations

import threading
import time
from datetime import timedelta


class RateLimiter:
    """Allows at most max_calls per key within window seconds."""

    def __init__(self, max_calls: int, window: float | timedelta) -> None:
        if isinstance(window, timedelta):
            window = window.total_seconds()
        if max_calls < 1:
            raise ValueError(f"max_calls must be at least 1, got {max_calls}")
        if window <= 0:
            raise ValueError(f"window must be positive, got {window}s")
        self.max_calls = max_calls
        self.window = float(window)
        self._lock = threading.Lock()
        self._buckets: dict[str, list[float]] = {}

    def allow(self, key: str) -> bool:
        """Report whether a call for key is permitted now, recording it if so."""
        with self._lock:
            now = time.monotonic()
            cutoff = now - self.window
            valid = [t for t in self._buckets.get(key, ()) if t > cutoff]
            if len(valid) >= self.max_calls:
                self._buckets[key] = valid
                return False
            valid.append(now)
            self._buckets[key] = valid
            return True

    def wait(self, key: str, timeout: float | None = None) -> None:
        """Block until a call for key is permitted.

        Raises TimeoutError if timeout seconds pass first; None waits forever.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        step = self.window / self.max_calls
        while not self.allow(key):
            if deadline is None:
                time.sleep(step)
                continue
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise TimeoutError(f"rate limit wait for {key!r} timed out")
            time.sleep(min(step, remaining))

    def reset(self, key: str) -> None:
        """Clear all recorded calls for key."""
        with self._lock:
            self._buckets.pop(key, None)