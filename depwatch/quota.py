"""Caps the number of entries accepted per dependency in a rolling window.

Useful when one dependency publishes many releases in a short period and
digests should not be flooded. Safe for concurrent use.
"""

from __future__ import annotations

import threading
import time
from collections import defaultdict, deque
from collections.abc import Iterable
from datetime import timedelta

from depwatch.entry import Entry


class Quota:
    """Allows at most max_entries per dependency within window seconds.

    Entries beyond the cap are silently dropped.
    """

    def __init__(self, max_entries: int, window: float | timedelta) -> None:
        if isinstance(window, timedelta):
            window = window.total_seconds()
        if max_entries < 1:
            raise ValueError("changelog: quota max must be at least 1")
        if window <= 0:
            raise ValueError("changelog: quota window must be positive")
        self.max_entries = max_entries
        self.window = float(window)
        self._lock = threading.Lock()
        self._counts: defaultdict[str, deque[float]] = defaultdict(deque)

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return the entries that fit within each dependency's quota."""
        now = time.monotonic()
        cutoff = now - self.window
        out: list[Entry] = []
        with self._lock:
            for entry in entries:
                stamps = self._counts[entry.dependency]
                while stamps and stamps[0] < cutoff:
                    stamps.popleft()
                if len(stamps) < self.max_entries:
                    stamps.append(now)
                    out.append(entry)
        return out

    def reset(self) -> None:
        """Clear all recorded counts."""
        with self._lock:
            self._counts = defaultdict(deque)