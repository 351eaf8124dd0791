"""Drops releases seen in more than one upstream feed.

Entries are keyed on dependency and version, so the same release fetched
from an HTTP changelog and from a releases feed is emitted only once.
"""

from __future__ import annotations

from collections.abc import Iterable

from depwatch.entry import Entry


class CrossSourceDeduplicator:
    """Keeps the first occurrence of each (dependency, version) across calls."""

    def __init__(self) -> None:
        self._seen: set[tuple[str, str]] = set()

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return entries whose dependency and version were not seen before."""
        out = []
        for entry in entries:
            key = (entry.dependency, entry.version)
            if key in self._seen:
                continue
            self._seen.add(key)
            out.append(entry)
        return out

    def reset(self) -> None:
        """Forget every recorded pair so the instance can be reused."""
        self._seen = set()