"""Combines several lists of entries into one deduplicated list."""

from __future__ import annotations

from collections.abc import Iterable

from depwatch.dedupe import Deduplicator
from depwatch.entry import Entry


class Merger:
    """Merges sources, keeping each dependency@version once in first-seen order.

    The seen set persists across calls on the same instance.
    """

    def __init__(self) -> None:
        self._dedup = Deduplicator()

    def merge(self, *sources: Iterable[Entry]) -> list[Entry]:
        """Return the entries of all sources, left to right, without duplicates."""
        return [
            kept
            for source in sources
            for entry in source
            for kept in self._dedup.apply(entry.dependency, [entry])
        ]


def merge_all(*sources: Iterable[Entry]) -> list[Entry]:
    """Merge sources with a fresh Merger, sharing no state between calls."""
    return Merger().merge(*sources)