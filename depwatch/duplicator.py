"""Removes near-duplicate entries across sources.

Dependency names and versions are compared case-insensitively; the first
occurrence is kept.
"""

from __future__ import annotations

from collections.abc import Iterable

from depwatch.entry import Entry


class CrossDeduplicator:
    """Keeps the first entry of each case-insensitive dependency@version."""

    def __init__(self) -> None:
        self._seen: set[str] = set()

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return entries not seen in this or a previous call."""
        out = []
        for entry in entries:
            key = f"{entry.dependency.lower()}@{entry.version.lower()}"
            if key in self._seen:
                continue
            self._seen.add(key)
            out.append(entry)
        return out

    def reset(self) -> None:
        """Forget every recorded key."""
        self._seen = set()