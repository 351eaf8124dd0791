"""Removes entries already reported for a dependency and version."""

from __future__ import annotations

from collections.abc import Iterable

from depwatch.entry import Entry


class Deduplicator:
    """Reports each dependency@version once across successive calls."""

    def __init__(self) -> None:
        self._seen: set[str] = set()

    def apply(self, dep: str, entries: Iterable[Entry]) -> list[Entry]:
        """Return entries whose dep@version has not been seen, recording them."""
        unique = []
        for entry in entries:
            key = f"{dep}@{entry.version}"
            if key in self._seen:
                continue
            self._seen.add(key)
            unique.append(entry)
        return unique

    def reset(self) -> None:
        """Forget every recorded key."""
        self._seen = set()

    def __len__(self) -> int:
        return len(self._seen)