"""Promotes entries of priority dependencies to the front of a list."""

from __future__ import annotations

from collections.abc import Iterable

from depwatch.entry import Entry


class Booster:
    """Moves entries of the given dependencies first, keeping relative order."""

    def __init__(self, *deps: str) -> None:
        self._priority = frozenset(d for d in deps if d)

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return a new list with priority entries before all others."""
        prioritised: list[Entry] = []
        rest: list[Entry] = []
        for entry in entries:
            (prioritised if entry.dependency in self._priority else rest).append(entry)
        return prioritised + rest