"""Isolates entries that are new in the current snapshot.

Used to avoid re-reporting releases that were already seen in a previous
poll. Entries are matched by dependency name and version.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from depwatch.entry import Entry


@dataclass(frozen=True)
class DiffSummary:
    """How many entries were added and the span of their dates."""

    added: int = 0
    oldest: datetime | None = None
    newest: datetime | None = None


class Diff:
    """Compares two snapshots of entries."""

    def apply(self, previous: Iterable[Entry] | None, current: Iterable[Entry]) -> list[Entry]:
        """Return entries of current whose (dependency, version) is not in previous."""
        seen = {(e.dependency, e.version) for e in previous or ()}
        return [e for e in current if (e.dependency, e.version) not in seen]

    def summarise(self, entries: Iterable[Entry] | None) -> DiffSummary:
        """Count entries and find the oldest and newest dates among them.

        Entries without a date never become the oldest; an undated first entry
        leaves the oldest date unset.
        """
        items = list(entries or ())
        if not items:
            return DiffSummary()
        oldest = newest = items[0].date
        for entry in items[1:]:
            date = entry.date
            if date is None:
                continue
            if oldest is not None and date < oldest:
                oldest = date
            if newest is None or date > newest:
                newest = date
        return DiffSummary(added=len(items), oldest=oldest, newest=newest)