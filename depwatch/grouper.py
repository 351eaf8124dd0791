"""Partitions entries into named groups by their first label.

Entries without labels go to the fallback group. Groups named in the
preferred order come first; the rest follow in the order first seen.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from depwatch.entry import Entry

DEFAULT_FALLBACK = "other"


@dataclass
class Group:
    """A label and the entries assigned to it."""

    label: str
    entries: list[Entry] = field(default_factory=list)


class Grouper:
    """Groups entries by first label, with a fallback and a preferred order."""

    def __init__(self, fallback: str = DEFAULT_FALLBACK, order: Iterable[str] = ()) -> None:
        self.fallback = fallback or DEFAULT_FALLBACK
        self.order = tuple(order)

    def apply(self, entries: Iterable[Entry]) -> list[Group]:
        """Return the groups, ordered labels first."""
        buckets: dict[str, list[Entry]] = {}
        for entry in entries:
            key = entry.labels[0] if entry.labels else self.fallback
            buckets.setdefault(key, []).append(entry)

        ordered = [label for label in dict.fromkeys(self.order) if label in buckets]
        placed = set(ordered)
        groups = [Group(label, buckets[label]) for label in ordered]
        groups.extend(Group(label, items) for label, items in buckets.items() if label not in placed)
        return groups