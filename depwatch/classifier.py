"""Assigns a human-readable category to each entry from its labels.

Built-in mappings cover the common changelog labels; custom mappings can be
added and the fallback category (default "Other") can be overridden.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace

from depwatch.entry import Entry

DEFAULT_MAPPINGS: dict[str, str] = {
    "security": "Security",
    "feature": "Features",
    "bugfix": "Bug Fixes",
    "breaking": "Breaking Changes",
    "docs": "Documentation",
}


class Classifier:
    """Sets entry.category from the first label with a known mapping."""

    def __init__(self, mappings: Mapping[str, str] | None = None, fallback: str = "Other") -> None:
        self._mappings = {**DEFAULT_MAPPINGS, **(mappings or {})}
        self.fallback = fallback

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return copies of entries with their category set."""
        out = []
        for entry in entries:
            category = next(
                (self._mappings[lbl] for lbl in entry.labels if lbl in self._mappings),
                self.fallback,
            )
            out.append(replace(entry, category=category))
        return out