"""Attaches static key-value metadata to changelog entries.

Annotations are stored in each entry's tags as "key:value" strings so that
downstream stages can filter on them like any other tag.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace

from depwatch.entry import Entry


class Annotator:
    """Appends "key:value" tags to every entry it processes."""

    def __init__(self, annotations: Mapping[str, str] | None = None) -> None:
        self._annotations = {k: v for k, v in (annotations or {}).items() if k}

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return copies of entries carrying every annotation tag once."""
        items = list(entries)
        if not self._annotations:
            return items
        wanted = [f"{k}:{v}" for k, v in self._annotations.items()]
        out = []
        for entry in items:
            tags = list(entry.tags)
            tags.extend(t for t in wanted if t not in entry.tags)
            out.append(replace(entry, tags=tags))
        return out