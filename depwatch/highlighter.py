"""Flags entries whose body or version mentions a configured keyword.

Matching entries get meta[HIGHLIGHT_KEY] set to "true", so renderers can
surface them without the content being changed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from depwatch.entry import Entry

HIGHLIGHT_KEY = "highlight"


class Highlighter:
    """Marks entries containing any keyword, case-insensitively.

    With no keywords nothing is highlighted.
    """

    def __init__(self, *keywords: str) -> None:
        self.keywords = tuple(k.lower() for k in keywords)

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return entries, with copies of matching ones flagged in meta."""
        if not self.keywords:
            return list(entries)
        out = []
        for entry in entries:
            haystack = f"{entry.body} {entry.version}".lower()
            if any(kw in haystack for kw in self.keywords):
                entry = replace(entry, meta={**entry.meta, HIGHLIGHT_KEY: "true"})
            out.append(entry)
        return out