"""Adds computed metadata to changelog entries."""

from __future__ import annotations

from collections.abc import MutableSequence

from depwatch.entry import Entry


class Enricher:
    """Fills in the dependency name and, given a base URL, the release link."""

    def __init__(self, base_url: str = "") -> None:
        self.base_url = base_url.rstrip("/")

    def apply(self, dep: str, entries: MutableSequence[Entry]) -> MutableSequence[Entry]:
        """Enrich entries in place and return the same sequence.

        An empty dependency is set to dep; an empty link is built as
        "<base_url>/<version>" when a base URL is configured and the entry
        has a version.
        """
        for entry in entries:
            if not entry.dependency:
                entry.dependency = dep
            if self.base_url and not entry.link and entry.version:
                entry.link = f"{self.base_url}/{entry.version}"
        return entries