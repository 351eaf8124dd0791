"""Selects changelog entries by date, count and previously seen versions."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from datetime import datetime

from depwatch.entry import Entry


class Filter:
    """Keeps entries newer than since, up to limit entries (0 means no limit)."""

    def __init__(self, since: datetime | None = None, limit: int = 0) -> None:
        self.since = since
        self.limit = limit

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return matching entries; entries are assumed to be newest first.

        When since is set, undated entries are dropped.
        """
        result: list[Entry] = []
        for entry in entries:
            if self.since is not None and (entry.date is None or entry.date <= self.since):
                continue
            result.append(entry)
            if 0 < self.limit <= len(result):
                break
        return result


def filter_new(
    entries: Iterable[Entry], seen: Collection[str] | Mapping[str, bool]
) -> list[Entry]:
    """Return entries whose version has not been delivered yet.

    seen is a collection of versions, or a mapping of version to a flag.
    """
    if isinstance(seen, Mapping):
        return [e for e in entries if not seen.get(e.version)]
    return [e for e in entries if e.version not in seen]