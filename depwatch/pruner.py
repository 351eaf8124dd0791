"""Removes changelog entries older than a maximum age.

Entries without a date are always kept, so entries lacking reliable date
information are never silently discarded.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from depwatch.entry import Entry

DEFAULT_MAX_AGE = timedelta(days=30)


def _as_utc(date: datetime) -> datetime:
    if date.tzinfo is None:
        return date.replace(tzinfo=timezone.utc)
    return date.astimezone(timezone.utc)


class Pruner:
    """Drops entries dated before now minus max_age (default 30 days).

    A non-positive max_age is ignored and the default is used.
    """

    def __init__(self, max_age: timedelta | float = DEFAULT_MAX_AGE) -> None:
        if not isinstance(max_age, timedelta):
            max_age = timedelta(seconds=max_age)
        self.max_age = max_age if max_age > timedelta(0) else DEFAULT_MAX_AGE

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return the entries that are undated or within the retention window."""
        cutoff = datetime.now(timezone.utc) - self.max_age
        return [e for e in entries if e.date is None or _as_utc(e.date) >= cutoff]