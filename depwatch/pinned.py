"""Suppresses notifications for explicitly pinned dependency versions.

Pins live in memory for the lifetime of a Pinner; to keep them across
restarts, store the PinnedEntry values elsewhere and reload them.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from depwatch.entry import Entry


@dataclass(frozen=True)
class PinnedEntry:
    """A dependency version acknowledged by the operator."""

    dependency: str
    version: str
    pinned_at: datetime | None = None
    reason: str = ""


class Pinner:
    """Filters out entries whose dependency is pinned at exactly that version."""

    def __init__(self, pins: Iterable[PinnedEntry] | None = None) -> None:
        self._pins = {p.dependency: p.version for p in pins or () if p.dependency and p.version}

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return a new list without entries matching a pin."""
        return [e for e in entries if not self.is_pinned(e.dependency, e.version)]

    def is_pinned(self, dependency: str, version: str) -> bool:
        """Report whether dependency is pinned at version."""
        return dependency in self._pins and self._pins[dependency] == version