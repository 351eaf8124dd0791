"""Assigns a single label to each entry from keywords in its body.

Labels are checked in priority order: security, breaking, feature, bugfix.
An entry matching none of them is labelled "unknown".
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from depwatch.entry import Entry

LABEL_SECURITY = "security"
LABEL_BREAKING = "breaking"
LABEL_FEATURE = "feature"
LABEL_BUGFIX = "bugfix"
LABEL_UNKNOWN = "unknown"

_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (LABEL_SECURITY, ("security", "vulnerability", "cve", "exploit", "patch")),
    (LABEL_BREAKING, ("breaking", "incompatible", "removed", "deprecated")),
    (LABEL_FEATURE, ("feature", "added", "new", "introduce")),
    (LABEL_BUGFIX, ("fix", "bugfix", "bug", "resolved", "patch")),
)


class Labeler:
    """Sets entry.label from the highest-priority keyword found in the body."""

    def classify(self, body: str) -> str:
        """Return the highest-priority label whose keyword occurs in body."""
        lower = body.lower()
        for label, keywords in _KEYWORDS:
            if any(kw in lower for kw in keywords):
                return label
        return LABEL_UNKNOWN

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return copies of entries with their label set."""
        return [replace(entry, label=self.classify(entry.body)) for entry in entries]