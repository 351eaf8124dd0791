"""Attaches coloured badges to entries based on their tags.

Rules are evaluated in order; a badge whose label is already present on an
entry is not added again.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from depwatch.entry import Badge, Entry


@dataclass(frozen=True)
class BadgeRule:
    """Maps a tag to a badge."""

    tag: str
    badge: Badge


class Badger:
    """Adds badges to entries whose tags match a rule."""

    def __init__(self, rules: Iterable[BadgeRule] = ()) -> None:
        self._rules: list[BadgeRule] = list(rules)

    def add_rule(self, tag: str, label: str, color: str) -> None:
        """Add a rule mapping tag to a badge with the given label and colour."""
        self._rules.append(BadgeRule(tag=tag, badge=Badge(label=label, color=color)))

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return copies of entries with matching badges attached."""
        out = []
        for entry in entries:
            badges = list(entry.badges)
            for rule in self._rules:
                if rule.tag in entry.tags and all(b.label != rule.badge.label for b in badges):
                    badges.append(rule.badge)
            out.append(replace(entry, badges=badges))
        return out