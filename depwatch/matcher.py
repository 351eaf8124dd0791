"""Filters entries with regular-expression rules.

Each rule targets a field ("version", "title" or "body") and is compiled
once. An entry passes if any rule matches; with no rules every entry passes.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from depwatch.entry import Entry


@dataclass(frozen=True)
class MatchRule:
    """A compiled pattern and the field it is applied to."""

    pattern: re.Pattern[str]
    field: str


def _target(entry: Entry, field: str) -> str:
    if field.lower() in ("title", "version"):
        return entry.version
    return entry.body


class Matcher:
    """Keeps entries matching at least one rule, in their original order."""

    def __init__(self, rules: Iterable[MatchRule] = ()) -> None:
        self._rules: list[MatchRule] = list(rules)

    def add_rule(self, field: str, pattern: str) -> None:
        """Compile pattern and add it as a rule for field; raises re.error if invalid."""
        self._rules.append(MatchRule(pattern=re.compile(pattern), field=field))

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return the entries matched by any rule, or all entries without rules."""
        items = list(entries)
        if not self._rules:
            return items
        return [e for e in items if any(r.pattern.search(_target(e, r.field)) for r in self._rules)]