"""Tag-based alerting over changelog entries.

Each rule maps a tag name to a severity. Only the first matching rule fires
per entry, so an entry never produces duplicate alerts.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from depwatch.entry import Entry


@dataclass(frozen=True)
class AlertRule:
    """Fires when an entry carries the given tag."""

    tag: str
    severity: str


@dataclass(frozen=True)
class Alert:
    """An entry that triggered a rule."""

    entry: Entry
    severity: str
    reason: str


class Alerter:
    """Evaluates entries against tag rules and produces alerts."""

    def __init__(self, rules: Iterable[AlertRule] = ()) -> None:
        self._rules: list[AlertRule] = []
        for rule in rules:
            self.add_rule(rule.tag, rule.severity)

    def add_rule(self, tag: str, severity: str) -> None:
        """Add a rule; tags are matched case-insensitively."""
        self._rules.append(AlertRule(tag=tag.lower(), severity=severity))

    def evaluate(self, entries: Iterable[Entry]) -> list[Alert]:
        """Return an alert for each entry matched by a rule."""
        alerts: list[Alert] = []
        for entry in entries:
            entry_tags = {t.lower() for t in entry.tags}
            rule = next((r for r in self._rules if r.tag in entry_tags), None)
            if rule is not None:
                alerts.append(Alert(entry=entry, severity=rule.severity, reason=f"tag:{rule.tag}"))
        return alerts