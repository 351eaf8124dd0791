"""Summary statistics over a collection of changelog entries.

The aggregator counts entries per dependency and per label and tallies
highlighted entries; top_dependencies lists the most active dependencies.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from depwatch.entry import Entry


@dataclass
class AggregateStats:
    """Summary statistics for a set of changelog entries."""

    total_entries: int = 0
    by_dependency: dict[str, int] = field(default_factory=dict)
    by_label: dict[str, int] = field(default_factory=dict)
    highlighted_count: int = 0


class Aggregator:
    """Computes summary statistics over entries."""

    def aggregate(self, entries: Iterable[Entry] | None) -> AggregateStats:
        """Count entries per dependency, per label and highlighted."""
        items = list(entries or ())
        by_dep = Counter(e.dependency for e in items if e.dependency)
        by_label = Counter(label for e in items for label in e.labels)
        return AggregateStats(
            total_entries=len(items),
            by_dependency=dict(by_dep),
            by_label=dict(by_label),
            highlighted_count=sum(1 for e in items if e.highlighted),
        )

    def top_dependencies(self, stats: AggregateStats, n: int = 0) -> list[str]:
        """Dependency names by entry count descending, then by name; capped at n if n > 0."""
        ranked = sorted(stats.by_dependency.items(), key=lambda kv: (-kv[1], kv[0]))
        names = [name for name, _ in ranked]
        if 0 < n < len(names):
            return names[:n]
        return names