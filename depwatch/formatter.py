"""Renders entries as a human-readable digest grouped by dependency."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from depwatch.entry import Entry

DEFAULT_DATE_LAYOUT = "%Y-%m-%d"


class Formatter:
    """Formats entries into Markdown-like text.

    date_layout is a strftime format; labels are shown by default, badges
    are not.
    """

    def __init__(
        self,
        date_layout: str = DEFAULT_DATE_LAYOUT,
        show_badges: bool = False,
        show_labels: bool = True,
    ) -> None:
        self.date_layout = date_layout or DEFAULT_DATE_LAYOUT
        self.show_badges = show_badges
        self.show_labels = show_labels

    def format(self, entries: Iterable[Entry]) -> str:
        """Render entries, starting a "## <dependency>" section when it changes."""
        parts: list[str] = []
        current = ""
        for entry in entries:
            if entry.dependency != current:
                if current:
                    parts.append("\n")
                parts.append(f"## {entry.dependency}\n")
                current = entry.dependency
            parts.append(self._line(entry) + "\n")
        return "".join(parts)

    def _line(self, entry: Entry) -> str:
        line = f"- {self._date(entry.date)}{entry.version}"
        if self.show_labels and entry.labels:
            line += f" [{', '.join(entry.labels)}]"
        if self.show_badges and entry.badges:
            line += f" ({' '.join(b.label for b in entry.badges)})"
        if entry.body:
            line += "\n  " + entry.body.strip().replace("\n", "\n  ")
        return line

    def _date(self, date: datetime | None) -> str:
        if date is None:
            return ""
        if date.tzinfo is not None:
            date = date.astimezone(timezone.utc)
        return date.strftime(self.date_layout) + " "