"""Parses Markdown changelogs into entries.

Recognised headings include:
  ## [1.2.3] - 2024-01-15
  ## 1.2.3 (2024-01-15)
  ## v1.2.3 — 2024-01-15
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from depwatch.entry import Entry

_HEADING_RE = re.compile(
    r"(?i)^#{1,3}\s+\[?v?(\d+\.\d+\.\d+[^\s\]]*)\]?\s*[\-\(—]?\s*(\d{4}-\d{2}-\d{2})?"
)


def _parse_date(text: str) -> datetime | None:
    try:
        return datetime.strptime(text, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    except ValueError:
        return None


class Parser:
    """Splits raw changelog text into entries, one per version heading."""

    def parse(self, raw: str) -> list[Entry]:
        """Return the entries in the order their headings appear.

        Text before the first heading is ignored; each body is the stripped
        text between its heading and the next one.
        """
        entries: list[Entry] = []
        current: Entry | None = None
        body: list[str] = []

        def flush() -> None:
            if current is not None:
                current.body = "\n".join(body).strip()
                entries.append(current)

        for line in raw.split("\n"):
            match = _HEADING_RE.match(line)
            if match:
                flush()
                body = []
                raw_date = match.group(2) or ""
                current = Entry(
                    version=match.group(1),
                    raw_date=raw_date,
                    date=_parse_date(raw_date) if raw_date else None,
                )
            elif current is not None:
                body.append(line)
        flush()
        return entries