"""Replaces sensitive patterns in entry bodies and links with a placeholder.

Useful for stripping tokens, keys or internal URLs before delivery.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import replace

from depwatch.entry import Entry

DEFAULT_PLACEHOLDER = "[REDACTED]"


class Redactor:
    """Substitutes matches of each pattern with the placeholder.

    Patterns that fail to compile are ignored; an empty placeholder keeps
    the default.
    """

    def __init__(
        self, patterns: Iterable[str] = (), placeholder: str = DEFAULT_PLACEHOLDER
    ) -> None:
        self._patterns: list[re.Pattern[str]] = []
        for pattern in patterns:
            try:
                self._patterns.append(re.compile(pattern))
            except re.error:
                continue
        self.placeholder = placeholder or DEFAULT_PLACEHOLDER

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return copies of entries with body and link redacted and trimmed."""
        items = list(entries)
        if not self._patterns:
            return items
        return [replace(e, body=self._redact(e.body), link=self._redact(e.link)) for e in items]

    def _redact(self, text: str) -> str:
        for pattern in self._patterns:
            text = pattern.sub(lambda _m: self.placeholder, text)
        return text.strip()