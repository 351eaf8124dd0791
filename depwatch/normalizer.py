"""Cleans and standardises entry bodies before further processing."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import replace

from depwatch.entry import Entry

_SPACE_RE = re.compile(r"[ \t]+")
_HTML_TAG_RE = re.compile(r"<[^>]+>")


class Normalizer:
    """Collapses blanks, optionally strips HTML tags and truncates bodies.

    A max_length of 0 means no limit.
    """

    def __init__(self, max_length: int = 0, strip_html: bool = False) -> None:
        self.max_length = max_length
        self.strip_html = strip_html

    def normalize(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return copies of entries with cleaned bodies."""
        return [replace(entry, body=self._clean(entry.body)) for entry in entries]

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Same as normalize, so the normalizer can serve as a pipeline stage."""
        return self.normalize(entries)

    def _clean(self, text: str) -> str:
        if self.strip_html:
            text = _HTML_TAG_RE.sub("", text)
        text = "\n".join(_SPACE_RE.sub(" ", line).rstrip() for line in text.split("\n"))
        text = text.strip()
        if self.max_length > 0:
            text = text[: self.max_length]
        return text