"""Pulls issue, pull-request and author references out of entry bodies.

References are recorded as tags on the entry:
issue references ("#123" or "GH-123") as "issue:...",
pull requests ("PR #123" or "pr-123") as "pr:<number>",
and mentions ("@username") as "author:<username>".
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import replace

from depwatch.entry import Entry

_ISSUE_RE = re.compile(r"(?i)(?:GH-|#)(\d+)")
_PR_RE = re.compile(r"(?i)(?:pr[\s#-]+(\d+))")
_AUTHOR_RE = re.compile(r"@([A-Za-z0-9_-]+)")


class Extractor:
    """Annotates entries with tags derived from references in their bodies."""

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return copies of entries with reference tags added.

        Existing tags come first; each tag appears only once.
        """
        return [self._annotate(entry) for entry in entries]

    @staticmethod
    def _annotate(entry: Entry) -> Entry:
        body = entry.body
        found = [
            *(f"issue:{m.group(0).upper().lstrip('GHgh- ')}" for m in _ISSUE_RE.finditer(body)),
            *(f"pr:{m.group(1)}" for m in _PR_RE.finditer(body)),
            *(f"author:{m.group(1)}" for m in _AUTHOR_RE.finditer(body)),
        ]
        tags = list(dict.fromkeys([*entry.tags, *found]))
        return replace(entry, tags=tags)