"""Expands shorthand version strings to three numeric segments.

"v1" becomes "v1.0.0" and "v1.2" becomes "v1.2.0"; pre-release and build
suffixes are kept.
"""

from __future__ import annotations

import re
from collections.abc import MutableSequence

from depwatch.entry import Entry

_SUFFIX_START = re.compile(r"[-+]")


def expand_version(version: str) -> str:
    """Pad version to three dot-separated segments, keeping prefix and suffix."""
    if not version:
        return version
    prefix, raw = "", version
    if version[0] in "vV":
        prefix, raw = version[0], version[1:]
    core, suffix = raw, ""
    match = _SUFFIX_START.search(raw)
    if match:
        core, suffix = raw[: match.start()], raw[match.start():]
    parts = core.split(".")
    parts.extend(["0"] * (3 - len(parts)))
    return prefix + ".".join(parts[:3]) + suffix


class Expander:
    """Normalises the version of every entry."""

    def apply(self, entries: MutableSequence[Entry] | None) -> MutableSequence[Entry]:
        """Expand versions in place and return the same sequence."""
        if entries is None:
            return []
        for entry in entries:
            entry.version = expand_version(entry.version)
        return entries