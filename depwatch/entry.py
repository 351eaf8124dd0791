"""Core data types for changelog entries.

Entries are produced by fetching and parsing dependency changelogs (over HTTP
or from GitHub releases) and then flow through the processing components.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Badge:
    """A visual indicator summarising an entry's importance or category."""

    label: str
    color: str = ""


@dataclass
class Entry:
    """A single parsed changelog or release entry."""

    dependency: str = ""
    version: str = ""
    date: datetime | None = None
    body: str = ""
    link: str = ""
    tags: list[str] = field(default_factory=list)
    badges: list[Badge] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    score: float = 0.0
    highlighted: bool = False
    summary: str = ""
    category: str = ""
    refs: list[str] = field(default_factory=list)
    label: str = ""
    raw_date: str = ""
    meta: dict[str, str] = field(default_factory=dict)