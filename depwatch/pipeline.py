"""Runs a sequence of processing stages over changelog entries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from depwatch.entry import Entry


class Stage(Protocol):
    """A processing step that transforms a list of entries."""

    def apply(self, entries: list[Entry]) -> Sequence[Entry]: ...


class Pipeline:
    """Applies its stages in order."""

    def __init__(self, *stages: Stage) -> None:
        self.stages = stages

    def run(self, entries: Iterable[Entry]) -> list[Entry]:
        """Pass a copy of the entry list through every stage and return the result."""
        out = list(entries)
        for stage in self.stages:
            out = list(stage.apply(out))
        return out