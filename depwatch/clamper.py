"""Keeps entry scores inside a configured range."""

from __future__ import annotations

from collections.abc import MutableSequence

from depwatch.entry import Entry


class Clamper:
    """Clamps each entry's score to [minimum, maximum].

    The default range is [0, 100]. If the bounds are given the wrong way
    round, they are swapped.
    """

    def __init__(self, minimum: float = 0.0, maximum: float = 100.0) -> None:
        if minimum > maximum:
            minimum, maximum = maximum, minimum
        self.minimum = minimum
        self.maximum = maximum

    def apply(self, entries: MutableSequence[Entry]) -> MutableSequence[Entry]:
        """Clamp scores in place and return the same sequence."""
        for entry in entries:
            entry.score = min(max(entry.score, self.minimum), self.maximum)
        return entries