"""Line normalizer for DOL source.

Splits source text into physical lines and yields the ones worth scanning,
trimmed, with their original 1-indexed line numbers.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

LINE_COMMENT = "//"


@dataclass(frozen=True)
class SourceLine:
    """A single non-blank, non-comment line of source."""

    number: int
    text: str

    def __repr__(self) -> str:
        return f"SourceLine(L{self.number}, {self.text!r})"


class SourceLines:
    """Lazy, restartable view over the scannable lines of a source text.

    Usage:
        lines = SourceLines(source)
        for line in lines:
            ...
        total = lines.count

    Blank lines and ``//`` comment lines are skipped during iteration but
    still counted in ``count``.
    """

    def __init__(self, source: str) -> None:
        self._source = source

    @property
    def source(self) -> str:
        return self._source

    @property
    def count(self) -> int:
        """Number of physical lines, blank lines included."""
        return self._source.count("\n") + 1

    def __iter__(self) -> Iterator[SourceLine]:
        for index, raw in enumerate(self._source.split("\n"), start=1):
            text = raw.strip()
            if not text or text.startswith(LINE_COMMENT):
                continue
            yield SourceLine(number=index, text=text)

    def __len__(self) -> int:
        return self.count
