"""Read-only line storage navigated by the section motions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple

from .state import Position


@dataclass(frozen=True, slots=True)
class TextBuffer:
    """Immutable snapshot of a document as a 1-indexed sequence of lines.

    Hosts hand a fresh snapshot to every navigation request; nothing in the
    navigation core mutates it.
    """

    _lines: Tuple[str, ...] = field(default=("",))
    name: str = "default"

    def __post_init__(self) -> None:
        lines = tuple(self._lines)
        if not lines:
            lines = ("",)
        object.__setattr__(self, "_lines", lines)

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, name: str = "default") -> "TextBuffer":
        return cls(_lines=tuple(lines), name=name)

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "TextBuffer":
        lines = text.split("\n")
        return cls(_lines=tuple(lines), name=name)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def line(self, number: int) -> str:
        """Return line ``number`` (1-indexed)."""

        if number < 1 or number > len(self._lines):
            raise IndexError(f"line {number} outside 1..{len(self._lines)}")
        return self._lines[number - 1]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def end(self) -> Position:
        """Position just past the last character of the buffer."""

        return Position(len(self._lines), len(self._lines[-1]))

    def offset_of(self, position: Position) -> int:
        """Character offset of ``position`` in :attr:`text`."""

        offset = 0
        for index in range(position.line - 1):
            offset += len(self._lines[index]) + 1  # newline
        return offset + position.column

    def slice(self, start: Position, end: Position) -> str:
        if end < start:
            start, end = end, start
        return self.text[self.offset_of(start) : self.offset_of(end)]
