"""Cursor positions, selections, and covered ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Position(NamedTuple):
    """``(line, column)``: 1-indexed line, 0-indexed character column."""

    line: int
    column: int = 0

    @classmethod
    def start(cls) -> "Position":
        return cls(1, 0)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """In-progress selection; ``anchor`` stays put while ``active`` moves."""

    anchor: Position
    active: Position

    @classmethod
    def collapsed(cls, position: Position) -> "SelectionRange":
        return cls(anchor=position, active=position)

    def with_active(self, active: Position) -> "SelectionRange":
        return SelectionRange(anchor=self.anchor, active=active)

    @property
    def start(self) -> Position:
        return min(self.anchor, self.active)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.active)


@dataclass(frozen=True, slots=True)
class CoveredRange:
    """Half-open ``[start, end)`` swept by a motion, with text offsets."""

    start: Position
    end: Position
    start_offset: int
    end_offset: int

    @property
    def empty(self) -> bool:
        return self.start_offset == self.end_offset

    def __len__(self) -> int:
        return self.end_offset - self.start_offset
