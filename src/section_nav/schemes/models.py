"""Dataclasses and enums describing boundary schemes and their matches."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from section_nav.buffer import Position, TextBuffer

BoundaryPredicate = Callable[[TextBuffer, int], bool]


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class Anchor(str, Enum):
    """Which edge of a matched span the cursor lands on."""

    START = "start"
    END = "end"


def _normalize_aliases(aliases: tuple[str, ...]) -> tuple[str, ...]:
    values = (alias.strip() for alias in aliases)
    return tuple(dict.fromkeys(alias for alias in values if alias))


@dataclass(frozen=True, slots=True)
class SchemeDefinition:
    """Named boundary predicate plus the anchor rule for its matches.

    ``predicate(buffer, line)`` receives a 1-indexed line number and must only
    read buffer content.  ``zero_width`` schemes match the edge in front of a
    line rather than the line itself.
    """

    id: str
    predicate: BoundaryPredicate
    anchor: Anchor
    zero_width: bool = False
    description: str = ""
    aliases: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("scheme id cannot be empty")
        if not callable(self.predicate):
            raise TypeError("predicate must be callable")
        object.__setattr__(self, "anchor", Anchor(self.anchor))
        object.__setattr__(self, "aliases", _normalize_aliases(tuple(self.aliases)))

    @property
    def names(self) -> tuple[str, ...]:
        return (self.id, *self.aliases)

    def matches(self, buffer: TextBuffer, line: int) -> bool:
        return bool(self.predicate(buffer, line))


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """Boundary found by the matcher; ``start == end`` for zero-width edges."""

    start: Position
    end: Position
    line: int

    @property
    def zero_width(self) -> bool:
        return self.start == self.end


__all__ = [
    "Anchor",
    "BoundaryPredicate",
    "Direction",
    "MatchSpan",
    "SchemeDefinition",
]
