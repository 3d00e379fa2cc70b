"""Validation helpers shared across navigation services."""

from __future__ import annotations

from .document import TextBuffer
from .state import CoveredRange, Position


class PositionValidationError(RuntimeError):
    """Raised when a host hands over a position outside the buffer."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position


def ensure_position(buffer: TextBuffer, position: Position) -> Position:
    line, column = position
    if line < 1 or line > buffer.line_count:
        raise PositionValidationError("Line out of range", position=position)
    if column < 0 or column > len(buffer.line(line)):
        raise PositionValidationError("Column out of range", position=position)
    return Position(line, column)


def clamp_position(buffer: TextBuffer, position: Position) -> Position:
    line = max(1, min(position.line, buffer.line_count))
    column = max(0, min(position.column, len(buffer.line(line))))
    return Position(line, column)


def covered_between(buffer: TextBuffer, first: Position, second: Position) -> CoveredRange:
    start, end = (first, second) if first <= second else (second, first)
    return CoveredRange(
        start=start,
        end=end,
        start_offset=buffer.offset_of(start),
        end_offset=buffer.offset_of(end),
    )
