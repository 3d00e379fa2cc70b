"""Buffer snapshots, positions, and range helpers."""

from .document import TextBuffer
from .state import CoveredRange, Position, SelectionRange
from .validation import (
    PositionValidationError,
    clamp_position,
    covered_between,
    ensure_position,
)

__all__ = [
    "TextBuffer",
    "Position",
    "SelectionRange",
    "CoveredRange",
    "PositionValidationError",
    "clamp_position",
    "covered_between",
    "ensure_position",
]
