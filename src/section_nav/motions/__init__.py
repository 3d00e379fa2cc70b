"""Section motions: boundary matching, anchoring, and selection tracking."""

from .anchors import resolve_cursor
from .controller import MovementController, MoveResult
from .matcher import BoundaryMatcher, span_for_line
from .operators import MotionTarget, MotionTargetConsumedError, Operator
from .selection import SelectionTracker

__all__ = [
    "BoundaryMatcher",
    "MotionTarget",
    "MotionTargetConsumedError",
    "MoveResult",
    "MovementController",
    "Operator",
    "SelectionTracker",
    "resolve_cursor",
    "span_for_line",
]
