"""Public entry point composing matcher, anchors, and selection tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from section_nav.buffer import (
    CoveredRange,
    Position,
    SelectionRange,
    TextBuffer,
    covered_between,
    ensure_position,
)
from section_nav.runtime import telemetry
from section_nav.schemes import (
    BuiltinScheme,
    Direction,
    MatchSpan,
    SchemeRegistry,
)
from section_nav.schemes.registry import SchemeRef

from .anchors import resolve_cursor
from .matcher import BoundaryMatcher
from .selection import SelectionTracker


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of one navigation request.

    ``matched`` is ``False`` when no boundary exists in the requested
    direction; ``cursor`` and ``selection`` are then returned untouched and
    ``covered`` is empty.
    """

    cursor: Position
    selection: Optional[SelectionRange]
    covered: CoveredRange
    matched: bool
    span: Optional[MatchSpan] = None
    steps: int = 0


class MovementController:
    """Runs section motions against buffer snapshots.

    The controller holds no per-session state; callers pass the current
    selection in and keep the one handed back.
    """

    def __init__(
        self,
        registry: SchemeRegistry | None = None,
        *,
        matcher: BoundaryMatcher | None = None,
        tracker: SelectionTracker | None = None,
        logger_name: str | None = None,
    ) -> None:
        self.registry = registry or SchemeRegistry.with_builtins(
            logger_name=logger_name
        )
        self.matcher = matcher or BoundaryMatcher()
        self.tracker = tracker or SelectionTracker()
        self._logger_name = logger_name

    def move(
        self,
        buffer: TextBuffer,
        cursor: Position,
        scheme: SchemeRef,
        direction: Direction | str,
        extend: bool = False,
        selection: Optional[SelectionRange] = None,
        *,
        count: int = 1,
    ) -> MoveResult:
        if count < 1:
            raise ValueError("count must be at least 1")
        definition = self.registry.get(scheme)
        direction = Direction(direction)
        origin = ensure_position(buffer, cursor)

        with telemetry.span(
            "motion::move",
            logger_name=self._logger_name,
            component="motions",
            fields={
                "buffer": buffer.name,
                "scheme": definition.id,
                "direction": direction,
                "extend": extend,
                "origin": origin,
            },
        ) as handle:
            landing = origin
            last_span: MatchSpan | None = None
            steps = 0
            while steps < count:
                found = self.matcher.find(buffer, landing, definition, direction)
                if found is None:
                    break
                last_span = found
                landing = resolve_cursor(found, definition)
                steps += 1

            if last_span is None:
                handle.set_status("miss")
                telemetry.record_event(
                    "motion.no_match",
                    level="debug",
                    data={
                        "scheme": definition.id,
                        "direction": direction,
                        "cursor": origin,
                    },
                    logger_name=self._logger_name,
                )
                return MoveResult(
                    cursor=origin,
                    selection=selection,
                    covered=covered_between(buffer, origin, origin),
                    matched=False,
                )

            handle.set_status("match")
            handle.add_metadata("target", landing)
            handle.add_metadata("steps", steps)
            pending = self.tracker.begin_or_continue(selection, extend, origin)
            return MoveResult(
                cursor=landing,
                selection=self.tracker.finish(pending, landing),
                covered=covered_between(buffer, origin, landing),
                matched=True,
                span=last_span,
                steps=steps,
            )

    def next_section(
        self,
        buffer: TextBuffer,
        cursor: Position,
        *,
        extend: bool = False,
        selection: Optional[SelectionRange] = None,
        count: int = 1,
    ) -> MoveResult:
        return self.move(
            buffer,
            cursor,
            BuiltinScheme.TOP_LEVEL,
            Direction.FORWARD,
            extend,
            selection,
            count=count,
        )

    def previous_section(
        self,
        buffer: TextBuffer,
        cursor: Position,
        *,
        extend: bool = False,
        selection: Optional[SelectionRange] = None,
        count: int = 1,
    ) -> MoveResult:
        return self.move(
            buffer,
            cursor,
            BuiltinScheme.TOP_LEVEL,
            Direction.BACKWARD,
            extend,
            selection,
            count=count,
        )

    def next_definition(
        self,
        buffer: TextBuffer,
        cursor: Position,
        *,
        extend: bool = False,
        selection: Optional[SelectionRange] = None,
        count: int = 1,
    ) -> MoveResult:
        return self.move(
            buffer,
            cursor,
            BuiltinScheme.DEFINITION,
            Direction.FORWARD,
            extend,
            selection,
            count=count,
        )

    def previous_definition(
        self,
        buffer: TextBuffer,
        cursor: Position,
        *,
        extend: bool = False,
        selection: Optional[SelectionRange] = None,
        count: int = 1,
    ) -> MoveResult:
        return self.move(
            buffer,
            cursor,
            BuiltinScheme.DEFINITION,
            Direction.BACKWARD,
            extend,
            selection,
            count=count,
        )


__all__ = ["MovementController", "MoveResult"]
