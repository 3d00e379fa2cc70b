"""Linear boundary scanning in either direction, without wraparound."""

from __future__ import annotations

from typing import Iterator, Optional

from section_nav.buffer import Position, TextBuffer
from section_nav.schemes import Direction, MatchSpan, SchemeDefinition

from .anchors import resolve_cursor


def span_for_line(buffer: TextBuffer, scheme: SchemeDefinition, line: int) -> MatchSpan:
    """Span a scheme match occupies on ``line``."""

    start = Position(line, 0)
    if scheme.zero_width:
        return MatchSpan(start=start, end=start, line=line)
    return MatchSpan(start=start, end=Position(line, len(buffer.line(line))), line=line)


class BoundaryMatcher:
    """Finds the nearest scheme boundary strictly before or after a position.

    A candidate's boundary is the position its section begins at, which is
    the landing position the anchor rule picks for it.  Lines are visited in
    document order (reversed when scanning backward), so every line,
    including the start-of-buffer edge at ``(1, 0)``, is considered at most
    once per scan.  Scans stop at the buffer edge.
    """

    def iter_boundaries(
        self,
        buffer: TextBuffer,
        position: Position,
        scheme: SchemeDefinition,
        direction: Direction,
    ) -> Iterator[MatchSpan]:
        if direction is Direction.FORWARD:
            lines = range(position.line, buffer.line_count + 1)
        else:
            lines = range(position.line, 0, -1)

        for line in lines:
            if not scheme.matches(buffer, line):
                continue
            span = span_for_line(buffer, scheme, line)
            boundary = resolve_cursor(span, scheme)
            if direction is Direction.FORWARD and boundary > position:
                yield span
            elif direction is Direction.BACKWARD and boundary < position:
                yield span

    def find(
        self,
        buffer: TextBuffer,
        position: Position,
        scheme: SchemeDefinition,
        direction: Direction,
    ) -> Optional[MatchSpan]:
        return next(self.iter_boundaries(buffer, position, scheme, direction), None)


__all__ = ["BoundaryMatcher", "span_for_line"]
