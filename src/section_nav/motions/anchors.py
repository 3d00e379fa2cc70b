"""Map matched spans to the cursor position a motion lands on."""

from __future__ import annotations

from section_nav.buffer import Position
from section_nav.schemes import Anchor, MatchSpan, SchemeDefinition


def resolve_cursor(span: MatchSpan, scheme: SchemeDefinition) -> Position:
    # Keyed on the scheme's anchor only; search direction never matters here.
    if scheme.anchor is Anchor.START:
        return span.start
    if scheme.anchor is Anchor.END:
        return span.end
    raise ValueError(f"Unsupported anchor '{scheme.anchor}'")


__all__ = ["resolve_cursor"]
