"""Selection bookkeeping for extend-mode motions."""

from __future__ import annotations

from typing import Optional

from section_nav.buffer import Position, SelectionRange


class SelectionTracker:
    """Keeps one continuous selection across consecutive extend motions."""

    def begin_or_continue(
        self,
        existing: Optional[SelectionRange],
        extend: bool,
        pre_move_cursor: Position,
    ) -> Optional[SelectionRange]:
        if not extend:
            return None
        if existing is None:
            return SelectionRange.collapsed(pre_move_cursor)
        return existing

    def finish(
        self, selection: Optional[SelectionRange], cursor: Position
    ) -> Optional[SelectionRange]:
        if selection is None:
            return None
        return selection.with_active(cursor)


__all__ = ["SelectionTracker"]
