"""Textual-facing adapter that feeds host key tokens into a session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from section_nav.buffer import Position, SelectionRange
from section_nav.motions import MoveResult
from section_nav.session import NavigationSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class SessionView:
    """Host-friendly snapshot of what the UI should render."""

    text: str
    cursor: Position
    selection: Optional[SelectionRange]
    extend: bool
    pending_keys: str = ""


@dataclass(slots=True)
class SessionUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[SessionView], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualSectionAdapter:
    """Collects key tokens (with an optional count) and runs bound motions.

    ``v`` toggles extend mode, ``ESC`` drops pending keys, the selection, and
    extend mode.  Everything else is matched against the session's command
    registry.
    """

    EXTEND_TOGGLE = "v"
    CANCEL_KEYS = frozenset({"ESC", "<Esc>", "escape"})

    def __init__(self, session: NavigationSession, hooks: SessionUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.extend = False
        self._pending: List[str] = []
        self._count_digits: List[str] = []
        self._subscribe_events()
        self._refresh_view()

    def handle_key(self, key: str) -> Optional[MoveResult]:
        self.hooks.log(f"key -> {key!r} pending={self._pending!r} extend={self.extend}")

        if key in self.CANCEL_KEYS:
            self._reset_pending()
            self.extend = False
            self.session.clear_selection()
            self.hooks.update_status("cancel")
            self._refresh_view()
            return None

        if not self._pending and key == self.EXTEND_TOGGLE:
            self.extend = not self.extend
            if not self.extend:
                self.session.clear_selection()
            self.hooks.update_status("extend" if self.extend else "move")
            self._refresh_view()
            return None

        if not self._pending and key.isdigit() and (key != "0" or self._count_digits):
            self._count_digits.append(key)
            self._refresh_view()
            return None

        self._pending.append(key)
        command = self.session.commands.lookup_keys(self._pending, extend=self.extend)
        if command is not None:
            count = int("".join(self._count_digits)) if self._count_digits else 1
            self._reset_pending()
            result = self.session.run(command.id, count=count)
            status = command.id if result.matched else f"{command.id}:no_match"
            self.hooks.update_status(status)
            self._refresh_view()
            return result

        if self.session.commands.is_prefix(self._pending, extend=self.extend):
            self._refresh_view()
            return None

        self.hooks.log(f"miss -> {''.join(self._pending)!r}")
        self._reset_pending()
        self._refresh_view()
        return None

    @property
    def pending_keys(self) -> str:
        return "".join(self._count_digits + self._pending)

    def _reset_pending(self) -> None:
        self._pending.clear()
        self._count_digits.clear()

    def _subscribe_events(self) -> None:
        for event in ("motion.move", "motion.miss", "selection.change", "buffer.load"):
            self.session.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.hooks.log(f"event -> {name} {payload!r}")
        self.hooks.handle_event(name, payload)

    def _refresh_view(self) -> None:
        self.hooks.update_view(
            SessionView(
                text=self.session.buffer.text,
                cursor=self.session.cursor,
                selection=self.session.selection,
                extend=self.extend,
                pending_keys=self.pending_keys,
            )
        )


__all__ = ["SessionUIHooks", "SessionView", "TextualSectionAdapter"]
