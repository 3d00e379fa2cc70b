"""Session object owning the cursor and the session-scoped selection."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from section_nav.buffer import (
    Position,
    SelectionRange,
    TextBuffer,
    clamp_position,
    ensure_position,
)
from section_nav.commands import CommandRegistry, NavigationCommand, load_default_commands
from section_nav.motions import MotionTarget, MovementController, MoveResult, Operator
from section_nav.schemes import Direction
from section_nav.schemes.registry import SchemeRef


class SessionBus:
    """Minimal event bus so hosts can react to cursor and selection changes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class NavigationSession:
    """One editing session over a buffer snapshot.

    Holds the only mutable navigation state: the cursor, the current
    selection, and the target of the most recent motion (for a pending
    operator).  Every request replaces that state in one step.
    """

    def __init__(
        self,
        buffer: TextBuffer,
        *,
        cursor: Position | None = None,
        controller: MovementController | None = None,
        commands: CommandRegistry | None = None,
        load_defaults: bool = True,
        bus: SessionBus | None = None,
        logger_name: str | None = None,
    ) -> None:
        self.buffer = buffer
        self.cursor = ensure_position(buffer, cursor or Position.start())
        self.selection: Optional[SelectionRange] = None
        self.pending_target: Optional[MotionTarget] = None
        self.controller = controller or MovementController(logger_name=logger_name)
        self.commands = commands or CommandRegistry(logger_name=logger_name)
        if load_defaults and commands is None:
            load_default_commands(self.commands)
        self.bus = bus or SessionBus()

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self.bus.subscribe(event, callback)

    def load(self, buffer: TextBuffer) -> None:
        """Swap in a new snapshot; the cursor is clamped, the selection dropped."""

        self.buffer = buffer
        self.cursor = clamp_position(buffer, self.cursor)
        self.selection = None
        self.pending_target = None
        self.bus.emit("buffer.load", {"buffer": buffer.name, "cursor": self.cursor})

    def set_cursor(self, position: Position) -> None:
        self.cursor = ensure_position(self.buffer, position)
        self.bus.emit("cursor.set", {"cursor": self.cursor})

    def clear_selection(self) -> None:
        if self.selection is None:
            return
        self.selection = None
        self.bus.emit("selection.change", {"selection": None})

    def move(
        self,
        scheme: SchemeRef,
        direction: Direction | str,
        *,
        extend: bool = False,
        count: int = 1,
        command_id: str | None = None,
    ) -> MoveResult:
        result = self.controller.move(
            self.buffer,
            self.cursor,
            scheme,
            direction,
            extend,
            self.selection,
            count=count,
        )
        self._commit(result, command_id)
        return result

    def run(self, command_id: str, *, count: int = 1) -> MoveResult:
        command = self.commands.get(command_id)
        return self._run_command(command, count=count)

    def handle_keys(
        self, keys: Sequence[str], *, extend: bool = False, count: int = 1
    ) -> Optional[MoveResult]:
        """Run the command bound to ``keys``; ``None`` when nothing is bound."""

        command = self.commands.lookup_keys(keys, extend=extend)
        if command is None:
            return None
        return self._run_command(command, count=count)

    def apply_operator(self, operator: Operator) -> object:
        """Hand the last motion's covered range to ``operator`` exactly once."""

        if self.pending_target is None:
            raise RuntimeError("No motion target is pending")
        target = self.pending_target
        self.pending_target = None
        return target.apply(self.buffer, operator)

    def _run_command(self, command: NavigationCommand, *, count: int) -> MoveResult:
        return self.move(
            command.scheme,
            command.direction,
            extend=command.extend,
            count=count,
            command_id=command.id,
        )

    def _commit(self, result: MoveResult, command_id: str | None) -> None:
        previous_selection = self.selection
        self.cursor = result.cursor
        self.selection = result.selection
        self.pending_target = MotionTarget(covered=result.covered, command_id=command_id)

        payload = {"command": command_id, "cursor": result.cursor}
        if result.matched:
            self.bus.emit("motion.move", payload)
        else:
            self.bus.emit("motion.miss", payload)
        if self.selection != previous_selection:
            self.bus.emit(
                "selection.change",
                {"selection": self.selection, "cursor": self.cursor},
            )


__all__ = ["NavigationSession", "SessionBus"]
