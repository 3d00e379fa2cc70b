"""Command registry: the host-facing table of bindable section motions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Sequence

from section_nav.runtime.telemetry import span

from .models import NavigationCommand


@dataclass(slots=True)
class CommandRegistryStats:
    command_count: int
    bound_count: int
    schemes: tuple[str, ...]


class CommandConflictError(RuntimeError):
    """Raised when a command's key sequence is already taken."""

    def __init__(
        self, command: NavigationCommand, conflicts: Iterable[NavigationCommand]
    ) -> None:
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Command '{command.id}' conflicts with "
            f"{[conflict.id for conflict in conflicts_tuple]}"
        )
        super().__init__(message)
        self.command = command
        self.conflicts = conflicts_tuple


class CommandRegistry:
    """Stores navigation commands, indexed by id and by key sequence.

    Plain and extend-mode commands live in separate key namespaces so the
    same keys can drive both (a host typically routes them by mode).
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, NavigationCommand] = {}
        self._key_index: Dict[tuple[bool, str], str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get(self, command_id: str) -> NavigationCommand:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def register(
        self, command: NavigationCommand, *, replace: bool = False
    ) -> NavigationCommand:
        with span(
            "commands::register",
            logger_name=self._logger_name,
            component="commands",
            fields={"command_id": command.id, "keys": command.key_signature},
        ) as handle:
            conflicts = self.detect_conflicts(command, ignore=(command.id,))
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise CommandConflictError(command, conflicts)

            existing = self._commands.get(command.id)
            if existing and not replace:
                raise ValueError(f"Command id '{command.id}' already registered")

            for stale in [*conflicts, *([existing] if existing else [])]:
                self._remove(stale)

            self._commands[command.id] = command
            if command.keys:
                self._key_index[(command.extend, command.key_signature)] = command.id
            self._touch()
            return command

    def unregister(self, command_id: str) -> Optional[NavigationCommand]:
        command = self._commands.get(command_id)
        if command is None:
            return None
        self._remove(command)
        self._touch()
        return command

    def lookup_keys(
        self, keys: Sequence[str], *, extend: bool = False
    ) -> Optional[NavigationCommand]:
        signature = " ".join(key.strip() for key in keys if key.strip())
        command_id = self._key_index.get((extend, signature))
        if command_id is None:
            return None
        return self._commands[command_id]

    def is_prefix(self, keys: Sequence[str], *, extend: bool = False) -> bool:
        """True when ``keys`` starts (but does not complete) a bound sequence."""

        tokens = tuple(key.strip() for key in keys if key.strip())
        for is_extend, signature in self._key_index:
            if is_extend != extend:
                continue
            bound = tuple(signature.split(" "))
            if len(bound) > len(tokens) and bound[: len(tokens)] == tokens:
                return True
        return False

    def iter_commands(self, *, extend: Optional[bool] = None) -> Iterator[NavigationCommand]:
        for command in self._commands.values():
            if extend is None or command.extend is extend:
                yield command

    def detect_conflicts(
        self, command: NavigationCommand, *, ignore: Sequence[str] | None = None
    ) -> list[NavigationCommand]:
        if not command.keys:
            return []
        ignored = set(ignore or ())
        owner = self._key_index.get((command.extend, command.key_signature))
        if owner is None or owner in ignored:
            return []
        return [self._commands[owner]]

    def stats(self) -> CommandRegistryStats:
        return CommandRegistryStats(
            command_count=len(self._commands),
            bound_count=len(self._key_index),
            schemes=tuple(sorted({c.scheme for c in self._commands.values()})),
        )

    def _remove(self, command: NavigationCommand) -> None:
        self._commands.pop(command.id, None)
        key = (command.extend, command.key_signature)
        if self._key_index.get(key) == command.id:
            self._key_index.pop(key)

    def _touch(self) -> None:
        self._revision += 1


__all__ = [
    "CommandConflictError",
    "CommandRegistry",
    "CommandRegistryStats",
]
