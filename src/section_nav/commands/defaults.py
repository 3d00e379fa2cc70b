"""Built-in navigation commands for both schemes, directions, and modes."""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Sequence

from section_nav.schemes import BuiltinScheme, Direction

from .models import NavigationCommand
from .registry import CommandRegistry


def _pair(
    command_id: str,
    scheme: BuiltinScheme,
    direction: Direction,
    keys: tuple[str, ...],
    description: str,
) -> tuple[NavigationCommand, NavigationCommand]:
    plain = NavigationCommand(
        id=command_id,
        scheme=scheme.value,
        direction=direction,
        description=description,
        keys=keys,
    )
    extended = replace(
        plain,
        id=f"{command_id}.extend",
        extend=True,
        description=f"{description} (extend selection)",
    )
    return plain, extended


DEFAULT_COMMANDS: tuple[NavigationCommand, ...] = (
    *_pair(
        "section.next",
        BuiltinScheme.TOP_LEVEL,
        Direction.FORWARD,
        ("]", "]"),
        "Jump to the next top-level section",
    ),
    *_pair(
        "section.previous",
        BuiltinScheme.TOP_LEVEL,
        Direction.BACKWARD,
        ("[", "["),
        "Jump to the previous top-level section",
    ),
    *_pair(
        "definition.next",
        BuiltinScheme.DEFINITION,
        Direction.FORWARD,
        ("]", "m"),
        "Jump to the next definition header",
    ),
    *_pair(
        "definition.previous",
        BuiltinScheme.DEFINITION,
        Direction.BACKWARD,
        ("[", "m"),
        "Jump to the previous definition header",
    ),
)


def load_default_commands(
    registry: CommandRegistry,
    *,
    replace: bool = False,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    key_overrides: Mapping[str, Sequence[str]] | None = None,
) -> None:
    """Register the built-in commands, optionally filtered and rebound.

    ``key_overrides`` maps a command id to the key sequence it should use
    instead of its default; an empty sequence leaves the command unbound.
    """

    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    overrides = dict(key_overrides or {})

    unknown = set(overrides) - {command.id for command in DEFAULT_COMMANDS}
    if unknown:
        raise KeyError(f"Key overrides reference unknown commands {sorted(unknown)}")

    for command in DEFAULT_COMMANDS:
        if include_set is not None and command.id not in include_set:
            continue
        if command.id in exclude_set:
            continue
        if command.id in overrides:
            command = _rebind(command, overrides[command.id])
        registry.register(command, replace=replace)


def _rebind(command: NavigationCommand, keys: Sequence[str]) -> NavigationCommand:
    return replace(command, keys=tuple(keys))


__all__ = ["DEFAULT_COMMANDS", "load_default_commands"]
