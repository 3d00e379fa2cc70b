"""Dataclasses describing host-bindable navigation commands."""

from __future__ import annotations

from dataclasses import dataclass

from section_nav.schemes import BuiltinScheme, Direction


def _normalize_keys(keys: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(key.strip() for key in keys if key and key.strip())


@dataclass(frozen=True, slots=True)
class NavigationCommand:
    """One section motion a host can bind to a key sequence."""

    id: str
    scheme: str
    direction: Direction
    extend: bool = False
    description: str = ""
    keys: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("command id cannot be empty")
        if not self.scheme:
            raise ValueError("command scheme cannot be empty")
        if isinstance(self.scheme, BuiltinScheme):
            object.__setattr__(self, "scheme", self.scheme.value)
        object.__setattr__(self, "direction", Direction(self.direction))
        object.__setattr__(self, "keys", _normalize_keys(tuple(self.keys)))

    @property
    def key_signature(self) -> str:
        return " ".join(self.keys)


__all__ = ["NavigationCommand"]
