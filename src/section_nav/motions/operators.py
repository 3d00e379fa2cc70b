"""Single-use motion targets for pending edit operators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from section_nav.buffer import CoveredRange, TextBuffer

Operator = Callable[[TextBuffer, CoveredRange], object]


class MotionTargetConsumedError(RuntimeError):
    """Raised when a motion's covered range is taken a second time."""

    def __init__(self, command_id: str | None = None) -> None:
        label = f" for '{command_id}'" if command_id else ""
        super().__init__(f"Motion target{label} was already consumed")
        self.command_id = command_id


@dataclass(slots=True)
class MotionTarget:
    covered: CoveredRange
    command_id: Optional[str] = None
    _consumed: bool = field(default=False, repr=False)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def consume(self) -> CoveredRange:
        if self._consumed:
            raise MotionTargetConsumedError(self.command_id)
        self._consumed = True
        return self.covered

    def text(self, buffer: TextBuffer) -> str:
        return buffer.slice(self.covered.start, self.covered.end)

    def apply(self, buffer: TextBuffer, operator: Operator) -> object:
        return operator(buffer, self.consume())


__all__ = ["MotionTarget", "MotionTargetConsumedError", "Operator"]
