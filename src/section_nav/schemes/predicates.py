"""Pure line predicates backing the built-in schemes."""

from __future__ import annotations

from section_nav.buffer import TextBuffer


def _starts_with_text(line: str) -> bool:
    return bool(line) and not line[0].isspace()


def is_top_level_section(buffer: TextBuffer, line: int) -> bool:
    """First line of the buffer, or a flush-left line right after an empty one."""

    if line == 1:
        return True
    return buffer.line(line - 1) == "" and _starts_with_text(buffer.line(line))


def is_definition_header(buffer: TextBuffer, line: int) -> bool:
    """Flush-left line containing ``=`` and ending in ``:``, e.g. ``f = (n):``."""

    text = buffer.line(line)
    return _starts_with_text(text) and "=" in text and text.endswith(":")


__all__ = ["is_top_level_section", "is_definition_header"]
