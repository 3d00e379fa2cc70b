"""Built-in schemes: top-level sections (A) and definition headers (B)."""

from __future__ import annotations

from enum import Enum

from .models import Anchor, SchemeDefinition
from .predicates import is_definition_header, is_top_level_section

TOP_LEVEL_SECTION = SchemeDefinition(
    id="top_level",
    predicate=is_top_level_section,
    anchor=Anchor.END,
    zero_width=True,
    description="Top-level section: text after an empty line, or the first line",
    aliases=("A",),
)

DEFINITION_HEADER = SchemeDefinition(
    id="definition",
    predicate=is_definition_header,
    anchor=Anchor.START,
    description="Definition header: flush-left line with '=' ending in ':'",
    aliases=("B",),
)


class BuiltinScheme(str, Enum):
    TOP_LEVEL = "top_level"
    DEFINITION = "definition"

    @property
    def definition(self) -> SchemeDefinition:
        return _DEFINITIONS[self]


_DEFINITIONS = {
    BuiltinScheme.TOP_LEVEL: TOP_LEVEL_SECTION,
    BuiltinScheme.DEFINITION: DEFINITION_HEADER,
}

BUILTIN_SCHEMES: tuple[SchemeDefinition, ...] = tuple(_DEFINITIONS.values())

__all__ = [
    "BUILTIN_SCHEMES",
    "BuiltinScheme",
    "DEFINITION_HEADER",
    "TOP_LEVEL_SECTION",
]
