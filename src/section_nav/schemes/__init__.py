"""Boundary schemes and the registry that names them."""

from .builtin import BUILTIN_SCHEMES, DEFINITION_HEADER, TOP_LEVEL_SECTION, BuiltinScheme
from .models import Anchor, BoundaryPredicate, Direction, MatchSpan, SchemeDefinition
from .predicates import is_definition_header, is_top_level_section
from .registry import (
    SchemeConflictError,
    SchemeRegistry,
    SchemeRegistryStats,
    UnknownSchemeError,
)

__all__ = [
    "Anchor",
    "BoundaryPredicate",
    "BuiltinScheme",
    "BUILTIN_SCHEMES",
    "DEFINITION_HEADER",
    "Direction",
    "MatchSpan",
    "SchemeConflictError",
    "SchemeDefinition",
    "SchemeRegistry",
    "SchemeRegistryStats",
    "TOP_LEVEL_SECTION",
    "UnknownSchemeError",
    "is_definition_header",
    "is_top_level_section",
]
