from __future__ import annotations

import pytest

from section_nav.buffer import TextBuffer
from section_nav.schemes import (
    Anchor,
    BuiltinScheme,
    DEFINITION_HEADER,
    SchemeConflictError,
    SchemeDefinition,
    SchemeRegistry,
    TOP_LEVEL_SECTION,
    UnknownSchemeError,
    is_definition_header,
    is_top_level_section,
)


def make_buffer(*lines: str) -> TextBuffer:
    return TextBuffer.from_lines(lines)


def make_definition(scheme_id: str = "heading", aliases: tuple[str, ...] = ()) -> SchemeDefinition:
    return SchemeDefinition(
        id=scheme_id,
        predicate=lambda buffer, line: buffer.line(line).startswith("#"),
        anchor=Anchor.END,
        aliases=aliases,
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("factorial = (n):", True),
        ("  x = 1:", False),
        ("x = 1", False),
        ("main:", False),
        ("", False),
        ("\tf = (x):", False),
    ],
)
def test_definition_header_predicate(text: str, expected: bool) -> None:
    buffer = make_buffer(text)

    assert is_definition_header(buffer, 1) is expected


def test_top_level_predicate_accepts_first_line_regardless_of_content() -> None:
    buffer = make_buffer("   indented", "next")

    assert is_top_level_section(buffer, 1) is True
    assert is_top_level_section(buffer, 2) is False


def test_top_level_predicate_requires_empty_line_and_flush_text() -> None:
    buffer = make_buffer("a", "", "b", "", "  c", "  ", "d", "", "")

    assert is_top_level_section(buffer, 3) is True
    assert is_top_level_section(buffer, 5) is False  # indented
    assert is_top_level_section(buffer, 7) is False  # previous line only whitespace
    assert is_top_level_section(buffer, 9) is False  # empty itself


def test_builtin_schemes_carry_anchor_rules() -> None:
    assert BuiltinScheme.TOP_LEVEL.definition is TOP_LEVEL_SECTION
    assert BuiltinScheme.DEFINITION.definition is DEFINITION_HEADER
    assert TOP_LEVEL_SECTION.anchor is Anchor.END
    assert TOP_LEVEL_SECTION.zero_width is True
    assert DEFINITION_HEADER.anchor is Anchor.START
    assert DEFINITION_HEADER.zero_width is False


def test_registry_resolves_ids_aliases_and_enum_members() -> None:
    registry = SchemeRegistry.with_builtins()

    assert registry.get("top_level") is TOP_LEVEL_SECTION
    assert registry.get("A") is TOP_LEVEL_SECTION
    assert registry.get("B") is DEFINITION_HEADER
    assert registry.get(BuiltinScheme.DEFINITION) is DEFINITION_HEADER
    assert registry.scheme("A") is is_top_level_section
    assert "B" in registry
    assert registry.ids() == ("top_level", "definition")


def test_registry_unknown_scheme_raises_key_error() -> None:
    registry = SchemeRegistry.with_builtins()

    with pytest.raises(UnknownSchemeError) as excinfo:
        registry.get("C")

    assert isinstance(excinfo.value, KeyError)
    assert excinfo.value.scheme_id == "C"


def test_register_custom_scheme() -> None:
    registry = SchemeRegistry.with_builtins()
    definition = make_definition(aliases=("H",))

    registry.register(definition)

    assert registry.get("H") is definition
    assert registry.stats().scheme_count == 3


def test_register_conflicting_alias_raises() -> None:
    registry = SchemeRegistry.with_builtins()

    with pytest.raises(SchemeConflictError) as excinfo:
        registry.register(make_definition(aliases=("A",)))

    assert excinfo.value.conflicts == (TOP_LEVEL_SECTION,)
    assert registry.get("A") is TOP_LEVEL_SECTION


def test_register_replace_evicts_conflicts() -> None:
    registry = SchemeRegistry.with_builtins()
    replacement = make_definition(aliases=("A",))

    registry.register(replacement, replace=True)

    assert registry.get("A") is replacement
    assert "top_level" not in registry


def test_unregister_removes_aliases() -> None:
    registry = SchemeRegistry.with_builtins()

    removed = registry.unregister("definition")

    assert removed is DEFINITION_HEADER
    assert "B" not in registry
    assert registry.unregister("definition") is None


def test_scheme_definition_validation() -> None:
    with pytest.raises(ValueError):
        SchemeDefinition(id="", predicate=lambda b, l: True, anchor=Anchor.START)
    with pytest.raises(TypeError):
        SchemeDefinition(id="x", predicate="nope", anchor=Anchor.START)  # type: ignore[arg-type]
