from __future__ import annotations

from typing import Any, List, Tuple

from section_nav.adapters.textual import SessionUIHooks, SessionView, TextualSectionAdapter
from section_nav.buffer import Position, SelectionRange, TextBuffer
from section_nav.session import NavigationSession

LINES = ("a", "", "b", "c", "", "d", "", "e")


def make_adapter(
    views: List[SessionView] | None = None,
    statuses: List[str] | None = None,
    events: List[Tuple[str, Any]] | None = None,
    logs: List[str] | None = None,
) -> TextualSectionAdapter:
    session = NavigationSession(TextBuffer.from_lines(LINES))
    hooks = SessionUIHooks(
        update_view=(views.append if views is not None else lambda view: None),
        update_status=(statuses.append if statuses is not None else lambda status: None),
        handle_event=(
            (lambda name, payload: events.append((name, payload)))
            if events is not None
            else (lambda name, payload: None)
        ),
        log=(logs.append if logs is not None else lambda line: None),
    )
    return TextualSectionAdapter(session, hooks)


def test_adapter_runs_bound_sequence() -> None:
    views: List[SessionView] = []
    statuses: List[str] = []
    adapter = make_adapter(views, statuses)

    first = adapter.handle_key("]")
    second = adapter.handle_key("]")

    assert first is None
    assert second is not None and second.matched
    assert adapter.session.cursor == Position(3, 0)
    assert views[-1].cursor == Position(3, 0)
    assert statuses[-1] == "section.next"


def test_adapter_applies_count_prefix() -> None:
    adapter = make_adapter()

    for key in ("3", "]", "]"):
        adapter.handle_key(key)

    assert adapter.session.cursor == Position(8, 0)
    assert adapter.pending_keys == ""


def test_adapter_extend_toggle_and_cancel() -> None:
    views: List[SessionView] = []
    adapter = make_adapter(views)

    adapter.handle_key("v")
    adapter.handle_key("]")
    adapter.handle_key("]")
    adapter.handle_key("]")
    adapter.handle_key("]")

    assert adapter.extend is True
    assert adapter.session.selection == SelectionRange(Position(1, 0), Position(6, 0))
    assert views[-1].selection == adapter.session.selection

    adapter.handle_key("ESC")

    assert adapter.extend is False
    assert adapter.session.selection is None
    assert views[-1].extend is False


def test_adapter_reports_miss_and_unbound_keys() -> None:
    statuses: List[str] = []
    events: List[Tuple[str, Any]] = []
    logs: List[str] = []
    adapter = make_adapter(statuses=statuses, events=events, logs=logs)

    adapter.handle_key("[")
    result = adapter.handle_key("[")
    adapter.handle_key("z")

    assert result is not None and result.matched is False
    assert statuses[-1] == "section.previous:no_match"
    assert ("motion.miss", {"command": "section.previous", "cursor": Position(1, 0)}) in events
    assert any(line.startswith("miss ->") for line in logs)
    assert adapter.pending_keys == ""
