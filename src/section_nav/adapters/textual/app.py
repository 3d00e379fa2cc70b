"""Executable Textual app that browses a file with section motions."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import VerticalScroll
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use section_nav.adapters.textual.app"
    ) from exc

from section_nav.buffer import TextBuffer
from section_nav.session import NavigationSession

from .controller import SessionUIHooks, SessionView, TextualSectionAdapter


def render_view(view: SessionView) -> Text:
    """Render buffer lines with a gutter, the cursor, and the selection."""

    rendered = Text()
    lines = view.text.split("\n")
    selection = view.selection
    width = len(str(len(lines)))
    for number, line in enumerate(lines, start=1):
        marker = ">" if number == view.cursor.line else " "
        rendered.append(f"{marker}{number:>{width}} ", style="dim")
        selected = (
            selection is not None
            and selection.start.line <= number <= selection.end.line
        )
        body = Text(line or " ", style="reverse" if selected else "")
        if number == view.cursor.line:
            column = min(view.cursor.column, max(len(line) - 1, 0))
            body.stylize("bold underline", column, column + 1)
        rendered.append_text(body)
        rendered.append("\n")
    return rendered


class SectionNavApp(App[None]):
    """Minimal Textual UI for trying the section motions on a file."""

    CSS = """
	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, buffer: TextBuffer) -> None:
        super().__init__()
        self.session = NavigationSession(buffer)
        self.adapter: TextualSectionAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll():
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = SessionUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            handle_event=self._handle_event,
        )
        self.adapter = TextualSectionAdapter(self.session, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+c", "ctrl+q"}:
            return
        key = "ESC" if event.key == "escape" else event.character or event.key
        self.adapter.handle_key(key)
        event.stop()

    def _update_view(self, view: SessionView) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_view(view))
        mode = "EXTEND" if view.extend else "MOVE"
        self.sub_title = f"{mode} {view.cursor} {view.pending_keys}".rstrip()

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "motion.miss":
            self._update_status("no section boundary in that direction")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Browse a file with section motions (]] [[ ]m [m, v to extend)."
    )
    parser.add_argument("path", type=Path, help="File to open read-only")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    text = args.path.read_text(encoding="utf-8")
    app = SectionNavApp(TextBuffer.from_text(text, name=str(args.path)))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
