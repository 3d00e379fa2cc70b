"""Textual host adapter; the demo app lives in ``section_nav.adapters.textual.app``."""

from .controller import SessionUIHooks, SessionView, TextualSectionAdapter

__all__ = ["SessionUIHooks", "SessionView", "TextualSectionAdapter"]
