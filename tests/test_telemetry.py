from __future__ import annotations

from contextlib import nullcontext
from types import SimpleNamespace
from typing import Any, List, Tuple

import pytest

from section_nav.buffer import Position, TextBuffer
from section_nav.motions import MovementController
from section_nav.runtime import telemetry
from section_nav.schemes import Direction


class RecordingLogger:
    def __init__(self) -> None:
        self.lines: List[Tuple[str, str, dict]] = []
        self.components: List[str] = []
        self.profiled: List[str] = []

    def debug_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.lines.append(("debug", message, dict(pairs)))

    def error_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.lines.append(("error", message, dict(pairs)))

    def info(self, message: str) -> None:
        self.lines.append(("info", message, {}))

    def track_component(self, name: str) -> Any:
        self.components.append(name)
        return nullcontext()

    def profile(self, name: str) -> Any:
        self.profiled.append(name)
        return nullcontext()


class RecordingConfig:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []

    def __getattr__(self, name: str) -> Any:
        return lambda value: self.calls.append((name, value))


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    logger = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: logger)
    return logger


def test_get_logger_caches_until_reconfigured() -> None:
    first = telemetry.get_logger("section_nav.tests")

    assert telemetry.get_logger("section_nav.tests") is first

    telemetry.configure()
    assert telemetry.get_logger("section_nav.tests") is not first


def test_config_from_env_reads_prefixed_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    configs: List[RecordingConfig] = []

    def make_config() -> RecordingConfig:
        configs.append(RecordingConfig())
        return configs[-1]

    monkeypatch.setattr(telemetry, "tl", SimpleNamespace(Config=make_config))
    monkeypatch.setenv("SECTION_NAV_LOG_LEVEL", "debug")
    monkeypatch.setenv("SECTION_NAV_LOG_FILE", "nav.log")
    monkeypatch.setenv("SECTION_NAV_NO_COLOR", "1")
    monkeypatch.setenv("SECTION_NAV_PROFILE", "yes")

    telemetry.config_from_env()

    assert configs[0].calls == [
        ("with_min_level", "DEBUG"),
        ("with_console_output", True),
        ("with_colored_output", False),
        ("with_file_output", "nav.log"),
        ("with_profiling", True),
    ]


def test_span_logs_summary_with_fields_and_status(recorder: RecordingLogger) -> None:
    with telemetry.span(
        "motion::move", component="motions", fields={"direction": Direction.FORWARD}
    ) as handle:
        handle.set_status("match")
        handle.add_metadata("target", Position(3, 0))

    assert recorder.components == ["motions"]
    assert recorder.profiled == ["motion::move"]
    assert recorder.lines == [
        (
            "debug",
            "span::motion::move",
            {
                "span": "motion::move",
                "status": "match",
                "direction": "forward",
                "target": "3:0",
            },
        )
    ]


def test_span_logs_error_and_reraises(recorder: RecordingLogger) -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("tests::boom", fields={"extend": True}):
            raise RuntimeError("boom")

    level, message, fields = recorder.lines[-1]
    assert (level, message) == ("error", "span::tests::boom")
    assert fields == {"span": "tests::boom", "status": "error", "extend": "yes", "reason": "boom"}


def test_record_event_uses_plain_method_without_structured_variant(
    recorder: RecordingLogger,
) -> None:
    telemetry.record_event("buffer.load", data={"lines": 2})

    assert recorder.lines == [("info", "event::buffer.load {'lines': '2'}", {})]
    with pytest.raises(ValueError):
        telemetry.record_event("buffer.load", level="verbose")


def test_motion_span_reports_scheme_direction_and_outcome(
    recorder: RecordingLogger,
) -> None:
    controller = MovementController()
    buffer = TextBuffer.from_lines(["a", "", "b"])

    controller.move(buffer, Position(1, 0), "A", Direction.FORWARD)
    controller.move(buffer, Position(1, 0), "A", Direction.BACKWARD)

    summaries = [fields for _, message, fields in recorder.lines if message == "span::motion::move"]
    assert [summary["status"] for summary in summaries] == ["match", "miss"]
    assert summaries[0]["scheme"] == "top_level"
    assert summaries[0]["direction"] == "forward"
    assert summaries[0]["target"] == "3:0"
    assert summaries[1]["direction"] == "backward"
    assert any(message == "event::motion.no_match" for _, message, _ in recorder.lines)
