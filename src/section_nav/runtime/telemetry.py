"""telelog plumbing for the navigation core.

Motions and registry writes run inside :func:`span`, which profiles the block
and closes it with one structured ``span::<name>`` line carrying the fields the
caller collected (scheme, direction, outcome, ...).  Standalone outcomes such
as a motion miss go through :func:`record_event`.

Loggers share one ``telelog.Config``.  Unless :func:`configure` is handed an
explicit config it is built from the ``SECTION_NAV_*`` environment:

``SECTION_NAV_LOGGER``     default logger name (``section_nav``)
``SECTION_NAV_LOG_LEVEL``  minimum level (``WARNING``)
``SECTION_NAV_LOG_FILE``   also write to this file
``SECTION_NAV_NO_COLOR``   plain console output
``SECTION_NAV_PROFILE``    enable telelog profiling for spans
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "SECTION_NAV_"

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _setting(name: str, default: str = "") -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _enabled(name: str) -> bool:
    return _setting(name).lower() in {"1", "true", "yes", "on"}


def config_from_env() -> Any:
    config = tl.Config()
    config.with_min_level(_setting("LOG_LEVEL", "WARNING").upper())
    config.with_console_output(True)
    config.with_colored_output(not _enabled("NO_COLOR"))

    log_file = _setting("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    if _enabled("PROFILE"):
        config.with_profiling(True)
    return config


def configure(config: Optional[Any] = None) -> None:
    """Adopt ``config`` (or rebuild from the environment) for new loggers."""

    global _CONFIG
    _CONFIG = config if config is not None else config_from_env()
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = config_from_env()

    logger_name = name or _setting("LOGGER", "section_nav")
    if logger_name not in _LOGGERS:
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def _field(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def _log(logger: Any, level: str, message: str, fields: Dict[str, Any]) -> None:
    pairs = [(key, _field(value)) for key, value in fields.items()]
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, pairs)
        return

    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _log(get_logger(logger_name), level.lower(), f"event::{name}", dict(data or {}))


@dataclass
class SpanHandle:
    """Fields and outcome reported when the owning span closes."""

    name: str
    fields: Dict[str, str] = field(default_factory=dict)
    status: str = "ok"

    def add_metadata(self, key: str, value: Any) -> None:
        self.fields[key] = _field(value)

    def set_status(self, status: str) -> None:
        self.status = status

    def fail(self, reason: str) -> None:
        self.status = "error"
        self.fields["reason"] = reason

    def summary(self) -> Dict[str, str]:
        return {"span": self.name, "status": self.status, **self.fields}


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    fields: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, track it under ``component`` and log its summary.

    The summary goes out at debug level, or at error level when the block
    raises; the exception is always re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(name)
    for key, value in (fields or {}).items():
        handle.add_metadata(key, value)

    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            _log(log, "error", f"span::{name}", handle.summary())
            raise
    _log(log, "debug", f"span::{name}", handle.summary())


__all__ = [
    "SpanHandle",
    "config_from_env",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
