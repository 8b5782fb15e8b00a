"""Logging and profiling for the editor, on top of telelog.

``configure(preset=...)`` -- pick the console-friendly or quiet setup
``get_logger(name)`` -- cached telelog logger
``record_event(name, ...)`` -- one structured ``event::<name>`` record
``span(name, ...)`` -- profile a block; failures are logged and re-raised
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "LINE_EDITOR_"

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}") or None


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _pairs(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [(str(key), _text(value)) for key, value in data.items()]


def _build_config(preset: Optional[str]) -> Any:
    config = tl.Config()
    log_file = _env("LOG_FILE")

    if preset is None:
        config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
        config.with_console_output(_env("DISABLE_CONSOLE") is None)
        config.with_colored_output(_env("NO_COLOR") is None)
    elif preset == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif preset == "quiet":
        # interactive hosts: nothing on the console
        config.with_min_level("WARNING")
        config.with_console_output(False)
    else:
        raise ValueError(f"Unknown preset '{preset}'.")

    if log_file:
        config.with_file_output(log_file)
    config.with_profiling(True)
    return config


def configure(*, preset: Optional[str] = None) -> None:
    """Rebuild the telelog config; ``preset`` is ``development`` or ``quiet``.

    Without a preset the ``LINE_EDITOR_LOG_LEVEL``, ``LINE_EDITOR_LOG_FILE``,
    ``LINE_EDITOR_DISABLE_CONSOLE`` and ``LINE_EDITOR_NO_COLOR`` variables
    apply. Cached loggers are dropped.
    """

    global _CONFIG
    _CONFIG = _build_config(preset)
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or "line_editor"
    if logger_name not in _LOGGERS:
        if _CONFIG is None:
            configure()
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    structured = getattr(logger, f"{level.lower()}_with", None)
    if structured is not None:
        structured(message, _pairs(payload))
        return
    plain = getattr(logger, level.lower(), None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by ``span``; collects metadata reported if the block fails."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, **self.metadata, "reason": reason}
        if self.component_name:
            payload["component"] = self.component_name
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    log = get_logger(logger_name)
    context = {key: _text(value) for key, value in (metadata or {}).items()}

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))

        handle = SpanHandle(log, name, component, dict(context))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = ["SpanHandle", "configure", "get_logger", "record_event", "span"]
