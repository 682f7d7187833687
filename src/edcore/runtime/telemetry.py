"""Telelog-backed tracing of buffer operations.

``get_logger()`` -- the engine logger, built from ``EDCORE_*`` variables
``record_event(name, ...)`` -- emit one structured ``event::<name>`` record
``span(operation, ...)`` -- profile a buffer operation and log how it ended
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "EDCORE_"

_LOGGER: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _build_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "WARNING").upper())
    config.with_console_output(not _env_flag("DISABLE_CONSOLE"))
    config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    # span() relies on logger.profile
    config.with_profiling(True)
    return config


def get_logger() -> Any:
    """Return the engine's ``telelog.Logger``, building it on first use."""

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = tl.Logger.with_config(_env("LOGGER") or "edcore", _build_config())
    return _LOGGER


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    with_data = getattr(log, f"{level}_with", None)
    if with_data is not None:
        with_data(message, [(key, str(value)) for key, value in payload.items()])
    else:
        getattr(log, level)(f"{message} {payload}")


def record_event(
    name: str, *, level: str = "debug", data: Optional[Dict[str, Any]] = None
) -> None:
    _emit(get_logger(), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """What a running buffer operation reports once it finishes.

    Operations fill in ``lines`` with the number of lines they produced.
    """

    logger: Any
    operation: str
    buffer: str
    selection: Optional[Tuple[int, int]] = None
    lines: Optional[int] = None

    def payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"operation": self.operation, "buffer": self.buffer}
        if self.selection is not None:
            payload["selection"] = f"{self.selection[0]},{self.selection[1]}"
        if self.lines is not None:
            payload["lines"] = self.lines
        return payload

    def done(self) -> None:
        _emit(self.logger, "debug", "span::done", self.payload())

    def fail(self, error: Exception) -> None:
        payload = self.payload()
        kind = getattr(error, "kind", None)
        if kind is not None:
            payload["kind"] = kind.name
        payload["reason"] = str(error)
        _emit(self.logger, "info", "span::fail", payload)


@contextmanager
def span(
    operation: str,
    *,
    buffer: str,
    selection: Optional[Tuple[int, int]] = None,
) -> Iterator[SpanHandle]:
    """Profile ``operation`` on ``buffer`` and log ``span::done`` or ``span::fail``."""

    log = get_logger()
    handle = SpanHandle(
        logger=log, operation=operation, buffer=buffer, selection=selection
    )
    log.add_context("buffer", buffer)
    try:
        with log.profile(f"buffer::{operation}"):
            yield handle
    except Exception as exc:
        handle.fail(exc)
        raise
    else:
        handle.done()
    finally:
        log.remove_context("buffer")


__all__ = ["SpanHandle", "get_logger", "record_event", "span"]
