"""Logging for the tab strip, built on ``telelog.get_logger``.

One package logger (``recency_tabs``) carries the handlers telelog sets up;
component loggers are its children and propagate to it. Handlers follow the
``RECENCY_TABS_*`` environment variables unless ``configure`` overrides them:

``LOG_LEVEL``   minimum level, default ``INFO``
``LOG_FILE``    midnight-rotated log file, off when unset
``CONSOLE``     also write to stdout, off by default
``LOG_FORMAT``  telelog line format, ``default`` or ``digital_life``

``record_event`` writes a single ``event::<name> key=value ...`` line and
``span`` times a block, logging its metadata and elapsed time on exit.
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, Optional

import telelog  # type: ignore[import]

ENV_PREFIX = "RECENCY_TABS_"
DEFAULT_LOGGER_NAME = "recency_tabs"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "FATAL")
FORMATS = ("default", "digital_life")

_ROOT_LOGGER: Optional[logging.Logger] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> str:
    return " ".join(f"{key}={_stringify(value)}" for key, value in data.items())


@dataclass(frozen=True)
class LogSettings:
    """Handler settings handed to telelog for the package logger."""

    level: str = "INFO"
    log_file: Optional[str] = None
    console: bool = False
    log_format: str = "default"

    def __post_init__(self) -> None:
        if self.level not in LEVELS:
            raise ValueError(
                f"Unsupported log level '{self.level}'; expected one of {LEVELS}."
            )
        if self.log_format not in FORMATS:
            raise ValueError(f"Unknown log format '{self.log_format}'.")

    @classmethod
    def from_env(cls) -> "LogSettings":
        return cls(
            level=(_env("LOG_LEVEL") or "INFO").upper(),
            log_file=_env("LOG_FILE") or None,
            console=_env_flag("CONSOLE", False),
            log_format=_env("LOG_FORMAT") or "default",
        )


def _build(settings: LogSettings, existing: Optional[logging.Logger]) -> logging.Logger:
    if existing is not None:
        for handler in list(existing.handlers):
            handler.close()
    # telelog drops the handlers of a logger it is handed before adding new ones.
    return telelog.get_logger(
        existing,
        name=DEFAULT_LOGGER_NAME,
        level=settings.level,
        log_path=settings.log_file,
        terminal=settings.console,
        log_format=settings.log_format,
    )


def configure(
    *,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console: Optional[bool] = None,
) -> LogSettings:
    """Rebuild the package logger from the environment plus overrides.

    Arguments left as ``None`` keep the value from ``RECENCY_TABS_*``.
    Component loggers handed out earlier stay valid since they only
    propagate to the package logger.
    """

    global _ROOT_LOGGER
    overrides: Dict[str, Any] = {}
    if level is not None:
        overrides["level"] = level.upper()
    if log_file is not None:
        overrides["log_file"] = log_file
    if console is not None:
        overrides["console"] = console

    settings = replace(LogSettings.from_env(), **overrides)
    _ROOT_LOGGER = _build(settings, _ROOT_LOGGER)
    return settings


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it for ``recency_tabs.<x>``."""

    if _ROOT_LOGGER is None:
        configure()
    assert _ROOT_LOGGER is not None
    if not name or name == DEFAULT_LOGGER_NAME:
        return _ROOT_LOGGER
    return _ROOT_LOGGER.getChild(name.removeprefix(f"{DEFAULT_LOGGER_NAME}."))


def _level_number(level: str | int) -> int:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(str(level).upper())
    if not isinstance(number, int):
        raise ValueError(f"Unsupported log level '{level}'.")
    return number


def record_event(
    name: str,
    *,
    level: str | int = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` followed by ``data`` as key=value pairs."""

    message = f"event::{name}"
    if data:
        message = f"{message} {_format_pairs(data)}"
    get_logger(logger_name).log(_level_number(level), message)


@dataclass
class SpanHandle:
    """Handle returned from ``span`` for metadata updates inside the block."""

    logger: logging.Logger
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self.started) * 1000.0

    def _line(self, prefix: str, extra: Optional[Dict[str, Any]] = None) -> str:
        payload: Dict[str, Any] = dict(self.metadata)
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update(extra)
        payload["elapsed_ms"] = f"{self.elapsed_ms():.3f}"
        return f"{prefix} {self.span_name} {_format_pairs(payload)}"

    def done(self) -> None:
        self.logger.debug(self._line("span::done"))

    def fail(self, reason: str) -> None:
        self.logger.error(self._line("span::fail", {"reason": reason}))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a code block and log how it ended.

    Parameters
    ----------
    name:
        Operation name, e.g. ``"recency::visit"``.
    logger_name:
        Target logger; defaults to the package logger.
    component:
        ``True`` tags the span with its own name; a string tags it with that
        component identifier.
    metadata:
        Initial key/value pairs included in the closing line.
    """

    component_name = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    handle = SpanHandle(
        logger=get_logger(logger_name),
        span_name=name,
        component_name=component_name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )
    try:
        yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    handle.done()


__all__ = [
    "LogSettings",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
