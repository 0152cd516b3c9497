"""Logger construction with production (JSON) and development (console) presets."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class InvalidLogLevelError(ValueError):
    """Raised when a log level is not recognised."""

    def __init__(self, message: str = "logger: invalid log level") -> None:
        super().__init__(message)


_LEVEL_NAMES = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}
_LEVEL_VALUES = frozenset(_LEVEL_NAMES.values())

_COLORS = {
    logging.DEBUG: "\x1b[35m",
    logging.INFO: "\x1b[34m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[31m",
}
_RESET = "\x1b[0m"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, bool):
        raise InvalidLogLevelError()
    if isinstance(level, int):
        if level in _LEVEL_VALUES:
            return level
        raise InvalidLogLevelError()
    if isinstance(level, str) and level.lower() in _LEVEL_NAMES:
        return _LEVEL_NAMES[level.lower()]
    raise InvalidLogLevelError()


def _fields(record: logging.LogRecord) -> dict[str, Any]:
    extra = getattr(record, "fields", None)
    return dict(extra) if isinstance(extra, dict) else {}


class _JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.levelname.lower(),
            "ts": record.created,
            "msg": record.getMessage(),
        }
        entry.update(_fields(record))
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class _ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        color = _COLORS.get(record.levelno, "")
        level = f"{color}{record.levelname}{_RESET}"
        line = f"{ts}\t{level}\t{record.pathname}:{record.lineno}\t{record.getMessage()}"
        extra = _fields(record)
        if extra:
            line += "\t" + json.dumps(extra, default=str)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class _Sampler(logging.Filter):
    """Per second, pass the first ``initial`` repeats of a message, then every ``thereafter``th."""

    def __init__(self, initial: int = 100, thereafter: int = 100, tick: float = 1.0) -> None:
        super().__init__()
        self._initial = initial
        self._thereafter = thereafter
        self._tick = tick
        self._counts: dict[tuple[int, str], tuple[int, int]] = {}

    def filter(self, record: logging.LogRecord) -> bool:
        window = int(record.created // self._tick)
        key = (record.levelno, str(record.msg))
        start, count = self._counts.get(key, (window, 0))
        if start != window:
            self._counts = {k: v for k, v in self._counts.items() if v[0] == window}
            count = 0
        count += 1
        self._counts[key] = (window, count)
        if count <= self._initial:
            return True
        return (count - self._initial) % self._thereafter == 0


def new_logger(env: str, level: int | str) -> logging.Logger:
    """Build a logger for ``env`` at ``level``.

    ``"production"`` gives JSON lines with sampling; any other environment
    gives coloured console lines with caller information. Raises
    InvalidLogLevelError for an unknown level.
    """
    resolved = _resolve_level(level)
    production = env == "production"
    logger = logging.Logger("runeplan", level=resolved)
    handler = logging.StreamHandler(sys.stderr)
    if production:
        handler.setFormatter(_JSONFormatter())
        handler.addFilter(_Sampler())
    else:
        handler.setFormatter(_ConsoleFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger