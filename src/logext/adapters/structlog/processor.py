"""structlog bridge – CoreProcessor.

Feeds structlog events into a :class:`~logext.core.Core`::

    import structlog

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            CoreProcessor(SentryCore(Level.ERROR, transport)),
            structlog.processors.JSONRenderer(),
        ],
    )

Bound context and call keyword arguments become per-call fields.
"""
from __future__ import annotations

import sys
from datetime import UTC, datetime
from typing import Any

import structlog

from logext.core.core import Core
from logext.core.entry import Entry
from logext.core.field import Field, error
from logext.core.level import Level

_METHOD_LEVELS: dict[str, Level] = {
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "msg": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
    "exception": Level.ERROR,
    "critical": Level.FATAL,
    "fatal": Level.FATAL,
}

_CONSUMED_KEYS = ("event", "level", "logger", "timestamp", "exc_info")


def _level(method_name: str, event_dict: dict[str, Any]) -> Level:
    name = str(event_dict.get("level", method_name)).lower()
    return _METHOD_LEVELS.get(name) or Level.parse(name)


def _time(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, UTC)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
    return datetime.now(UTC)


def _exception(exc_info: Any) -> BaseException | None:
    if isinstance(exc_info, BaseException):
        return exc_info
    if isinstance(exc_info, tuple):
        return exc_info[1]
    if exc_info:
        return sys.exc_info()[1]
    return None


class CoreProcessor:
    """structlog processor that writes every event to *core*.

    The event dict is passed on untouched, so rendering can continue after
    this processor. With ``drop=True`` the event stops here instead.
    """

    def __init__(self, core: Core, *, drop: bool = False) -> None:
        self._core = core
        self._drop = drop

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        level = _level(method_name, event_dict)
        logger_name = event_dict.get("logger") or getattr(logger, "name", "") or ""
        entry = Entry(
            level=level,
            message=str(event_dict.get("event", "")),
            time=_time(event_dict.get("timestamp")),
            logger_name=str(logger_name),
        )

        checked = self._core.check(entry)
        if checked is not None:
            fields = [Field.of(k, v) for k, v in event_dict.items() if k not in _CONSUMED_KEYS]
            exc = _exception(event_dict.get("exc_info"))
            if exc is not None and "error" not in event_dict:
                fields.append(error(exc))
            checked.write(*fields)

        if self._drop:
            raise structlog.DropEvent
        return event_dict


__all__ = ["CoreProcessor"]
