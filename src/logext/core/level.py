"""Core – log levels and level enablers."""
from __future__ import annotations

import enum
from typing import Any, Callable, Protocol, runtime_checkable

from logext.kernel.errors import UnknownLevelError


class Level(enum.IntEnum):
    """Ordered log severity. Higher is more severe."""

    DEBUG = -1
    INFO = 0
    WARN = 1
    ERROR = 2
    DPANIC = 3
    PANIC = 4
    FATAL = 5

    def enabled(self, level: Level) -> bool:
        """A level used as an enabler lets through itself and everything above."""
        return level >= self

    @classmethod
    def parse(cls, name: str | Level) -> Level:
        if isinstance(name, Level):
            return name
        try:
            return _ALIASES[name.strip().lower()]
        except (KeyError, AttributeError):
            raise UnknownLevelError(name) from None


_ALIASES: dict[str, Level] = {
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
    "dpanic": Level.DPANIC,
    "panic": Level.PANIC,
    "fatal": Level.FATAL,
    "critical": Level.FATAL,
}


@runtime_checkable
class LevelEnabler(Protocol):
    """Decides whether a given level is enabled."""

    def enabled(self, level: Level) -> bool: ...


class _CallableEnabler:
    def __init__(self, fn: Callable[[Level], bool]) -> None:
        self._fn = fn

    def enabled(self, level: Level) -> bool:
        return bool(self._fn(level))

    def __repr__(self) -> str:
        return f"LevelEnablerFunc({self._fn!r})"


def as_enabler(value: Any) -> LevelEnabler:
    """Coerce a ``Level``, a level name, a predicate or an enabler."""
    if isinstance(value, (Level, LevelEnabler)):
        return value
    if isinstance(value, str):
        return Level.parse(value)
    if callable(value):
        return _CallableEnabler(value)
    raise TypeError(f"cannot use {type(value).__name__} as a level enabler")


__all__ = ["Level", "LevelEnabler", "as_enabler"]
