"""Core – the pluggable backend contract implemented by every sink."""
from __future__ import annotations

import abc
import logging
from typing import Sequence

from logext.core.entry import Entry
from logext.core.field import Field
from logext.core.level import Level, LevelEnabler, as_enabler

logger = logging.getLogger(__name__)


class Core(abc.ABC):
    """A sink that a logging front end writes entries to.

    ``with_fields`` derives a new core; it must never change the receiver.
    """

    def __init__(self, enabler: LevelEnabler | Level | str) -> None:
        self._enabler = as_enabler(enabler)

    def enabled(self, level: Level) -> bool:
        return self._enabler.enabled(level)

    @abc.abstractmethod
    def with_fields(self, fields: Sequence[Field]) -> Core: ...

    def check(self, entry: Entry, checked: CheckedEntry | None = None) -> CheckedEntry | None:
        """Register this core on *checked* when the entry level is enabled."""
        if self.enabled(entry.level):
            return (checked or CheckedEntry(entry)).add_core(self)
        return checked

    @abc.abstractmethod
    def write(self, entry: Entry, fields: Sequence[Field]) -> None: ...

    def sync(self) -> None:
        """Flush buffered entries. Cores without buffers do nothing."""


class CheckedEntry:
    """An entry that passed ``check`` on at least one core."""

    def __init__(self, entry: Entry) -> None:
        self.entry = entry
        self.cores: list[Core] = []

    def add_core(self, core: Core) -> CheckedEntry:
        self.cores.append(core)
        return self

    def write(self, *fields: Field) -> None:
        """Write to every registered core; the first failure is re-raised."""
        errors: list[Exception] = []
        for core in self.cores:
            try:
                core.write(self.entry, fields)
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)
        if not errors:
            return
        for extra in errors[1:]:
            logger.error("additional core write failure: %r", extra)
        raise errors[0]


__all__ = ["CheckedEntry", "Core"]
