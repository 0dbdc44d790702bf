"""Syslog adapter – SyslogCore."""
from __future__ import annotations

from typing import Sequence

from logext.adapters.syslog.encoders import Encoder
from logext.adapters.syslog.writer import SyslogWriter
from logext.core.core import Core
from logext.core.entry import Entry
from logext.core.field import Field
from logext.core.level import Level, LevelEnabler
from logext.kernel.errors import UnknownLevelError

_PRIORITY: dict[Level, str] = {
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "err",
    Level.DPANIC: "crit",
    Level.PANIC: "crit",
    Level.FATAL: "crit",
}


class SyslogCore(Core):
    """Core that encodes entries and writes them to syslog at a level-derived priority."""

    def __init__(
        self,
        enabler: LevelEnabler | Level | str,
        encoder: Encoder,
        writer: SyslogWriter,
    ) -> None:
        super().__init__(enabler)
        self._encoder = encoder
        self._writer = writer

    def with_fields(self, fields: Sequence[Field]) -> SyslogCore:
        clone = SyslogCore(self._enabler, self._encoder.clone(), self._writer)
        clone._encoder.add_fields(fields)
        return clone

    def write(self, entry: Entry, fields: Sequence[Field]) -> None:
        try:
            priority = _PRIORITY[entry.level]
        except (KeyError, TypeError):
            raise UnknownLevelError(entry.level) from None

        message = self._encoder.encode_entry(entry, fields)
        getattr(self._writer, priority)(message)


__all__ = ["SyslogCore"]
