"""Middleware – FilteringCore."""
from __future__ import annotations

from typing import Callable, Sequence

from logext.core.core import Core
from logext.core.entry import Entry
from logext.core.field import Field
from logext.core.level import Level

FilterFunc = Callable[[Entry, Sequence[Field]], bool]


class FilteringCore(Core):
    """Wraps *next* and only writes the entries *filter* accepts.

    The filter sees the entry together with the fields of the call.
    Everything else is delegated to the wrapped core.
    """

    def __init__(self, next: Core, filter: FilterFunc) -> None:  # noqa: A002
        self._next = next
        self._filter = filter

    def enabled(self, level: Level) -> bool:
        return self._next.enabled(level)

    def with_fields(self, fields: Sequence[Field]) -> FilteringCore:
        return FilteringCore(self._next.with_fields(fields), self._filter)

    def write(self, entry: Entry, fields: Sequence[Field]) -> None:
        if not self._filter(entry, fields):
            return
        self._next.write(entry, fields)

    def sync(self) -> None:
        self._next.sync()


__all__ = ["FilterFunc", "FilteringCore"]
