"""Syslog adapter – entry encoders built on structlog renderers."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Protocol

import structlog

from logext.core.encoder import MapObjectEncoder
from logext.core.entry import Entry
from logext.core.field import Field
from logext.kernel.errors import EncodingError

Renderer = Callable[[Any, str, dict[str, Any]], Any]

_ENTRY_KEYS = frozenset({"timestamp", "level", "logger", "event"})

# prepended to field keys that collide with the entry's own keys
CLASH_PREFIX = "fields."


class Encoder(Protocol):
    def clone(self) -> Encoder: ...
    def add_fields(self, fields: Iterable[Field]) -> None: ...
    def encode_entry(self, entry: Entry, fields: Iterable[Field]) -> str: ...


class RendererEncoder:
    """Encodes an entry plus its fields with a structlog renderer.

    Fields added with :meth:`add_fields` are kept and rendered with every entry.
    A field named like an entry key (``event``, ``level``, ...) is rendered
    under :data:`CLASH_PREFIX` so it cannot replace the entry's own value.
    """

    def __init__(self, renderer: Renderer) -> None:
        self._renderer = renderer
        self._context = MapObjectEncoder()

    def clone(self) -> RendererEncoder:
        copy = type(self).__new__(type(self))
        copy._renderer = self._renderer
        copy._context = self._context.clone()
        return copy

    def add_fields(self, fields: Iterable[Field]) -> None:
        for field in fields:
            field.add_to(self._context)

    def encode_entry(self, entry: Entry, fields: Iterable[Field]) -> str:
        enc = self._context.clone()
        for field in fields:
            field.add_to(enc)

        method_name = entry.level.name.lower()
        event_dict: dict[str, Any] = {
            "timestamp": entry.time.isoformat(),
            "level": method_name,
        }
        if entry.logger_name:
            event_dict["logger"] = entry.logger_name
        event_dict["event"] = entry.message
        for key, value in enc.fields.items():
            if key in _ENTRY_KEYS:
                key = CLASH_PREFIX + key
            event_dict[key] = value

        try:
            rendered = self._renderer(None, method_name, event_dict)
        except Exception as exc:
            raise EncodingError("failed to encode log entry", cause=exc) from exc
        return rendered.decode("utf-8") if isinstance(rendered, bytes) else str(rendered)


class JSONEncoder(RendererEncoder):
    def __init__(self, **dumps_kw: Any) -> None:
        super().__init__(structlog.processors.JSONRenderer(**dumps_kw))


class KeyValueEncoder(RendererEncoder):
    def __init__(self) -> None:
        super().__init__(
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "logger", "event"],
                drop_missing=True,
            )
        )


__all__ = ["CLASH_PREFIX", "Encoder", "JSONEncoder", "KeyValueEncoder", "RendererEncoder"]
