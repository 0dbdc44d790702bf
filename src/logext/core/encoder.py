"""Core – object encoders and the marshaler protocol."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class ObjectEncoder(Protocol):
    """Receives the key/value pairs of one marshaled object."""

    def add(self, key: str, value: Any) -> None: ...
    def add_object(self, key: str, obj: ObjectMarshaler) -> None: ...


@runtime_checkable
class ObjectMarshaler(Protocol):
    """Implemented by values that know how to write themselves into an encoder."""

    def marshal_log_object(self, enc: ObjectEncoder) -> None: ...


class MapObjectEncoder:
    """Encoder backed by a plain dict; nested objects become nested dicts."""

    def __init__(self) -> None:
        self.fields: dict[str, Any] = {}

    def add(self, key: str, value: Any) -> None:
        self.fields[key] = value

    def add_object(self, key: str, obj: ObjectMarshaler) -> None:
        nested = MapObjectEncoder()
        obj.marshal_log_object(nested)
        self.fields[key] = nested.fields

    def clone(self) -> MapObjectEncoder:
        copy = MapObjectEncoder()
        copy.fields = dict(self.fields)
        return copy


def marshal(obj: ObjectMarshaler) -> dict[str, Any]:
    """Marshal *obj* into a fresh dict."""
    enc = MapObjectEncoder()
    obj.marshal_log_object(enc)
    return enc.fields


__all__ = ["MapObjectEncoder", "ObjectEncoder", "ObjectMarshaler", "marshal"]
