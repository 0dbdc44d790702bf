"""Core – typed key/value fields.

A :class:`Field` carries exactly one payload kind. Cores inspect the kind to
decide how a value is encoded; :meth:`Field.of` infers it from a plain
Python value, which is what the structlog bridge uses.
"""
from __future__ import annotations

import dataclasses
import enum
from typing import Any

from logext.core.encoder import ObjectEncoder, ObjectMarshaler
from logext.kernel.errors import EncodingError


class FieldType(enum.Enum):
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    OBJECT = "object"
    ERROR = "error"
    REFLECTED = "reflected"


@dataclasses.dataclass(frozen=True)
class Field:
    key: str
    type: FieldType
    value: Any

    @classmethod
    def of(cls, key: str, value: Any) -> Field:
        """Build a field, inferring its type from *value*."""
        if isinstance(value, str):
            return cls(key, FieldType.STRING, value)
        if isinstance(value, bool):
            return cls(key, FieldType.BOOL, value)
        if isinstance(value, int):
            return cls(key, FieldType.INT, value)
        if isinstance(value, float):
            return cls(key, FieldType.FLOAT, value)
        if isinstance(value, BaseException):
            return cls(key, FieldType.ERROR, value)
        if isinstance(value, ObjectMarshaler):
            return cls(key, FieldType.OBJECT, value)
        return cls(key, FieldType.REFLECTED, value)

    def add_to(self, enc: ObjectEncoder) -> None:
        """Write the encoded value of this field into *enc*.

        Raises:
            EncodingError: the payload could not be marshaled.
        """
        if self.type is FieldType.OBJECT:
            try:
                enc.add_object(self.key, self.value)
            except EncodingError:
                raise
            except Exception as exc:
                raise EncodingError(
                    f"failed to marshal field {self.key!r}", key=self.key, cause=exc
                ) from exc
        elif self.type is FieldType.ERROR:
            enc.add(self.key, str(self.value) or type(self.value).__name__)
        else:
            enc.add(self.key, self.value)


def string(key: str, value: str) -> Field:
    return Field(key, FieldType.STRING, value)


def boolean(key: str, value: bool) -> Field:
    return Field(key, FieldType.BOOL, value)


def integer(key: str, value: int) -> Field:
    return Field(key, FieldType.INT, value)


def number(key: str, value: float) -> Field:
    return Field(key, FieldType.FLOAT, value)


def obj(key: str, value: ObjectMarshaler) -> Field:
    return Field(key, FieldType.OBJECT, value)


def error(err: BaseException, key: str = "error") -> Field:
    return Field(key, FieldType.ERROR, err)


def reflected(key: str, value: Any) -> Field:
    return Field(key, FieldType.REFLECTED, value)


__all__ = [
    "Field",
    "FieldType",
    "boolean",
    "error",
    "integer",
    "number",
    "obj",
    "reflected",
    "string",
]
