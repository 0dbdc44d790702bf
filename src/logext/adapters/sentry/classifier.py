"""Sentry adapter – field classification and accumulation.

Every field of a write call lands in exactly one place:

* a well-known event attribute (``event_id``, ``server_name``, ...),
* the carried error, request or user,
* a tag, when the key starts with :data:`TAG_PREFIX`,
* the extra data otherwise.

The skip sentinel aborts the whole entry.
"""
from __future__ import annotations

import dataclasses
import itertools
import sys
from datetime import datetime
from typing import Any, Iterable

from logext.adapters.http.marshalers import HTTPRequest
from logext.adapters.sentry.keys import (
    CULPRIT_KEY,
    ERROR_KEY,
    EVENT_ID_KEY,
    HTTP_REQUEST_KEY,
    LOGGER_KEY,
    PLATFORM_KEY,
    PROJECT_KEY,
    SERVER_NAME_KEY,
    SKIP_KEY,
    TAG_PREFIX,
    TIMESTAMP_KEY,
    USER_KEY,
)
from logext.adapters.sentry.request import unwrap_request
from logext.adapters.sentry.user import User
from logext.core.encoder import MapObjectEncoder
from logext.core.field import Field, FieldType

_STRING_ATTRIBUTES: dict[str, str] = {
    EVENT_ID_KEY: "event_id",
    PROJECT_KEY: "project",
    PLATFORM_KEY: "platform",
    CULPRIT_KEY: "culprit",
    SERVER_NAME_KEY: "server_name",
    LOGGER_KEY: "logger",
}


@dataclasses.dataclass
class ClassifiedFields:
    """Per-call accumulator; never shared between write calls."""

    event_id: str | None = None
    project: str | None = None
    platform: str | None = None
    culprit: str | None = None
    server_name: str | None = None
    logger: str | None = None
    timestamp: datetime | None = None
    user: User | None = None
    request: Any = None
    error: BaseException | None = None
    tags: dict[str, str] = dataclasses.field(default_factory=dict)
    _extra: MapObjectEncoder = dataclasses.field(default_factory=MapObjectEncoder, repr=False)

    @property
    def extra(self) -> dict[str, Any]:
        return self._extra.fields


def _is_request(value: Any) -> bool:
    if type(value) is HTTPRequest:
        return True
    # an httpx.Request can only exist once httpx has been imported
    httpx = sys.modules.get("httpx")
    return httpx is not None and type(value) is httpx.Request


def _add_free_form(field: Field, fields: ClassifiedFields) -> None:
    if not field.key.startswith(TAG_PREFIX):
        field.add_to(fields._extra)
        return

    enc = MapObjectEncoder()
    field.add_to(enc)
    value = enc.fields[field.key]
    fields.tags[field.key[len(TAG_PREFIX):]] = value if isinstance(value, str) else str(value)


def classify(field: Field, fields: ClassifiedFields) -> bool:
    """Route *field* into *fields*. Returns ``False`` when the entry must be skipped."""
    key = field.key

    if key == SKIP_KEY:
        return False

    attribute = _STRING_ATTRIBUTES.get(key)
    if attribute is not None:
        if field.type is FieldType.STRING:
            setattr(fields, attribute, field.value)
            return True
    elif key == TIMESTAMP_KEY:
        if isinstance(field.value, datetime):
            fields.timestamp = field.value
            return True
    elif key == ERROR_KEY:
        if isinstance(field.value, BaseException):
            fields.error = field.value
            return True
    elif key == HTTP_REQUEST_KEY:
        if _is_request(field.value):
            fields.request = unwrap_request(field.value)
            return True
    elif key == USER_KEY:
        if type(field.value) is User:
            fields.user = field.value
            return True

    _add_free_form(field, fields)
    return True


def accumulate(
    base_fields: Iterable[Field],
    call_fields: Iterable[Field],
) -> tuple[ClassifiedFields, bool]:
    """Classify base fields, then call fields; stop at the first skip sentinel.

    Returns the accumulated fields and whether the entry was aborted.
    """
    fields = ClassifiedFields()
    for field in itertools.chain(base_fields, call_fields):
        if not classify(field, fields):
            return fields, True
    return fields, False


__all__ = ["ClassifiedFields", "accumulate", "classify"]
