"""Sentry adapter – severity mapping and event assembly."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from logext.adapters.sentry.classifier import ClassifiedFields
from logext.adapters.sentry.request import request_to_dict
from logext.adapters.sentry.stacktrace import ExceptionRecord
from logext.core.entry import Entry
from logext.core.level import Level
from logext.kernel.errors import UnknownLevelError

DEFAULT_PLATFORM = "python"

SEVERITY: dict[Level, str] = {
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
    Level.DPANIC: "fatal",
    Level.PANIC: "fatal",
    Level.FATAL: "fatal",
}


def severity(level: Any) -> str:
    """Map a log level onto Sentry's level vocabulary.

    Raises:
        UnknownLevelError: *level* is not one of the seven defined levels.
    """
    try:
        return SEVERITY[level]
    except (KeyError, TypeError):
        raise UnknownLevelError(level) from None


@dataclasses.dataclass
class SentryEvent:
    level: str
    message: str
    timestamp: datetime
    platform: str = DEFAULT_PLATFORM
    logger: str | None = None
    event_id: str | None = None
    project: str | None = None
    culprit: str | None = None
    server_name: str | None = None
    tags: dict[str, str] | None = None
    extra: dict[str, Any] | None = None
    exception: ExceptionRecord | None = None
    request: dict[str, Any] | None = None
    user: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise into the event payload understood by Sentry."""
        payload: dict[str, Any] = {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "platform": self.platform,
        }
        optional = {
            "event_id": self.event_id,
            "logger": self.logger,
            "project": self.project,
            "culprit": self.culprit,
            "server_name": self.server_name,
            "tags": self.tags,
            "extra": self.extra,
            "request": self.request,
            "user": self.user,
        }
        payload.update({k: v for k, v in optional.items() if v})
        if self.culprit:
            payload["transaction"] = self.culprit
        if self.exception is not None:
            payload["exception"] = {"values": [self.exception.to_dict()]}
        return payload


def build_event(
    entry: Entry,
    fields: ClassifiedFields,
    exception: ExceptionRecord | None,
) -> SentryEvent:
    """Assemble the event for one entry. Pure: no I/O, inputs are not modified."""
    return SentryEvent(
        level=severity(entry.level),
        message=entry.message,
        timestamp=fields.timestamp or entry.time,
        platform=fields.platform or DEFAULT_PLATFORM,
        logger=fields.logger or entry.logger_name or None,
        event_id=fields.event_id,
        project=fields.project,
        culprit=fields.culprit,
        server_name=fields.server_name,
        tags=dict(fields.tags) if fields.tags else None,
        extra=dict(fields.extra) if fields.extra else None,
        exception=exception,
        request=request_to_dict(fields.request) if fields.request is not None else None,
        user=fields.user.to_dict() if fields.user is not None else None,
    )


__all__ = ["DEFAULT_PLATFORM", "SEVERITY", "SentryEvent", "build_event", "severity"]
