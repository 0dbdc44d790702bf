"""Sentry adapter – significant field keys."""
from __future__ import annotations

from logext.core.field import Field, boolean

TAG_PREFIX = "#"

EVENT_ID_KEY = "event_id"
PROJECT_KEY = "project"
TIMESTAMP_KEY = "timestamp"
LOGGER_KEY = "logger"
PLATFORM_KEY = "platform"
CULPRIT_KEY = "culprit"
SERVER_NAME_KEY = "server_name"
ERROR_KEY = "error"
HTTP_REQUEST_KEY = "http_request"
USER_KEY = "user"

SKIP_KEY = "_logext_sentry_skip"


def skip() -> Field:
    """Return a field that tells :class:`SentryCore` to drop the entry."""
    return boolean(SKIP_KEY, True)


__all__ = [
    "CULPRIT_KEY",
    "ERROR_KEY",
    "EVENT_ID_KEY",
    "HTTP_REQUEST_KEY",
    "LOGGER_KEY",
    "PLATFORM_KEY",
    "PROJECT_KEY",
    "SERVER_NAME_KEY",
    "SKIP_KEY",
    "TAG_PREFIX",
    "TIMESTAMP_KEY",
    "USER_KEY",
    "skip",
]
