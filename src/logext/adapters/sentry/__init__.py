"""Sentry adapter – reports log entries as Sentry events."""
from logext.adapters.sentry.classifier import ClassifiedFields, accumulate, classify
from logext.adapters.sentry.core import SentryCore
from logext.adapters.sentry.event import SEVERITY, SentryEvent, build_event, severity
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
    skip,
)
from logext.adapters.sentry.settings import Environment, SentrySettings
from logext.adapters.sentry.stacktrace import (
    ExceptionRecord,
    Frame,
    FrameSource,
    InspectFrameSource,
    filter_frames,
    resolve,
    root_cause,
)
from logext.adapters.sentry.transport import (
    CompletedDelivery,
    Delivery,
    FailedDelivery,
    SentrySdkTransport,
    Transport,
)
from logext.adapters.sentry.user import User, user_field

__all__ = [
    "CULPRIT_KEY",
    "ERROR_KEY",
    "EVENT_ID_KEY",
    "HTTP_REQUEST_KEY",
    "LOGGER_KEY",
    "PLATFORM_KEY",
    "PROJECT_KEY",
    "SERVER_NAME_KEY",
    "SEVERITY",
    "SKIP_KEY",
    "TAG_PREFIX",
    "TIMESTAMP_KEY",
    "USER_KEY",
    "ClassifiedFields",
    "CompletedDelivery",
    "Delivery",
    "Environment",
    "ExceptionRecord",
    "FailedDelivery",
    "Frame",
    "FrameSource",
    "InspectFrameSource",
    "SentryCore",
    "SentryEvent",
    "SentrySdkTransport",
    "SentrySettings",
    "Transport",
    "User",
    "accumulate",
    "build_event",
    "classify",
    "filter_frames",
    "resolve",
    "root_cause",
    "severity",
    "skip",
    "user_field",
]
