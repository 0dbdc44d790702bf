"""Report an error to Sentry through structlog.

Run with::

    pip install 'logext[sentry]'
    SENTRY_DSN=https://key@o0.ingest.sentry.io/0 python docs/examples/sentry_example.py

The printed event id can be looked up in Sentry to check the event arrived.
"""
from __future__ import annotations

import sys
import uuid

import structlog

from logext.adapters.sentry import SentryCore, SentrySettings
from logext.adapters.structlog import CoreProcessor
from logext.config import ConfigError, EnvSettingsLoader
from logext.core import DiscardingWriteSyncer


def run() -> int:
    try:
        settings = EnvSettingsLoader().load(SentrySettings)
    except ConfigError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)  # noqa: T201
        return 1
    if not settings.dsn:
        print("Error: SENTRY_DSN is not set", file=sys.stderr)  # noqa: T201
        return 1

    core = SentryCore.from_settings(settings)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            CoreProcessor(core, drop=True),
        ],
        logger_factory=structlog.PrintLoggerFactory(DiscardingWriteSyncer()),
    )
    log = structlog.get_logger("example")

    event_id = uuid.uuid4().hex
    log.error("nuked", event_id=event_id, **{"#subsystem": "example"})

    print(event_id)  # noqa: T201
    core.sync()
    return 0


if __name__ == "__main__":
    sys.exit(run())
