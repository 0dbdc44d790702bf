"""Sentry adapter – SentryCore.

Turns log entries into Sentry events::

    core = SentryCore(Level.ERROR, SentrySdkTransport(dsn=dsn))
    core.write(
        Entry(Level.ERROR, "nuked"),
        [string("event_id", event_id), string("#subsystem", "example")],
    )
    core.sync()

Fields bound with :meth:`SentryCore.with_fields` are processed before the
fields of each call, so call fields override them.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Sequence

from logext.adapters.sentry.classifier import accumulate
from logext.adapters.sentry.event import build_event
from logext.adapters.sentry.settings import DEFAULT_FLUSH_TIMEOUT, SentrySettings
from logext.adapters.sentry.stacktrace import FrameSource, resolve
from logext.adapters.sentry.transport import SentrySdkTransport, Transport
from logext.core.core import Core
from logext.core.entry import Entry
from logext.core.field import Field
from logext.core.level import Level, LevelEnabler, as_enabler
from logext.kernel.errors import DeliveryError

logger = logging.getLogger(__name__)


def _never(level: Level) -> bool:  # noqa: ARG001
    return False


class SentryCore(Core):
    """Core that reports entries to Sentry through a :class:`Transport`.

    Parameters
    ----------
    enabler:
        Minimum level (or predicate) for entries to be reported.
    transport:
        Where events go. :class:`SentrySdkTransport` in production.
    stack_trace_skip:
        Frames to skip when a carried error has no traceback and the stack
        trace is taken from the call site.
    sync_level:
        Entries at or above this level (or matching this predicate) block
        until the transport confirms delivery. ``None`` never blocks.
    flush_timeout:
        Seconds :meth:`sync` waits for pending events.
    frame_source:
        Stack capture used by the resolver (tests substitute it).
    """

    def __init__(
        self,
        enabler: LevelEnabler | Level | str,
        transport: Transport,
        *,
        stack_trace_skip: int = 0,
        sync_level: LevelEnabler | Level | str | None = Level.PANIC,
        flush_timeout: float = DEFAULT_FLUSH_TIMEOUT,
        frame_source: FrameSource | None = None,
    ) -> None:
        super().__init__(enabler)
        if stack_trace_skip < 0:
            raise ValueError("stack_trace_skip must be >= 0")
        self._transport = transport
        self._stack_trace_skip = stack_trace_skip
        self._sync_level = as_enabler(_never if sync_level is None else sync_level)
        self._flush_timeout = flush_timeout
        self._frame_source = frame_source
        self._fields: tuple[Field, ...] = ()

    @classmethod
    def from_settings(
        cls,
        settings: SentrySettings,
        transport: Transport | None = None,
        **kwargs: Any,
    ) -> SentryCore:
        """Build a core from :class:`SentrySettings`.

        Without *transport* a :class:`SentrySdkTransport` is created from the
        settings' DSN and client options.
        """
        logger.debug("building SentryCore from settings %s", settings.redacted())
        if transport is None:
            transport = SentrySdkTransport(**settings.client_options())
        return cls(
            settings.min_level,
            transport,
            stack_trace_skip=settings.stack_trace_skip,
            sync_level=settings.wait_level,
            flush_timeout=settings.flush_timeout,
            **kwargs,
        )

    @property
    def fields(self) -> tuple[Field, ...]:
        return self._fields

    def with_fields(self, fields: Sequence[Field]) -> SentryCore:
        clone = copy.copy(self)
        clone._fields = self._fields + tuple(fields)
        return clone

    def write(self, entry: Entry, fields: Sequence[Field]) -> None:
        classified, aborted = accumulate(self._fields, fields)
        if aborted:
            return

        exception = resolve(
            classified.error,
            entry.message,
            self._stack_trace_skip,
            self._frame_source,
        )
        event = build_event(entry, classified, exception)

        wait = self._sync_level.enabled(entry.level)
        try:
            delivery = self._transport.send(event)
        except Exception as exc:
            if wait:
                raise DeliveryError(f"failed to send event: {exc}", cause=exc) from exc
            logger.warning("dropping Sentry event for %r: %s", entry.message, exc)
            return

        if not wait:
            return
        try:
            delivery.result()
        except DeliveryError:
            raise
        except Exception as exc:
            raise DeliveryError(f"failed to deliver event: {exc}", cause=exc) from exc

    def sync(self) -> None:
        self._transport.flush(self._flush_timeout)


__all__ = ["SentryCore"]
