"""Sentry adapter – transport port and the sentry-sdk implementation.

:meth:`Transport.send` always hands back a :class:`Delivery`; whether to
wait on it is the caller's decision.
"""
from __future__ import annotations

import logging
from typing import Any, Protocol

from logext.adapters.sentry.event import SentryEvent
from logext.kernel.errors import DeliveryError

logger = logging.getLogger(__name__)


def _require_sentry_sdk() -> Any:
    try:
        import sentry_sdk  # type: ignore[import-untyped]
        return sentry_sdk
    except ImportError as exc:
        raise ImportError("Install 'logext[sentry]' to use the sentry-sdk transport") from exc


class Delivery(Protocol):
    def result(self, timeout: float | None = None) -> str | None:
        """Block until the event is delivered; return its id.

        Raises:
            DeliveryError: the event was dropped or could not be delivered.
        """
        ...


class Transport(Protocol):
    def send(self, event: SentryEvent) -> Delivery: ...
    def flush(self, timeout: float) -> None: ...


class CompletedDelivery:
    """A delivery that already succeeded."""

    def __init__(self, event_id: str | None) -> None:
        self._event_id = event_id

    def result(self, timeout: float | None = None) -> str | None:  # noqa: ARG002
        return self._event_id


class FailedDelivery:
    """A delivery that already failed with *error*."""

    def __init__(self, error: BaseException, event_id: str | None = None) -> None:
        self._error = error
        self._event_id = event_id

    def result(self, timeout: float | None = None) -> str | None:  # noqa: ARG002
        raise DeliveryError(str(self._error), event_id=self._event_id, cause=self._error)


class _SdkDelivery:
    def __init__(self, client: Any, event_id: str | None) -> None:
        self._client = client
        self._event_id = event_id

    def result(self, timeout: float | None = None) -> str | None:
        if self._event_id is None:
            raise DeliveryError("event was dropped by the Sentry client")
        self._client.flush(timeout=timeout)
        return self._event_id


class SentrySdkTransport:
    """:class:`Transport` over a ``sentry_sdk.Client``.

    Either pass a ready client or the client options (``dsn``, ``environment``,
    ``release``, ...). Delivery itself is done by the SDK's background worker;
    waiting on a delivery flushes the client.
    """

    def __init__(self, client: Any = None, **options: Any) -> None:
        if client is None:
            sentry_sdk = _require_sentry_sdk()
            client = sentry_sdk.Client(**options)
        self._client = client

    @property
    def client(self) -> Any:
        return self._client

    def send(self, event: SentryEvent) -> Delivery:
        event_id = self._client.capture_event(event.to_dict())
        if event_id is None:
            logger.debug("Sentry client dropped event %s", event.event_id)
        return _SdkDelivery(self._client, event_id)

    def flush(self, timeout: float) -> None:
        self._client.flush(timeout=timeout)


__all__ = [
    "CompletedDelivery",
    "Delivery",
    "FailedDelivery",
    "SentrySdkTransport",
    "Transport",
]
