"""Infrastructure errors — encoding and delivery failures."""

from __future__ import annotations

from typing import Any

from logext.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O or transformation failure inside a sink."""

    default_code = "infrastructure_error"


class EncodingError(InfrastructureError):
    """A field or sub-object could not be encoded for the sink."""

    default_code = "encoding_error"

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.key = key

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["key"] = self.key
        return base


class DeliveryError(InfrastructureError):
    """The transport failed to deliver an event we were waiting on."""

    default_code = "delivery_error"

    def __init__(
        self,
        message: str | None = None,
        *,
        event_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or "event delivery failed", **kwargs)
        self.event_id = event_id

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["event_id"] = self.event_id
        return base


__all__ = ["DeliveryError", "EncodingError", "InfrastructureError"]
