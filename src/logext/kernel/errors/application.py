"""Application-layer errors — misuse of the library by its caller."""

from __future__ import annotations

from typing import Any

from logext.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Programming or configuration error on the caller's side."""

    default_code = "application_error"


class UnknownLevelError(ApplicationError):
    """A log entry carries a level outside the defined level set."""

    default_code = "unknown_level"

    def __init__(self, level: Any, **kwargs: Any) -> None:
        super().__init__(f"unknown log level: {level!r}", **kwargs)
        self.level = level


__all__ = ["ApplicationError", "UnknownLevelError"]
