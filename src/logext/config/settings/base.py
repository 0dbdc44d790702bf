"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

_REDACTED = "***"


@dataclasses.dataclass
class Settings:
    """Base class for settings read from ``<PREFIX>_<FIELD>`` variables.

    Subclasses validate themselves on construction through :meth:`_validate`.
    Fields named in ``_secret_fields`` are masked by :meth:`redacted`.
    """

    _prefix: ClassVar[str] = ""
    _secret_fields: ClassVar[frozenset[str]] = frozenset()

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def redacted(self) -> dict[str, Any]:
        """Field values safe to log; set secrets are replaced by a mask."""
        values = dataclasses.asdict(self)
        for name in self._secret_fields:
            if values.get(name):
                values[name] = _REDACTED
        return values


__all__ = ["Settings"]
