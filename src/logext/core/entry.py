"""Core – the log entry handed to every core."""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime

from logext.core.level import Level


@dataclasses.dataclass(frozen=True)
class Entry:
    """One log call as seen by a core, without its fields."""

    level: Level
    message: str
    time: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    logger_name: str = ""


__all__ = ["Entry"]
