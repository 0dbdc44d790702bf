"""Sentry adapter – SentrySettings.

Loaded from ``SENTRY_*`` environment variables::

    settings = EnvSettingsLoader().load(SentrySettings)
    core = SentryCore.from_settings(settings)
"""
from __future__ import annotations

import dataclasses
import enum
from typing import ClassVar

from logext.config.settings import Settings
from logext.config.validation import InvalidSettingValueError
from logext.core.level import Level
from logext.kernel.errors import UnknownLevelError


class Environment(str, enum.Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


ENVIRONMENT_LEVELS: dict[Environment, Level] = {
    Environment.DEVELOPMENT: Level.DEBUG,
    Environment.PRODUCTION: Level.ERROR,
}

DEFAULT_LEVEL = Level.ERROR
DEFAULT_FLUSH_TIMEOUT = 5.0


@dataclasses.dataclass
class SentrySettings(Settings):
    _prefix: ClassVar[str] = "SENTRY"
    _secret_fields: ClassVar[frozenset[str]] = frozenset({"dsn"})

    dsn: str = ""
    environment: str = ""
    level: str = ""
    stack_trace_skip: int = 0
    sync_level: str = "panic"
    flush_timeout: float = DEFAULT_FLUSH_TIMEOUT
    server_name: str = ""
    release: str = ""

    def _validate(self) -> None:
        if self.environment:
            try:
                Environment(self.environment)
            except ValueError:
                raise InvalidSettingValueError(
                    "environment",
                    self.environment,
                    f"expected one of {[e.value for e in Environment]}",
                ) from None
        for name in ("level", "sync_level"):
            value = getattr(self, name)
            if not value:
                continue
            try:
                Level.parse(value)
            except UnknownLevelError:
                raise InvalidSettingValueError(name, value, "unknown log level") from None
        if self.stack_trace_skip < 0:
            raise InvalidSettingValueError("stack_trace_skip", self.stack_trace_skip, "must be >= 0")
        if self.flush_timeout < 0:
            raise InvalidSettingValueError("flush_timeout", self.flush_timeout, "must be >= 0")

    @property
    def min_level(self) -> Level:
        """The explicit level, else the one implied by the environment."""
        if self.level:
            return Level.parse(self.level)
        if self.environment:
            return ENVIRONMENT_LEVELS[Environment(self.environment)]
        return DEFAULT_LEVEL

    @property
    def wait_level(self) -> Level | None:
        """Level from which writes block on delivery; ``None`` never waits."""
        return Level.parse(self.sync_level) if self.sync_level else None

    def client_options(self) -> dict[str, str]:
        options = {
            "dsn": self.dsn,
            "environment": self.environment,
            "server_name": self.server_name,
            "release": self.release,
        }
        return {k: v for k, v in options.items() if v}


__all__ = [
    "DEFAULT_FLUSH_TIMEOUT",
    "DEFAULT_LEVEL",
    "ENVIRONMENT_LEVELS",
    "Environment",
    "SentrySettings",
]
