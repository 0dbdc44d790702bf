"""Unit tests for config settings & Sentry settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from logext.adapters.sentry import Environment, SentryCore, SentrySettings
from logext.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)
from logext.core import Level
from logext.testing import RecordingTransport


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "example.com"

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 9000

    def test_loads_bool(self) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            settings = EnvSettingsLoader({"APP_DEBUG": truthy}).load(AppSettings)
            assert settings.debug is True
        for falsy in ("false", "0", "no", "off"):
            settings = EnvSettingsLoader({"APP_DEBUG": falsy}).load(AppSettings)
            assert settings.debug is False

    def test_loads_list(self) -> None:
        settings = EnvSettingsLoader({"APP_ALLOWED_ORIGINS": "http://a.com, http://b.com"}).load(AppSettings)
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_defaults_preserved_when_env_absent(self) -> None:
        settings = EnvSettingsLoader({}).load(AppSettings)
        assert settings.host == "localhost"
        assert settings.port == 8080
        assert settings.allowed_origins == []

    def test_missing_required_setting(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_unparsable_value_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader({"APP_PORT": "eighty"}).load(AppSettings)

    def test_postponed_annotations_are_resolved(self) -> None:
        # this module uses postponed annotations, so field types are strings
        assert AppSettings.__dataclass_fields__["allowed_origins"].type == "list[str]"
        settings = EnvSettingsLoader(
            {"APP_ALLOWED_ORIGINS": "a, b", "APP_PORT": "81", "APP_DEBUG": "yes"}
        ).load(AppSettings)
        assert settings.allowed_origins == ["a", "b"]
        assert settings.port == 81
        assert settings.debug is True

    def test_float_in_sentry_settings(self) -> None:
        settings = EnvSettingsLoader({"SENTRY_FLUSH_TIMEOUT": "0.25"}).load(SentrySettings)
        assert settings.flush_timeout == 0.25

    def test_env_key_uses_prefix(self) -> None:
        assert AppSettings.env_key("allowed_origins") == "APP_ALLOWED_ORIGINS"
        assert Settings.env_key("host") == "HOST"


# ---------------------------------------------------------------------------
# SentrySettings
# ---------------------------------------------------------------------------


class TestSentrySettings:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader({}).load(SentrySettings)
        assert settings.dsn == ""
        assert settings.min_level is Level.ERROR
        assert settings.wait_level is Level.PANIC
        assert settings.flush_timeout == 5.0
        assert settings.stack_trace_skip == 0

    def test_loads_from_env(self) -> None:
        settings = EnvSettingsLoader(
            {
                "SENTRY_DSN": "https://key@example.com/1",
                "SENTRY_STACK_TRACE_SKIP": "2",
                "SENTRY_FLUSH_TIMEOUT": "1.5",
                "SENTRY_SYNC_LEVEL": "error",
            }
        ).load(SentrySettings)
        assert settings.dsn == "https://key@example.com/1"
        assert settings.stack_trace_skip == 2
        assert settings.flush_timeout == 1.5
        assert settings.wait_level is Level.ERROR

    @pytest.mark.parametrize(
        ("environment", "expected"),
        [("development", Level.DEBUG), ("production", Level.ERROR)],
    )
    def test_environment_implies_level(self, environment: str, expected: Level) -> None:
        assert SentrySettings(environment=environment).min_level is expected

    def test_explicit_level_wins_over_environment(self) -> None:
        settings = SentrySettings(environment=Environment.DEVELOPMENT.value, level="warn")
        assert settings.min_level is Level.WARN

    def test_empty_sync_level_never_waits(self) -> None:
        assert SentrySettings(sync_level="").wait_level is None

    def test_unknown_environment_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SentrySettings(environment="staging")
        assert exc_info.value.setting_name == "environment"

    @pytest.mark.parametrize("name", ["level", "sync_level"])
    def test_unknown_level_rejected(self, name: str) -> None:
        with pytest.raises(InvalidSettingValueError):
            SentrySettings(**{name: "loud"})

    def test_negative_values_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SentrySettings(stack_trace_skip=-1)
        with pytest.raises(InvalidSettingValueError):
            SentrySettings(flush_timeout=-1.0)

    def test_loader_surfaces_validation_error(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"SENTRY_ENVIRONMENT": "qa"}).load(SentrySettings)

    def test_redacted_masks_dsn(self) -> None:
        values = SentrySettings(dsn="https://key@example.com/1", release="1.2.3").redacted()
        assert values["dsn"] == "***"
        assert values["release"] == "1.2.3"
        assert SentrySettings().redacted()["dsn"] == ""

    def test_validation_error_detail(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SentrySettings(level="loud")
        assert exc_info.value.to_dict()["detail"]["setting"] == "level"
        assert exc_info.value.code == "invalid_setting_value"

    def test_client_options_skip_empty_values(self) -> None:
        settings = SentrySettings(dsn="https://k@h/1", release="1.2.3")
        assert settings.client_options() == {"dsn": "https://k@h/1", "release": "1.2.3"}


class TestSentryCoreFromSettings:
    def test_builds_core_with_settings(self) -> None:
        transport = RecordingTransport()
        settings = SentrySettings(environment="development", flush_timeout=2.0, sync_level="")
        core = SentryCore.from_settings(settings, transport)
        assert core.enabled(Level.DEBUG)
        core.sync()
        assert transport.flushes == [2.0]
