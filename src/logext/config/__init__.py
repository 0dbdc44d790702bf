"""Config – 12-factor settings and loaders."""

from logext.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from logext.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
