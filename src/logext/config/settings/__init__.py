"""Config settings – 12-factor env-based configuration."""
from logext.config.settings.base import Settings
from logext.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
