"""Config settings – environment-based configuration."""
from nullsafe.config.settings.base import Settings
from nullsafe.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from nullsafe.config.settings.observability import LoggingSettings

__all__ = ["EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
