"""Config – environment settings and loaders."""

from nullsafe.config.settings import EnvSettingsLoader, LoggingSettings, Settings, SettingsLoader
from nullsafe.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
