"""Config – immutable settings and loaders."""

from mp_argon2.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from mp_argon2.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
