"""Config settings – immutable env-based configuration."""
from mp_argon2.config.settings.base import Settings
from mp_argon2.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
