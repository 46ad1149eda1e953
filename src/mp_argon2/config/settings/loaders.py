"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from dotenv import load_dotenv

from mp_argon2.config.settings.base import Settings
from mp_argon2.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    ``Argon2Settings`` (prefix ``ARGON2``) reads ``ARGON2_TIME_COST``,
    ``ARGON2_MEMORY_COST`` and so on; unset fields keep their defaults.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise ConfigError(f"Failed to parse {env_key}: {exc}", cause=exc) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        if type_hint is int or type_hint == "int":
            return int(value)
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
