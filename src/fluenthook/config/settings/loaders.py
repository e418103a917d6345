"""Config settings – EnvSettingsLoader, DotenvSettingsLoader.

Variable names are ``<PREFIX>_<FIELD>`` upper-cased, e.g. ``FLUENT_PORT``
for :class:`~fluenthook.config.fluent.FluentSettings`.  Values are coerced
from the field's type hint: ``bool`` (``1/true/yes/on``), ``int``,
``float`` and comma-separated lists; anything else stays a string.
"""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from collections.abc import Mapping
from typing import Any, TypeVar

from fluenthook.config.settings.base import Settings
from fluenthook.kernel.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables.

    *environ* defaults to :data:`os.environ`; pass a plain mapping to load
    from anywhere else.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "")
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = env_key(prefix, field.name)
            raw = environ.get(key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key)
                continue
            try:
                kwargs[field.name] = coerce(raw, hints.get(field.name, str))
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file layered with the process environment.

    The process environment wins unless *override* is set.  The file is
    read with :func:`dotenv.dotenv_values`, so ``os.environ`` is left alone.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        from dotenv import dotenv_values

        from_file = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        environ = {**os.environ, **from_file} if self._override else {**from_file, **os.environ}
        return EnvSettingsLoader(environ).load(settings_class)


def env_key(prefix: str, field_name: str) -> str:
    return f"{prefix}_{field_name}".upper().lstrip("_")


def coerce(value: str, type_hint: Any) -> Any:
    if type_hint is bool:
        return value.strip().lower() in _TRUTHY
    if type_hint is int:
        return int(value)
    if type_hint is float:
        return float(value)
    origin = typing.get_origin(type_hint)
    if origin in (list, tuple, set, frozenset):
        items = [item.strip() for item in value.split(",") if item.strip()]
        return items if origin is list else origin(items)
    return value


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "coerce", "env_key"]
