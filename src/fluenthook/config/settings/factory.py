"""Config settings – SettingsFactory.

Layers several sources into one settings object::

    settings = SettingsFactory.create(
        FluentSettings,
        loaders=[DotenvSettingsLoader(".env"), EnvSettingsLoader()],
        overrides={"tag": "billing"},
    )
    hook = FluentHook.from_config(settings.to_config())
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Sequence, TypeVar

from fluenthook.config.settings.base import Settings
from fluenthook.config.settings.loaders import SettingsLoader
from fluenthook.kernel.errors import ConfigError, MissingRequiredSettingError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Merge loaders (later wins) and overrides (highest priority).

    A loader only contributes the fields whose value differs from the
    dataclass default, so a later source that leaves ``port`` unset does not
    reset a port an earlier source provided.  A loader failing with
    :class:`ConfigError` is skipped.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """Build *settings_cls* from *loaders* then *overrides*.

        Raises :class:`MissingRequiredSettingError` when a field without a
        default is still unset, and :class:`ConfigError` when construction
        or validation fails.
        """
        merged: dict[str, Any] = {}
        for loader in loaders or ():
            try:
                loaded = loader.load(settings_cls)
            except ConfigError as exc:
                logger.debug(
                    "settings.loader_skipped loader=%s code=%s", type(loader).__name__, exc.code
                )
                continue
            merged.update(_explicit_values(loaded))

        merged.update(overrides or {})

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name not in merged and not _has_default(field):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc


def _has_default(field: dataclasses.Field[Any]) -> bool:
    return field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING


def _default_of(field: dataclasses.Field[Any]) -> Any:
    if field.default is not dataclasses.MISSING:
        return field.default
    if field.default_factory is not dataclasses.MISSING:
        return field.default_factory()
    return dataclasses.MISSING


def _explicit_values(settings: Settings) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for field in dataclasses.fields(settings):  # type: ignore[arg-type]
        value = getattr(settings, field.name)
        if value != _default_of(field):
            values[field.name] = value
    return values


__all__ = ["SettingsFactory"]
