"""Config – hook rule snapshots, connection config and 12-factor settings."""

from fluenthook.config.fluent import FluentConfig, FluentSettings
from fluenthook.config.hook import HookConfig, MESSAGE_FIELD, TAG_FIELD
from fluenthook.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from fluenthook.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FluentConfig",
    "FluentSettings",
    "HookConfig",
    "InvalidSettingValueError",
    "MESSAGE_FIELD",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "TAG_FIELD",
]
