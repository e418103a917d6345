"""Kernel – framework-agnostic building blocks: levels, entries, errors."""

from fluenthook.kernel.entry import Customizer, Fields, LogEntry, Record, Transform
from fluenthook.kernel.errors import (
    BaseError,
    ConfigError,
    FluentConnectionError,
    FluentSendError,
    InfrastructureError,
    InvalidLevelError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    RecordSerializationError,
)
from fluenthook.kernel.levels import ALL_LEVELS, DEFAULT_LEVELS, Level

__all__ = [
    "ALL_LEVELS",
    "BaseError",
    "ConfigError",
    "Customizer",
    "DEFAULT_LEVELS",
    "Fields",
    "FluentConnectionError",
    "FluentSendError",
    "InfrastructureError",
    "InvalidLevelError",
    "InvalidSettingValueError",
    "Level",
    "LogEntry",
    "MissingRequiredSettingError",
    "Record",
    "RecordSerializationError",
    "Transform",
]
