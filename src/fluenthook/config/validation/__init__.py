"""Config validation errors."""
from fluenthook.kernel.errors.config import (
    ConfigError,
    InvalidLevelError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "InvalidLevelError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
