"""Configuration errors – invalid or missing settings."""

from __future__ import annotations

from fluenthook.kernel.errors.base import BaseError


class ConfigError(BaseError):
    """Raised when configuration is invalid or loading failed."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing", detail={"setting": setting_name}
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class InvalidLevelError(InvalidSettingValueError):
    """A level name could not be parsed."""

    default_code = "invalid_level"

    def __init__(self, value: object) -> None:
        super().__init__("level", value, "not a known log level")


__all__ = [
    "ConfigError",
    "InvalidLevelError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
