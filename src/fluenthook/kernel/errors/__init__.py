"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ConfigError                  (config.py)
    │   ├── MissingRequiredSettingError
    │   └── InvalidSettingValueError
    │       └── InvalidLevelError
    └── InfrastructureError          (infrastructure.py)
        ├── FluentConnectionError
        ├── FluentSendError
        └── RecordSerializationError
"""

from fluenthook.kernel.errors.base import BaseError
from fluenthook.kernel.errors.config import (
    ConfigError,
    InvalidLevelError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from fluenthook.kernel.errors.infrastructure import (
    FluentConnectionError,
    FluentSendError,
    InfrastructureError,
    RecordSerializationError,
)

__all__ = [
    "BaseError",
    "ConfigError",
    "FluentConnectionError",
    "FluentSendError",
    "InfrastructureError",
    "InvalidLevelError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RecordSerializationError",
]
