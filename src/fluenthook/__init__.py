"""
fluenthook – forward structured log entries to Fluentd.

Import path convention::

    from fluenthook import FluentHook, LogEntry, Level
    from fluenthook.integrations import FluentHandler, FluentProcessor
    from fluenthook.config import FluentConfig, FluentSettings
"""

from fluenthook.config import FluentConfig, FluentSettings, HookConfig
from fluenthook.hook import FluentHook
from fluenthook.kernel import DEFAULT_LEVELS, Level, LogEntry

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_LEVELS",
    "FluentConfig",
    "FluentHook",
    "FluentSettings",
    "HookConfig",
    "Level",
    "LogEntry",
    "__version__",
]
