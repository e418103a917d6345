"""Config – FluentConfig (programmatic) and FluentSettings (environment)."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import ClassVar

from fluenthook.config.hook import MESSAGE_FIELD, HookConfig
from fluenthook.config.settings import Settings
from fluenthook.kernel.entry import Transform
from fluenthook.kernel.errors import InvalidLevelError, InvalidSettingValueError
from fluenthook.kernel.levels import DEFAULT_LEVELS, Level
from fluenthook.kernel.types import Nothing, Some

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 24224
DEFAULT_TIMEOUT = 3.0


@dataclasses.dataclass(frozen=True)
class FluentConfig:
    """Everything needed to construct a :class:`~fluenthook.hook.FluentHook`.

    Empty values mean "use the default": no ``log_levels`` fires on
    :data:`~fluenthook.kernel.levels.DEFAULT_LEVELS`, an empty ``default_tag``
    leaves tag resolution per entry, an empty ``default_message_field`` falls
    back to ``"message"``.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT
    log_levels: tuple[Level, ...] = ()
    disable_connection_pool: bool = False
    default_tag: str = ""
    default_message_field: str = MESSAGE_FIELD
    default_ignore_fields: frozenset[str] = frozenset()
    default_filters: Mapping[str, Transform] = dataclasses.field(default_factory=dict)

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    def hook_config(self) -> HookConfig:
        """Build the initial rule snapshot from the ``default_*`` fields."""
        return HookConfig(
            levels=frozenset(self.log_levels) or DEFAULT_LEVELS,
            tag=Some(self.default_tag) if self.default_tag else Nothing(),
            message_field=self.default_message_field or MESSAGE_FIELD,
            ignore_fields=frozenset(self.default_ignore_fields),
            filters=dict(self.default_filters),
        )


@dataclasses.dataclass
class FluentSettings(Settings):
    """Environment-backed settings (``FLUENT_HOST``, ``FLUENT_PORT``, …).

    Filters and customizers are code, so they cannot come from the
    environment; attach them to the hook after construction.
    """

    _prefix: ClassVar[str] = "FLUENT"

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT
    tag: str = ""
    message_field: str = MESSAGE_FIELD
    levels: list[str] = dataclasses.field(default_factory=list)
    ignore_fields: list[str] = dataclasses.field(default_factory=list)
    disable_connection_pool: bool = False

    def _validate(self) -> None:
        if not 0 < self.port < 65536:
            raise InvalidSettingValueError("port", self.port, "must be between 1 and 65535")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        try:
            self.parsed_levels()
        except InvalidLevelError as exc:
            raise InvalidSettingValueError("levels", exc.value, exc.reason) from exc

    def parsed_levels(self) -> tuple[Level, ...]:
        return tuple(Level.parse(name) for name in self.levels)

    def to_config(self, filters: Mapping[str, Transform] | None = None) -> FluentConfig:
        return FluentConfig(
            host=self.host,
            port=self.port,
            timeout=self.timeout,
            log_levels=self.parsed_levels(),
            disable_connection_pool=self.disable_connection_pool,
            default_tag=self.tag,
            default_message_field=self.message_field,
            default_ignore_fields=frozenset(self.ignore_fields),
            default_filters=dict(filters or {}),
        )


__all__ = ["DEFAULT_HOST", "DEFAULT_PORT", "DEFAULT_TIMEOUT", "FluentConfig", "FluentSettings"]
