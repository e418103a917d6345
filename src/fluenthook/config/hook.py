"""Config – HookConfig, the immutable rule set the transformer reads.

A :class:`HookConfig` is never mutated after construction.  The hook swaps
in a new snapshot whenever one of its ``add_*`` / ``set_*`` methods is
called, so a ``fire`` already in flight keeps the snapshot it started with.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from fluenthook.kernel.entry import Customizer, Transform
from fluenthook.kernel.levels import DEFAULT_LEVELS, Level
from fluenthook.kernel.types import Nothing, Option, Some, option_of

TAG_FIELD = "tag"
"""Record field consulted for the routing tag when no static tag is set."""

MESSAGE_FIELD = "message"
"""Default record field for the entry message."""

LEVEL_FIELD = "level"


@dataclasses.dataclass(frozen=True)
class HookConfig:
    """Level gate, static tag and field rules applied to every entry.

    ``tag`` also accepts a plain ``str`` (static tag) or ``None`` (unset).

    Names in ``ignore_fields`` never reach the record from the entry's
    fields, with one exception: ``"level"`` and the message field are
    stamped after the copy pass, so ignoring them only discards a
    caller-supplied value.  Remove them with a customizer instead.
    """

    levels: frozenset[Level] = DEFAULT_LEVELS
    tag: Option[str] = dataclasses.field(default_factory=Nothing)
    message_field: str = MESSAGE_FIELD
    ignore_fields: frozenset[str] = frozenset()
    filters: Mapping[str, Transform] = dataclasses.field(default_factory=dict)
    customizers: tuple[Customizer, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.tag, (Some, Nothing)):
            object.__setattr__(self, "tag", option_of(self.tag))
        object.__setattr__(self, "levels", frozenset(self.levels))
        object.__setattr__(self, "ignore_fields", frozenset(self.ignore_fields))
        object.__setattr__(self, "filters", MappingProxyType(dict(self.filters)))
        object.__setattr__(self, "customizers", tuple(self.customizers))

    # ------------------------------------------------------------------
    # Copy-on-write updates
    # ------------------------------------------------------------------

    def with_levels(self, levels: Iterable[Level]) -> "HookConfig":
        return dataclasses.replace(self, levels=frozenset(levels))

    def with_tag(self, tag: str | None) -> "HookConfig":
        """Return a snapshot with a static tag (``None`` clears it)."""
        return dataclasses.replace(self, tag=option_of(tag))

    def with_message_field(self, name: str) -> "HookConfig":
        return dataclasses.replace(self, message_field=name)

    def adding_ignore(self, name: str) -> "HookConfig":
        return dataclasses.replace(self, ignore_fields=self.ignore_fields | {name})

    def adding_filter(self, name: str, fn: Transform) -> "HookConfig":
        return dataclasses.replace(self, filters={**self.filters, name: fn})

    def adding_customizer(self, fn: Customizer) -> "HookConfig":
        return dataclasses.replace(self, customizers=(*self.customizers, fn))


__all__ = ["HookConfig", "LEVEL_FIELD", "MESSAGE_FIELD", "TAG_FIELD"]
