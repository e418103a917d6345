"""Kernel – LogEntry value object and the callable shapes that act on it."""
from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from fluenthook.kernel.levels import Level
from fluenthook.kernel.time import as_utc, utc_now

type Fields = Mapping[str, Any]
type Record = dict[str, Any]

# Filters receive whatever value the caller logged; unexpected types should
# be returned unchanged.
type Transform = Callable[[Any], Any]
type Customizer = Callable[[LogEntry, Record], None]


@dataclasses.dataclass(frozen=True)
class LogEntry:
    """One structured log event as delivered by the host logging framework."""

    level: Level
    message: str
    fields: Fields = dataclasses.field(default_factory=dict)
    time: datetime = dataclasses.field(default_factory=utc_now)

    def __post_init__(self) -> None:
        # Read-only view over a private copy so later caller mutations don't leak in.
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "time", as_utc(self.time))

    def with_fields(self, **fields: Any) -> "LogEntry":
        """Return a copy with *fields* merged over the existing ones."""
        return dataclasses.replace(self, fields={**self.fields, **fields})


__all__ = ["Customizer", "Fields", "LogEntry", "Record", "Transform"]
