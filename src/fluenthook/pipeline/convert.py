"""Pipeline – convert record values into types the wire codec can pack.

Dataclass fields can be renamed or dropped through field metadata under the
``fluent`` key::

    @dataclasses.dataclass
    class Request:
        path: str = dataclasses.field(metadata={"fluent": "request_path"})
        token: str = dataclasses.field(metadata={"fluent": "-"})
        retries: int = dataclasses.field(default=0, metadata={"fluent": ",omitempty"})
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date, datetime, time
from enum import Enum
from typing import Any

from fluenthook.kernel.levels import Level

TAG_NAME = "fluent"

_SCALARS = (type(None), bool, int, float, str, bytes)


def convert_to_value(value: Any, tag_name: str = TAG_NAME) -> Any:
    """Recursively turn *value* into plain dicts, lists and scalars."""
    if isinstance(value, Level):
        return str(value)
    if isinstance(value, Enum):
        return convert_to_value(value.value, tag_name)
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, Mapping):
        return {str(k): convert_to_value(v, tag_name) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [convert_to_value(v, tag_name) for v in value]
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, BaseException):
        return str(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _convert_dataclass(value, tag_name)
    if hasattr(value, "model_dump"):
        return convert_to_value(value.model_dump(), tag_name)
    if hasattr(value, "to_dict"):
        return convert_to_value(value.to_dict(), tag_name)
    return str(value)


def _convert_dataclass(obj: Any, tag_name: str) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for field in dataclasses.fields(obj):
        name, omitempty = _parse_tag(field.metadata.get(tag_name, ""), field.name)
        if name is None:
            continue
        raw = getattr(obj, field.name)
        if omitempty and not raw:
            continue
        out[name] = convert_to_value(raw, tag_name)
    return out


def _parse_tag(meta: str, default: str) -> tuple[str | None, bool]:
    """Parse ``"name,omitempty"``; a name of ``"-"`` means "always omit"."""
    name, _, options = meta.partition(",")
    if name == "-" and not options:
        return None, False
    return name or default, "omitempty" in options.split(",")


__all__ = ["TAG_NAME", "convert_to_value"]
