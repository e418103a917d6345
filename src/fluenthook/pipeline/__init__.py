"""Pipeline – entry transformation and wire value conversion."""
from fluenthook.pipeline.convert import TAG_NAME, convert_to_value
from fluenthook.pipeline.transformer import (
    EntryTransformer,
    build_record,
    is_enabled,
    resolve_tag,
    transform,
)

__all__ = [
    "EntryTransformer",
    "TAG_NAME",
    "build_record",
    "convert_to_value",
    "is_enabled",
    "resolve_tag",
    "transform",
]
