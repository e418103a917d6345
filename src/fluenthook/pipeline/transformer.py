"""Pipeline – entry → (tag, record) transformation.

Order of operations for one entry::

    copy fields (ignore, then filter)
      → stamp "level"          (always overwrites)
      → stamp message field    (only when absent; its filter only ever sees the derived value)
      → customizers            (in registration order, may mutate anything)
      → resolve tag            (static tag > string "tag" field, popped > entry message)

The transformer holds no state of its own and never mutates the
:class:`HookConfig` it reads, so concurrent calls are safe.
"""
from __future__ import annotations

from fluenthook.config.hook import LEVEL_FIELD, TAG_FIELD, HookConfig
from fluenthook.kernel.entry import LogEntry, Record


def is_enabled(entry: LogEntry, config: HookConfig) -> bool:
    """Level gate: ``True`` when *entry* should be forwarded."""
    return entry.level in config.levels


def build_record(entry: LogEntry, config: HookConfig) -> Record:
    """Run the field copy, stamping and customizer passes."""
    record: Record = {}
    for name, value in entry.fields.items():
        if name in config.ignore_fields:
            continue
        fn = config.filters.get(name)
        if fn is not None and name != config.message_field:
            value = fn(value)
        record[name] = value

    record[LEVEL_FIELD] = str(entry.level)
    _set_message(entry, record, config)

    for customize in config.customizers:
        customize(entry, record)
    return record


def resolve_tag(entry: LogEntry, record: Record, config: HookConfig) -> str:
    """Pick the routing tag, popping a string ``tag`` field when it is used.

    1. a static tag on the config wins and the record is left alone;
    2. a string ``tag`` field is used and removed from the record;
    3. otherwise the entry message is the tag (a non-string ``tag`` stays put).
    """
    if config.tag.is_some():
        return config.tag.unwrap()

    value = record.get(TAG_FIELD)
    if not isinstance(value, str):
        return entry.message

    del record[TAG_FIELD]
    return value


def transform(entry: LogEntry, config: HookConfig) -> tuple[str, Record]:
    """Convert *entry* into the ``(tag, record)`` pair handed to the transport."""
    record = build_record(entry, config)
    tag = resolve_tag(entry, record, config)
    return tag, record


def _set_message(entry: LogEntry, record: Record, config: HookConfig) -> None:
    # An explicit field wins and is never filtered.
    if config.message_field in record:
        return

    value: object = entry.message
    fn = config.filters.get(config.message_field)
    if fn is not None:
        value = fn(value)
    record[config.message_field] = value


class EntryTransformer:
    """Binds :func:`transform` to a fixed :class:`HookConfig` snapshot."""

    def __init__(self, config: HookConfig) -> None:
        self._config = config

    @property
    def config(self) -> HookConfig:
        return self._config

    def accepts(self, entry: LogEntry) -> bool:
        return is_enabled(entry, self._config)

    def transform(self, entry: LogEntry) -> tuple[str, Record]:
        return transform(entry, self._config)


__all__ = ["EntryTransformer", "build_record", "is_enabled", "resolve_tag", "transform"]
