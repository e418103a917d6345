"""Integrations – stdlib :mod:`logging` handler.

::

    hook = FluentHook.new("127.0.0.1", 24224)
    logging.getLogger().addHandler(FluentHandler(hook))

    log.error("payment failed", extra={"order_id": 42, "tag": "shop.payments"})

Anything passed through ``extra=`` becomes a record field.  The hook's own
level set still applies on top of the handler level.
"""
from __future__ import annotations

import logging
from datetime import UTC, datetime

from fluenthook.hook import FluentHook
from fluenthook.kernel.entry import LogEntry
from fluenthook.kernel.levels import Level

ERROR_FIELD = "error"

_LIBRARY_LOGGER = "fluenthook"

_RESERVED_ATTRS: frozenset[str] = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

_default_formatter = logging.Formatter()


def entry_from_record(record: logging.LogRecord, formatter: logging.Formatter | None = None) -> LogEntry:
    """Build a :class:`LogEntry` from a stdlib record.

    Fields are the record's non-standard attributes (what callers pass via
    ``extra=``).  A formatted traceback is added under ``error`` when the
    record carries ``exc_info`` and no ``error`` field was given.
    """
    fields = {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }
    if record.exc_info and ERROR_FIELD not in fields:
        fields[ERROR_FIELD] = (formatter or _default_formatter).formatException(record.exc_info)
    return LogEntry(
        level=Level.from_levelno(record.levelno),
        message=record.getMessage(),
        fields=fields,
        time=datetime.fromtimestamp(record.created, UTC),
    )


class FluentHandler(logging.Handler):
    """Forward stdlib log records through a :class:`FluentHook`.

    Errors raised while forwarding go through :meth:`logging.Handler.handleError`,
    so a failing collector never breaks the code that logged.
    """

    def __init__(self, hook: FluentHook, level: int = logging.NOTSET, *, owns_hook: bool = True) -> None:
        super().__init__(level)
        self._hook = hook
        self._owns_hook = owns_hook
        self.addFilter(_skip_library_records)

    @property
    def hook(self) -> FluentHook:
        return self._hook

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._hook.fire(entry_from_record(record, self.formatter))
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def close(self) -> None:
        try:
            if self._owns_hook:
                self._hook.close()
        finally:
            super().close()


def _skip_library_records(record: logging.LogRecord) -> bool:
    # Our own diagnostics must not be forwarded back through the hook.
    return not (record.name == _LIBRARY_LOGGER or record.name.startswith(_LIBRARY_LOGGER + "."))


__all__ = ["ERROR_FIELD", "FluentHandler", "entry_from_record"]
