"""Integrations – structlog processor.

::

    structlog.configure(processors=[
        structlog.processors.add_log_level,
        FluentProcessor(hook),
        structlog.processors.JSONRenderer(),
    ])

The processor forwards a copy of the event and hands ``event_dict`` on to
the next processor unchanged.
"""
from __future__ import annotations

import logging
from typing import Any

from structlog.typing import EventDict, WrappedLogger

from fluenthook.hook import FluentHook
from fluenthook.kernel.entry import LogEntry
from fluenthook.kernel.errors import InvalidLevelError
from fluenthook.kernel.levels import Level
from fluenthook.kernel.time import Clock, SystemClock

logger = logging.getLogger(__name__)

_SKIP_KEYS = frozenset({"event", "level"})


def entry_from_event(method_name: str, event_dict: EventDict, clock: Clock | None = None) -> LogEntry:
    """Build a :class:`LogEntry` from a structlog ``event_dict``."""
    raw_level = event_dict.get("level", method_name)
    try:
        level = Level.from_name(str(raw_level))
    except InvalidLevelError:
        level = Level.from_name(method_name)
    return LogEntry(
        level=level,
        message=str(event_dict.get("event", "")),
        fields={k: v for k, v in event_dict.items() if k not in _SKIP_KEYS},
        time=(clock or SystemClock()).now(),
    )


class FluentProcessor:
    """structlog processor that forwards every event through a :class:`FluentHook`.

    Parameters
    ----------
    hook:
        The hook to fire.
    raise_errors:
        Re-raise forwarding errors instead of logging a warning and carrying on.
    clock:
        Timestamp source for the Forward protocol event time.
    """

    def __init__(self, hook: FluentHook, *, raise_errors: bool = False, clock: Clock | None = None) -> None:
        self._hook = hook
        self._raise_errors = raise_errors
        self._clock = clock or SystemClock()

    def __call__(
        self,
        logger_: WrappedLogger,  # noqa: ARG002
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        try:
            self._hook.fire(entry_from_event(method_name, event_dict, self._clock))
        except Exception as exc:
            if self._raise_errors:
                raise
            logger.warning("fluent.forward_failed error=%r", exc)
        return event_dict


__all__ = ["FluentProcessor", "entry_from_event"]
