"""Kernel – severity levels.

Levels are ordered from most to least severe, so ``Level.ERROR < Level.INFO``.
``str(level)`` is the canonical form written into the outbound ``level``
field.
"""
from __future__ import annotations

import logging
from enum import IntEnum

from fluenthook.kernel.errors import InvalidLevelError


class Level(IntEnum):
    """Severity of a log entry."""

    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6

    def __str__(self) -> str:
        return _CANONICAL[self]

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @classmethod
    def parse(cls, text: str) -> "Level":
        """Parse a level name (case-insensitive, ``warn`` and ``warning`` both accepted)."""
        try:
            return _BY_NAME[text.strip().lower()]
        except (KeyError, AttributeError):
            raise InvalidLevelError(text) from None

    @classmethod
    def from_levelno(cls, levelno: int) -> "Level":
        """Map a stdlib :mod:`logging` numeric level onto a :class:`Level`.

        Each stdlib level covers the band up to the next one; anything above
        ``CRITICAL`` is ``PANIC`` and anything below ``DEBUG`` is ``TRACE``.
        """
        if levelno > logging.CRITICAL:
            return cls.PANIC
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE

    @classmethod
    def from_name(cls, name: str) -> "Level":
        """Map a structlog method / level name (``critical``, ``exception``, …)."""
        key = name.strip().lower()
        if key in _STRUCTLOG_ALIASES:
            return _STRUCTLOG_ALIASES[key]
        return cls.parse(key)


_CANONICAL: dict[Level, str] = {
    Level.PANIC: "panic",
    Level.FATAL: "fatal",
    Level.ERROR: "error",
    Level.WARN: "warning",
    Level.INFO: "info",
    Level.DEBUG: "debug",
    Level.TRACE: "trace",
}

_BY_NAME: dict[str, Level] = {text: level for level, text in _CANONICAL.items()}
_BY_NAME["warn"] = Level.WARN

_STRUCTLOG_ALIASES: dict[str, Level] = {
    "critical": Level.FATAL,
    "exception": Level.ERROR,
    "err": Level.ERROR,
    "msg": Level.INFO,
    "notset": Level.TRACE,
}

DEFAULT_LEVELS: frozenset[Level] = frozenset(
    {Level.PANIC, Level.FATAL, Level.ERROR, Level.WARN, Level.INFO}
)

ALL_LEVELS: frozenset[Level] = frozenset(Level)


__all__ = ["ALL_LEVELS", "DEFAULT_LEVELS", "Level"]
