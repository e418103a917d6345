"""Kernel time – event timestamps.

Every timestamp that reaches the wire is timezone-aware UTC.  Naive
datetimes are taken to already be UTC.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: source of event timestamps for entries built without one."""

    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = as_utc(fixed)

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **delta: float) -> datetime:
        """Move forward by ``timedelta(**delta)`` and return the new time."""
        self._fixed += timedelta(**delta)
        return self._fixed


def utc_now() -> datetime:
    return datetime.now(UTC)


def as_utc(moment: datetime) -> datetime:
    """Return *moment* in UTC, tagging naive values as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock", "as_utc", "utc_now"]
