"""Fluent adapter – Forward protocol framing (Message mode).

One frame is ``[tag, time, record]`` packed with msgpack, where *time* is an
``EventTime``: msgpack extension type 0 carrying big-endian uint32 seconds
and uint32 nanoseconds.
"""
from __future__ import annotations

import struct
from datetime import datetime
from typing import Any

import msgpack

from fluenthook.kernel.errors import RecordSerializationError
from fluenthook.kernel.time import as_utc

EVENT_TIME_EXT_CODE = 0

_EVENT_TIME = struct.Struct(">II")


def event_time(moment: datetime) -> msgpack.ExtType:
    """Encode *moment* as a Forward protocol ``EventTime`` (naive means UTC)."""
    moment = as_utc(moment)
    seconds = int(moment.replace(microsecond=0).timestamp())
    return msgpack.ExtType(EVENT_TIME_EXT_CODE, _EVENT_TIME.pack(seconds, moment.microsecond * 1000))


def decode_event_time(ext: msgpack.ExtType) -> tuple[int, int]:
    """Return ``(seconds, nanoseconds)`` from an ``EventTime`` extension."""
    if ext.code != EVENT_TIME_EXT_CODE:
        raise ValueError(f"not an EventTime extension (code={ext.code})")
    return _EVENT_TIME.unpack(ext.data)


def pack_message(tag: str, moment: datetime, record: dict[str, Any]) -> bytes:
    """Pack one Message-mode frame.

    ``EventTime`` seconds are uint32, so *moment* must fall between 1970 and
    2106; anything else raises :class:`RecordSerializationError` like an
    unpackable record does.
    """
    try:
        return msgpack.packb([tag, event_time(moment), record], use_bin_type=True)
    except (TypeError, ValueError, OverflowError, struct.error) as exc:
        raise RecordSerializationError(
            f"Could not pack record for tag '{tag}': {exc}", tag=tag, cause=exc
        ) from exc


__all__ = ["EVENT_TIME_EXT_CODE", "decode_event_time", "event_time", "pack_message"]
