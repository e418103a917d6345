"""Unit tests for Forward protocol framing."""
from __future__ import annotations

import struct
from datetime import UTC, datetime

import msgpack
import pytest

from fluenthook.adapters.fluent import decode_event_time, event_time, pack_message
from fluenthook.adapters.fluent.protocol import EVENT_TIME_EXT_CODE
from fluenthook.kernel.errors import RecordSerializationError

MOMENT = datetime(2026, 1, 1, 12, 0, 0, 250_000, tzinfo=UTC)


class TestEventTime:
    def test_ext_code_zero(self) -> None:
        ext = event_time(MOMENT)
        assert ext.code == EVENT_TIME_EXT_CODE == 0
        assert len(ext.data) == 8

    def test_seconds_and_nanoseconds(self) -> None:
        seconds, nanos = decode_event_time(event_time(MOMENT))
        assert seconds == int(datetime(2026, 1, 1, 12, tzinfo=UTC).timestamp())
        assert nanos == 250_000_000

    def test_decode_rejects_other_codes(self) -> None:
        with pytest.raises(ValueError):
            decode_event_time(msgpack.ExtType(5, b"\x00" * 8))

    def test_naive_time_is_utc(self) -> None:
        naive = MOMENT.replace(tzinfo=None)
        assert decode_event_time(event_time(naive)) == decode_event_time(event_time(MOMENT))


class TestPackMessage:
    def test_frame_layout(self) -> None:
        frame = pack_message("app.events", MOMENT, {"message": "hi", "n": 1})
        tag, ext, record = msgpack.unpackb(frame, raw=False)
        assert tag == "app.events"
        assert isinstance(ext, msgpack.ExtType)
        assert decode_event_time(ext)[1] == 250_000_000
        assert record == {"message": "hi", "n": 1}

    def test_bytes_packed_as_bin(self) -> None:
        frame = pack_message("t", MOMENT, {"blob": b"\x00\x01"})
        _, _, record = msgpack.unpackb(frame, raw=False)
        assert record["blob"] == b"\x00\x01"

    def test_unpackable_value_raises(self) -> None:
        with pytest.raises(RecordSerializationError) as exc_info:
            pack_message("t", MOMENT, {"obj": object()})
        assert exc_info.value.tag == "t"
        assert isinstance(exc_info.value.__cause__, TypeError)

    @pytest.mark.parametrize(
        "moment",
        [datetime(1969, 12, 31, tzinfo=UTC), datetime(2107, 1, 1, tzinfo=UTC)],
    )
    def test_time_outside_event_time_range_raises(self, moment: datetime) -> None:
        with pytest.raises(RecordSerializationError) as exc_info:
            pack_message("t", moment, {"message": "hi"})
        assert exc_info.value.tag == "t"
        assert isinstance(exc_info.value.__cause__, struct.error)
