"""Unit tests for LogEntry."""
from __future__ import annotations

from datetime import UTC, datetime

import pytest

from fluenthook.kernel import Level, LogEntry


class TestLogEntry:
    def test_defaults(self) -> None:
        entry = LogEntry(Level.INFO, "hello")
        assert dict(entry.fields) == {}
        assert entry.time.tzinfo is not None

    def test_fields_are_read_only(self) -> None:
        entry = LogEntry(Level.INFO, "hello", {"a": 1})
        with pytest.raises(TypeError):
            entry.fields["a"] = 2  # type: ignore[index]

    def test_fields_copied_from_caller(self) -> None:
        source = {"a": 1}
        entry = LogEntry(Level.INFO, "hello", source)
        source["a"] = 2
        assert entry.fields["a"] == 1

    def test_is_frozen(self) -> None:
        entry = LogEntry(Level.INFO, "hello")
        with pytest.raises((AttributeError, TypeError)):
            entry.message = "changed"  # type: ignore[misc]

    def test_with_fields_merges(self) -> None:
        moment = datetime(2026, 1, 1, tzinfo=UTC)
        entry = LogEntry(Level.ERROR, "boom", {"a": 1}, time=moment)
        updated = entry.with_fields(b=2, a=3)
        assert dict(updated.fields) == {"a": 3, "b": 2}
        assert updated.time == moment
        assert dict(entry.fields) == {"a": 1}

    def test_naive_time_taken_as_utc(self) -> None:
        entry = LogEntry(Level.INFO, "x", time=datetime(2026, 1, 1, 12, 0))
        assert entry.time == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
