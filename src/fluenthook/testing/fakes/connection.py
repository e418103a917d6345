"""Testing fakes – in-memory connections."""
from __future__ import annotations

import copy
import dataclasses
from datetime import datetime
from typing import Any

from fluenthook.kernel.errors import FluentSendError


@dataclasses.dataclass(frozen=True)
class SentRecord:
    tag: str
    record: dict[str, Any]
    time: datetime | None = None


class RecordingConnection:
    """Connection that keeps every sent ``(tag, record)`` in memory.

    Usage::

        conn = RecordingConnection()
        hook = FluentHook(PersistentConnectionProvider(conn))
        hook.fire(entry)
        assert conn.sent[0].tag == "app"
    """

    def __init__(self) -> None:
        self._sent: list[SentRecord] = []
        self.closed = False
        self.close_calls = 0

    def send(self, tag: str, record: dict[str, Any], time: datetime | None = None) -> None:
        self._sent.append(SentRecord(tag, copy.deepcopy(record), time))

    def close(self) -> None:
        self.closed = True
        self.close_calls += 1

    @property
    def sent(self) -> list[SentRecord]:
        return list(self._sent)

    @property
    def last(self) -> SentRecord:
        return self._sent[-1]

    def of_tag(self, tag: str) -> list[SentRecord]:
        return [s for s in self._sent if s.tag == tag]

    def clear(self) -> None:
        self._sent.clear()


class FailingConnection(RecordingConnection):
    """Connection whose ``send`` (and optionally ``close``) always fails."""

    def __init__(self, *, fail_close: bool = False) -> None:
        super().__init__()
        self._fail_close = fail_close

    def send(self, tag: str, record: dict[str, Any], time: datetime | None = None) -> None:
        raise FluentSendError(tag, cause=OSError("broken pipe"))

    def close(self) -> None:
        super().close()
        if self._fail_close:
            raise OSError("close failed")


__all__ = ["FailingConnection", "RecordingConnection", "SentRecord"]
