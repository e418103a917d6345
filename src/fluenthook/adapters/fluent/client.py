"""Fluent adapter – ForwardClient, a blocking TCP Forward protocol client."""
from __future__ import annotations

import logging
import socket
from datetime import datetime
from typing import Any, Protocol

from fluenthook.adapters.fluent.protocol import pack_message
from fluenthook.kernel.errors import FluentConnectionError, FluentSendError
from fluenthook.kernel.time import utc_now

logger = logging.getLogger(__name__)


class Connection(Protocol):
    """Port: one session to the collector."""

    def send(self, tag: str, record: dict[str, Any], time: datetime | None = None) -> None: ...
    def close(self) -> None: ...


class ForwardClient:
    """Send Message-mode frames to a Fluentd ``in_forward`` input.

    Usage::

        with ForwardClient("127.0.0.1", 24224) as client:
            client.send("app.events", {"message": "hello"})

    :meth:`send` connects on demand: a client that was never connected, or
    whose socket was dropped after a failed write, opens a new connection
    for the next record.  The failed record itself is not resent.  After
    :meth:`close`, sends fail until :meth:`connect` is called again.

    :meth:`send` is not thread-safe on its own; the persistent connection
    provider serializes access to a shared client.
    """

    def __init__(self, host: str, port: int, timeout: float | None = 3.0) -> None:
        self._host = host
        self._port = port
        self._timeout = timeout
        self._sock: socket.socket | None = None
        self._closed = False

    @property
    def address(self) -> str:
        return f"{self._host}:{self._port}"

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def connect(self) -> None:
        self._closed = False
        if self._sock is not None:
            return
        try:
            self._sock = socket.create_connection((self._host, self._port), timeout=self._timeout)
        except OSError as exc:
            raise FluentConnectionError(self.address, cause=exc) from exc
        logger.debug("fluent.connected address=%s", self.address)

    def send(self, tag: str, record: dict[str, Any], time: datetime | None = None) -> None:
        frame = pack_message(tag, time or utc_now(), record)
        if self._sock is None:
            if self._closed:
                raise FluentConnectionError(self.address, f"Client for fluentd at '{self.address}' is closed")
            self.connect()
        try:
            self._sock.sendall(frame)  # type: ignore[union-attr]
        except OSError as exc:
            self._drop()
            raise FluentSendError(tag, cause=exc) from exc
        logger.debug("fluent.sent tag=%s bytes=%d", tag, len(frame))

    def close(self) -> None:
        self._closed = True
        if self._sock is None:
            return
        try:
            self._sock.close()
        finally:
            self._sock = None
        logger.debug("fluent.closed address=%s", self.address)

    def _drop(self) -> None:
        sock, self._sock = self._sock, None
        if sock is not None:
            try:
                sock.close()
            except OSError:
                logger.debug("fluent.close_failed address=%s", self.address, exc_info=True)

    def __enter__(self) -> "ForwardClient":
        self.connect()
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()


__all__ = ["Connection", "ForwardClient"]
