"""Fluent adapter – connection providers.

Two lifecycle modes, chosen once when the hook is built:

* :class:`PersistentConnectionProvider` – one long-lived connection shared by
  every call; sends are serialized with a lock and the connection is never
  released between calls.
* :class:`PerCallConnectionProvider` – a fresh connection per send, released
  (best-effort) right after, whatever the send outcome.
"""
from __future__ import annotations

import abc
import contextlib
import logging
import threading
from collections.abc import Callable, Iterator
from datetime import datetime
from typing import Any

from fluenthook.adapters.fluent.client import Connection, ForwardClient

logger = logging.getLogger(__name__)

type ConnectionFactory = Callable[[], Connection]


def forward_connector(host: str, port: int, timeout: float | None = 3.0) -> ConnectionFactory:
    """Return a factory that opens a connected :class:`ForwardClient`."""

    def _connect() -> Connection:
        client = ForwardClient(host, port, timeout=timeout)
        client.connect()
        return client

    return _connect


class ConnectionProvider(abc.ABC):
    """Port: hands out connections to the collector."""

    @abc.abstractmethod
    def acquire(self) -> Connection: ...

    @abc.abstractmethod
    def release(self, connection: Connection) -> None: ...

    @contextlib.contextmanager
    def session(self) -> Iterator[Connection]:
        connection = self.acquire()
        try:
            yield connection
        finally:
            self.release(connection)

    def send(self, tag: str, record: dict[str, Any], time: datetime | None = None) -> None:
        with self.session() as connection:
            connection.send(tag, record, time)

    def close(self) -> None:
        """Release anything the provider holds on to."""


class PersistentConnectionProvider(ConnectionProvider):
    """Reuse one connection for every send."""

    def __init__(self, connection: Connection) -> None:
        self._connection = connection
        self._lock = threading.Lock()

    @property
    def connection(self) -> Connection:
        return self._connection

    def acquire(self) -> Connection:
        return self._connection

    def release(self, connection: Connection) -> None:  # noqa: ARG002
        pass

    @contextlib.contextmanager
    def session(self) -> Iterator[Connection]:
        with self._lock:
            yield self._connection

    def close(self) -> None:
        with self._lock:
            self._connection.close()


class PerCallConnectionProvider(ConnectionProvider):
    """Open a connection for each send and close it afterwards."""

    def __init__(self, factory: ConnectionFactory) -> None:
        self._factory = factory

    def acquire(self) -> Connection:
        return self._factory()

    def release(self, connection: Connection) -> None:
        try:
            connection.close()
        except Exception:  # noqa: BLE001
            logger.debug("fluent.release_failed", exc_info=True)


__all__ = [
    "ConnectionFactory",
    "ConnectionProvider",
    "PerCallConnectionProvider",
    "PersistentConnectionProvider",
    "forward_connector",
]
