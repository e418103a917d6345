"""FluentHook – level gate, transformation and delivery of one log entry.

Typical usage::

    hook = FluentHook.new("127.0.0.1", 24224)
    hook.add_ignore("password")
    hook.add_filter("error", str)
    hook.set_tag("app.events")

    hook.fire(LogEntry(Level.ERROR, "boom", {"user": 42}))

Configure the hook before handing it to concurrent callers.  Mutators are
still safe afterwards: each one swaps in a new :class:`HookConfig` snapshot
under a lock, and :meth:`FluentHook.fire` reads the snapshot once per call.
"""
from __future__ import annotations

import logging
import threading
import warnings
from collections.abc import Iterable
from typing import Any

from fluenthook.adapters.fluent import (
    ConnectionProvider,
    PerCallConnectionProvider,
    PersistentConnectionProvider,
    forward_connector,
)
from fluenthook.config import FluentConfig, HookConfig, MESSAGE_FIELD
from fluenthook.kernel.entry import Customizer, LogEntry, Transform
from fluenthook.kernel.errors import RecordSerializationError
from fluenthook.kernel.levels import Level
from fluenthook.pipeline import convert_to_value, is_enabled, transform

logger = logging.getLogger(__name__)


class FluentHook:
    """Forward log entries to Fluentd.

    Parameters
    ----------
    provider:
        Where connections come from (persistent or per-call).
    config:
        Initial rule snapshot.  Defaults to :class:`HookConfig` defaults.
    """

    def __init__(self, provider: ConnectionProvider, config: HookConfig | None = None) -> None:
        self._provider = provider
        self._config = config or HookConfig()
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, host: str, port: int) -> "FluentHook":
        """Hook with a persistent connection to *host*:*port*."""
        return cls.from_config(FluentConfig(host=host, port=port, default_message_field=MESSAGE_FIELD))

    @classmethod
    def from_config(cls, conf: FluentConfig) -> "FluentHook":
        """Build a hook from *conf*.

        Unless ``disable_connection_pool`` is set the connection is opened
        here, so an unreachable collector raises
        :class:`~fluenthook.kernel.errors.FluentConnectionError` right away.
        """
        connect = forward_connector(conf.host, conf.port, conf.timeout)
        provider: ConnectionProvider
        if conf.disable_connection_pool:
            provider = PerCallConnectionProvider(connect)
        else:
            provider = PersistentConnectionProvider(connect())
        logger.debug(
            "fluent.hook_created address=%s persistent=%s",
            conf.address,
            not conf.disable_connection_pool,
        )
        return cls(provider, conf.hook_config())

    @classmethod
    def new_hook(cls, host: str, port: int) -> "FluentHook":
        """Hook that connects on every call.

        .. deprecated:: use :meth:`new` or :meth:`from_config`.
        """
        warnings.warn(
            "FluentHook.new_hook() is deprecated; use FluentHook.new() or FluentHook.from_config()",
            DeprecationWarning,
            stacklevel=2,
        )
        return cls.from_config(
            FluentConfig(
                host=host,
                port=port,
                default_message_field=MESSAGE_FIELD,
                disable_connection_pool=True,
            )
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> HookConfig:
        """Current rule snapshot."""
        return self._config

    @property
    def provider(self) -> ConnectionProvider:
        return self._provider

    def levels(self) -> frozenset[Level]:
        return self._config.levels

    def set_levels(self, levels: Iterable[Level]) -> None:
        with self._lock:
            self._config = self._config.with_levels(levels)

    def tag(self) -> str:
        """Static tag, or ``""`` when tags are resolved per entry."""
        return self._config.tag.unwrap_or("")

    def set_tag(self, tag: str) -> None:
        """Set a static tag that overrides the ``tag`` field of every entry."""
        with self._lock:
            self._config = self._config.with_tag(tag)

    def set_message_field(self, name: str) -> None:
        with self._lock:
            self._config = self._config.with_message_field(name)

    def add_ignore(self, name: str) -> None:
        with self._lock:
            self._config = self._config.adding_ignore(name)

    def add_filter(self, name: str, fn: Transform) -> None:
        with self._lock:
            self._config = self._config.adding_filter(name, fn)

    def add_customizer(self, fn: Customizer) -> None:
        with self._lock:
            self._config = self._config.adding_customizer(fn)

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    def fire(self, entry: LogEntry) -> bool:
        """Send *entry* to Fluentd.

        Returns ``False`` without doing anything when the entry's level is
        not enabled.  Connection, send and customizer errors propagate; a
        record that cannot be converted (e.g. a cyclic container) raises
        :class:`~fluenthook.kernel.errors.RecordSerializationError`.
        """
        config = self._config
        if not is_enabled(entry, config):
            return False

        tag, record = transform(entry, config)
        try:
            payload = convert_to_value(record)
        except RecursionError as exc:
            raise RecordSerializationError(
                f"Record for tag '{tag}' is too deeply nested or cyclic", tag=tag, cause=exc
            ) from exc
        self._provider.send(tag, payload, entry.time)
        return True

    def close(self) -> None:
        self._provider.close()

    def __enter__(self) -> "FluentHook":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()


__all__ = ["FluentHook"]
