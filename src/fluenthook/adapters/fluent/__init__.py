"""Fluent adapter – Forward protocol client and connection providers."""
from fluenthook.adapters.fluent.client import Connection, ForwardClient
from fluenthook.adapters.fluent.protocol import decode_event_time, event_time, pack_message
from fluenthook.adapters.fluent.provider import (
    ConnectionFactory,
    ConnectionProvider,
    PerCallConnectionProvider,
    PersistentConnectionProvider,
    forward_connector,
)

__all__ = [
    "Connection",
    "ConnectionFactory",
    "ConnectionProvider",
    "ForwardClient",
    "PerCallConnectionProvider",
    "PersistentConnectionProvider",
    "decode_event_time",
    "event_time",
    "forward_connector",
    "pack_message",
]
