"""Infrastructure errors – collector connection and transport failures."""

from __future__ import annotations

from typing import Any

from fluenthook.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Transport / I/O failure while talking to the collector."""

    default_code = "infrastructure_error"


class FluentConnectionError(InfrastructureError):
    """Could not open (or use) a connection to the Fluentd collector."""

    default_code = "fluent_connection_error"

    def __init__(
        self,
        address: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = {**(kwargs.pop("detail", None) or {}), "address": address}
        super().__init__(
            message or f"Could not connect to fluentd at '{address}'", detail=detail, **kwargs
        )
        self.address = address


class FluentSendError(InfrastructureError):
    """Writing a record to an open connection failed."""

    default_code = "fluent_send_error"

    def __init__(
        self,
        tag: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = {**(kwargs.pop("detail", None) or {}), "tag": tag}
        super().__init__(message or f"Failed to send record with tag '{tag}'", detail=detail, **kwargs)
        self.tag = tag


class RecordSerializationError(InfrastructureError):
    """A record could not be packed for the wire."""

    default_code = "record_serialization_error"

    def __init__(
        self,
        message: str,
        *,
        tag: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.tag = tag


__all__ = [
    "FluentConnectionError",
    "FluentSendError",
    "InfrastructureError",
    "RecordSerializationError",
]
