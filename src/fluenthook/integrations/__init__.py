"""Integrations – host logging framework adapters."""
from fluenthook.integrations.logging_handler import FluentHandler, entry_from_record
from fluenthook.integrations.structlog_processor import FluentProcessor, entry_from_event

__all__ = ["FluentHandler", "FluentProcessor", "entry_from_event", "entry_from_record"]
