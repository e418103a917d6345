"""Observability – structlog configuration helpers."""
from fluenthook.observability.logging.factory import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
