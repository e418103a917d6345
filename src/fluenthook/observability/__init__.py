"""Observability – logging setup for applications using fluenthook."""
from fluenthook.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
