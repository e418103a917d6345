"""Observability – JsonLoggerFactory.

Configures structlog to render JSON through the stdlib logging tree and,
when a hook is given, forwards every structlog event to Fluentd as well.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

from fluenthook.hook import FluentHook
from fluenthook.integrations.structlog_processor import FluentProcessor


class JsonLoggerFactory:
    """Configure structlog for JSON output with optional Fluentd forwarding."""

    @staticmethod
    def configure(level: int = logging.INFO, hook: FluentHook | None = None) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]
        if hook is not None:
            shared_processors.append(FluentProcessor(hook))

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, bound to *initial_values* when given."""
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["JsonLoggerFactory", "get_logger"]
