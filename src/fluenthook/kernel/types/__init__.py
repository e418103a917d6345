"""Kernel types – small value types shared across layers."""
from fluenthook.kernel.types.option import Nothing, Option, Some, option_of

__all__ = ["Nothing", "Option", "Some", "option_of"]
