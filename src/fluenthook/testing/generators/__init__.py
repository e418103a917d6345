"""Testing generators – Hypothesis strategies."""
from fluenthook.testing.generators.strategies import (
    field_value_strategy,
    fields_strategy,
    level_strategy,
    log_entry_strategy,
)

__all__ = ["field_value_strategy", "fields_strategy", "level_strategy", "log_entry_strategy"]
