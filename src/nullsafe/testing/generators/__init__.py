"""Testing generators – Hypothesis strategies for Optional values."""
from nullsafe.testing.generators.strategies import (
    empty_strategy,
    optional_strategy,
    present_strategy,
)

__all__ = [
    "empty_strategy",
    "optional_strategy",
    "present_strategy",
]
