"""Testing support – property-based strategies.

Use in your own test suite::

    from hypothesis import given
    from nullsafe.testing import optional_strategy
"""

from nullsafe.testing.generators import (
    empty_strategy,
    optional_strategy,
    present_strategy,
)

__all__ = [
    "empty_strategy",
    "optional_strategy",
    "present_strategy",
]
