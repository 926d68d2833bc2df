"""
nullsafe – Optional value container with a fluent combinator API.

Import path convention::

    from nullsafe import Optional, AbsentValueError
    from nullsafe.kernel.types import Ok, Err
    from nullsafe.observability.logging import configure_logging, get_logger
"""

from nullsafe.kernel.errors import AbsentValueError, NoSuchElementError, NullValueError
from nullsafe.kernel.types import Empty, Optional, Present, empty, of, of_nullable

__version__ = "0.1.0"
__all__ = [
    "AbsentValueError",
    "Empty",
    "NoSuchElementError",
    "NullValueError",
    "Optional",
    "Present",
    "__version__",
    "empty",
    "of",
    "of_nullable",
]
