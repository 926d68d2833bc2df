"""Kernel – dependency-free container and error types."""

from nullsafe.kernel.errors import (
    AbsentValueError,
    BaseError,
    DomainError,
    NoSuchElementError,
    NullValueError,
)
from nullsafe.kernel.types import Empty, Err, Ok, Optional, Present, Result

__all__ = [
    "AbsentValueError",
    "BaseError",
    "DomainError",
    "Empty",
    "Err",
    "NoSuchElementError",
    "NullValueError",
    "Ok",
    "Optional",
    "Present",
    "Result",
]
