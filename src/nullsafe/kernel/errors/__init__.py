"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── AbsentValueError (also LookupError, alias NoSuchElementError)
    │   └── NullValueError   (also ValueError)
    └── ConfigError          (nullsafe.config.validation)
"""

from nullsafe.kernel.errors.base import BaseError
from nullsafe.kernel.errors.domain import (
    AbsentValueError,
    DomainError,
    NoSuchElementError,
    NullValueError,
)

__all__ = [
    "AbsentValueError",
    "BaseError",
    "DomainError",
    "NoSuchElementError",
    "NullValueError",
]
