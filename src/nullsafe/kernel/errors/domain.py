"""Domain errors — absent values and invalid arguments."""

from __future__ import annotations

from nullsafe.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a container rule is violated."""

    default_code = "domain_error"


class AbsentValueError(DomainError, LookupError):
    """A value was required but the container was empty."""

    default_code = "no_such_element"
    default_message = "No value present"


class NullValueError(DomainError, ValueError):
    """``None`` was passed where a present value is mandatory."""

    default_code = "null_value"
    default_message = "Value must not be None"


NoSuchElementError = AbsentValueError


__all__ = [
    "AbsentValueError",
    "DomainError",
    "NoSuchElementError",
    "NullValueError",
]
