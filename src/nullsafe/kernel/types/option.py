"""Optional[T] container — Present and Empty variants.

An :class:`Optional` holds zero or one value and never stores ``None`` as a
present value. Instances are immutable; :class:`Empty` is a singleton.

Usage::

    from nullsafe.kernel.types import Optional

    name = Optional.of_nullable(user.nickname).map(str.strip).or_else("anonymous")
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Generic, Iterator, NoReturn, TypeVar

from nullsafe.kernel.errors import AbsentValueError, NullValueError

if TYPE_CHECKING:
    from nullsafe.kernel.types.result import Err, Ok

T = TypeVar("T")
K = TypeVar("K")


class Optional(abc.ABC, Generic[T]):
    """Base of the two-variant ``Present[T] | Empty`` sum type."""

    __slots__ = ()

    # -- construction ------------------------------------------------------

    @staticmethod
    def empty() -> Optional[Any]:
        """Return the canonical empty instance."""
        return _EMPTY

    @staticmethod
    def of(value: T) -> Present[T]:
        """Wrap *value*; raises :class:`NullValueError` when it is ``None``."""
        return Present(value)

    @staticmethod
    def of_nullable(value: T | None) -> Optional[T]:
        """Wrap *value*, or return the empty instance when it is ``None``."""
        if value is None:
            return _EMPTY
        return Present(value)

    # -- immutability ------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -- queries -----------------------------------------------------------

    @abc.abstractmethod
    def is_present(self) -> bool: ...

    def is_empty(self) -> bool:
        return not self.is_present()

    @abc.abstractmethod
    def get(self) -> T:
        """Return the held value or raise :class:`AbsentValueError`."""

    @abc.abstractmethod
    def or_else_throw(self, exception_supplier: Callable[[], BaseException] | None = None) -> T:
        """Return the held value, otherwise raise.

        Without *exception_supplier* an :class:`AbsentValueError` is raised;
        with one, the exception it returns is raised instead. The supplier is
        only called when the container is empty.
        """

    @abc.abstractmethod
    def or_else(self, other: T) -> T: ...

    @abc.abstractmethod
    def or_else_get(self, supplier: Callable[[], T]) -> T: ...

    @abc.abstractmethod
    def or_(self, supplier: Callable[[], T]) -> Optional[T]:
        """Return ``self`` if present, otherwise ``Optional.of(supplier())``."""

    # -- combinators -------------------------------------------------------

    @abc.abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]: ...

    @abc.abstractmethod
    def map(self, mapper: Callable[[T], K | None]) -> Optional[K]:
        """Apply *mapper* to a present value; a ``None`` result yields empty."""

    @abc.abstractmethod
    def flat_map(self, mapper: Callable[[T], Optional[K]]) -> Optional[K]: ...

    @abc.abstractmethod
    def if_present(self, action: Callable[[T], Any]) -> None: ...

    @abc.abstractmethod
    def if_present_or_else(self, action: Callable[[T], Any], empty_action: Callable[[], Any]) -> None: ...

    @abc.abstractmethod
    def to_result(self) -> Ok[T] | Err[AbsentValueError]:
        """``Ok(value)`` when present, ``Err(AbsentValueError())`` otherwise."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[T]: ...


class Present(Optional[T]):
    """Optional holding a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        if value is None:
            raise NullValueError()
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self._value

    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self._value

    def or_else_throw(self, exception_supplier: Callable[[], BaseException] | None = None) -> T:  # noqa: ARG002
        return self._value

    def or_else(self, other: T) -> T:  # noqa: ARG002
        return self._value

    def or_else_get(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        return self._value

    def or_(self, supplier: Callable[[], T]) -> Present[T]:  # noqa: ARG002
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return self if predicate(self._value) else _EMPTY

    def map(self, mapper: Callable[[T], K | None]) -> Optional[K]:
        return Optional.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], Optional[K]]) -> Optional[K]:
        result = mapper(self._value)
        if not isinstance(result, Optional):
            raise TypeError(f"flat_map mapper must return an Optional, got {type(result).__name__}")
        return result

    def if_present(self, action: Callable[[T], Any]) -> None:
        action(self._value)

    def if_present_or_else(self, action: Callable[[T], Any], empty_action: Callable[[], Any]) -> None:  # noqa: ARG002
        action(self._value)

    def to_result(self) -> Ok[T]:
        from nullsafe.kernel.types.result import Ok

        return Ok(self._value)

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Present):
            return bool(self._value == other._value)
        if isinstance(other, Optional):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Present({self._value!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (Present, (self._value,))


class Empty(Optional[Any]):
    """Optional without a value. Every ``Empty()`` call returns the same instance."""

    __slots__ = ()

    _instance: ClassVar[Empty | None] = None

    def __new__(cls) -> Empty:
        if cls._instance is None:
            # ClassVar assignment bypasses the instance-level __setattr__ guard.
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_present(self) -> bool:
        return False

    def get(self) -> NoReturn:
        raise AbsentValueError()

    def or_else_throw(self, exception_supplier: Callable[[], BaseException] | None = None) -> NoReturn:
        if exception_supplier is None:
            raise AbsentValueError()
        raise exception_supplier()

    def or_else(self, other: T) -> T:
        return other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return supplier()

    def or_(self, supplier: Callable[[], T]) -> Present[T]:
        return Optional.of(supplier())

    def filter(self, predicate: Callable[[Any], bool]) -> Empty:  # noqa: ARG002
        return self

    def map(self, mapper: Callable[[Any], Any]) -> Empty:  # noqa: ARG002
        return self

    def flat_map(self, mapper: Callable[[Any], Optional[K]]) -> Empty:  # noqa: ARG002
        return self

    def if_present(self, action: Callable[[Any], Any]) -> None:  # noqa: ARG002
        return None

    def if_present_or_else(self, action: Callable[[Any], Any], empty_action: Callable[[], Any]) -> None:  # noqa: ARG002
        empty_action()

    def to_result(self) -> Err[AbsentValueError]:
        from nullsafe.kernel.types.result import Err

        return Err(AbsentValueError())

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Optional):
            return isinstance(other, Empty)
        return NotImplemented

    def __hash__(self) -> int:
        return 0

    def __str__(self) -> str:
        return "Empty"

    def __repr__(self) -> str:
        return "Empty"

    def __reduce__(self) -> tuple[Any, ...]:
        return (Empty, ())


_EMPTY: Empty = Empty()


def empty() -> Optional[Any]:
    """Module-level alias of :meth:`Optional.empty`."""
    return _EMPTY


def of(value: T) -> Present[T]:
    """Module-level alias of :meth:`Optional.of`."""
    return Present(value)


def of_nullable(value: T | None) -> Optional[T]:
    """Module-level alias of :meth:`Optional.of_nullable`."""
    return Optional.of_nullable(value)


__all__ = ["Empty", "Optional", "Present", "empty", "of", "of_nullable"]
