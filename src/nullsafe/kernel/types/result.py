"""Result[T, E] — Ok and Err variants, convertible to and from Optional."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, NoReturn, TypeVar

if TYPE_CHECKING:
    from nullsafe.kernel.types.option import Optional

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)


class Ok(Generic[T]):
    """Successful result variant."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def unwrap_or_else(self, func: Callable[[Any], T]) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> Ok[U]:
        return Ok(func(self._value))

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return func(self._value)

    def to_optional(self) -> Optional[T]:
        from nullsafe.kernel.types.option import Optional

        return Optional.of_nullable(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Ok, Err)):
            return NotImplemented
        return isinstance(other, Ok) and bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash(("ok", self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Generic[E]):
    """Error result variant."""

    __slots__ = ("_error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self._error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        return func(self._error)

    def map(self, func: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def flat_map(self, func: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def to_optional(self) -> Optional[Any]:
        from nullsafe.kernel.types.option import Optional

        return Optional.empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Ok, Err)):
            return NotImplemented
        return isinstance(other, Err) and bool(self._error == other._error)

    def __hash__(self) -> int:
        return hash(("err", self._error))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


type Result[T, E] = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
