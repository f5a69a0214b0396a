"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Final, NoReturn, TypeIs

import msgspec

from okopt._internal.guards import check_block_return, compare_foreign, payloads_equal, require_argument
from okopt.errors import ExpectError, UnwrapError

if TYPE_CHECKING:
    from okopt.types.option import NothingType, Some

__all__ = ['Arbitrary', 'ArbitraryType', 'Err', 'Ok', 'Result', 'collect']


class ArbitraryType:
    """Placeholder payload of an Err constructed without a value.

    ``Err()`` means "errored, no further detail". Its payload is the
    `Arbitrary` singleton rather than None, so it stays distinguishable from
    ``Err(None)``.
    """

    __slots__ = ()
    _instance: ArbitraryType | None = None

    def __new__(cls) -> ArbitraryType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'Arbitrary'

    def __reduce__(self) -> str:
        return 'Arbitrary'


Arbitrary: Final[ArbitraryType] = ArbitraryType()
"""Singleton payload of ``Err()``."""


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or passed along a chain of
    Result-returning operations. The value is required.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.and_(Ok('next'))
        Ok(value='next')
        >>> ok.match(ok=lambda v: v + 1, err=lambda e: 0)
        43
    """

    value: T

    def __eq__(self, other: object) -> bool:
        """Compare by tag and payload; Ok(1) != Err(1).

        Raises:
            NotComparableError: If other is not a Result, unless the lenient
                comparison policy is active.
        """
        if isinstance(other, Ok):
            return payloads_equal(self.value, other.value)
        if isinstance(other, Err):
            return False
        return compare_foreign(self, other, self.value, holds_value=True)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((Ok, self.value))

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def ok_and(self, predicate: Callable[[T], object]) -> bool:
        """Return True if the predicate holds for the contained value."""
        return bool(predicate(self.value))

    def err_and(self, predicate: Callable[[Any], object]) -> bool:  # noqa: ARG002
        """Return False without calling the predicate."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise an exception since this is Ok.

        Raises:
            UnwrapError: Always, since Ok holds no error.
        """
        raise UnwrapError('value is an Ok')

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Ok[T]], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        """Return other since this is Ok.

        Raises:
            ArgumentError: If other is not a Result.
        """
        require_argument(other, _RESULT_TYPES, 'other must be a Result')
        return other

    def and_then[U, E](self, f: Callable[[Ok[T]], Result[U, E]]) -> Result[U, E]:
        """Pass self to f and return the Result it produces.

        Raises:
            ArgumentError: If f returns something other than a Result while
                the strict block return type policy is active.
        """
        return check_block_return(f(self), _RESULT_TYPES, 'and_then', 'a Result')

    def or_(self, other: Result[T, Any]) -> Ok[T]:
        """Return self since this is Ok.

        Raises:
            ArgumentError: If other is not a Result.
        """
        require_argument(other, _RESULT_TYPES, 'other must be a Result; you might want unwrap_or')
        return self

    def or_else(self, f: Callable[[Any], Result[T, Any]]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def match[R](self, *, ok: Callable[[T], R], err: Callable[[Any], R]) -> R:  # noqa: ARG002
        """Call the ok handler with the contained value and return its result."""
        return ok(self.value)

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from okopt.types.option import Some

        return Some(self.value)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        from okopt.types.option import Nothing

        return Nothing


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be inspected, transformed, or recovered from. Without an
    argument the error is the `Arbitrary` placeholder.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
        >>> Err().unwrap_err()
        Arbitrary
    """

    error: E = Arbitrary  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        """Compare by tag and payload; Err() == Err() but Err() != Err('x').

        Raises:
            NotComparableError: If other is not a Result, unless the lenient
                comparison policy is active.
        """
        if isinstance(other, Err):
            return payloads_equal(self.error, other.error)
        if isinstance(other, Ok):
            return False
        return compare_foreign(self, other, self.error, holds_value=False)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((Err, self.error))

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def ok_and(self, predicate: Callable[[Any], object]) -> bool:  # noqa: ARG002
        """Return False without calling the predicate."""
        return False

    def err_and(self, predicate: Callable[[E], object]) -> bool:
        """Return True if the predicate holds for the contained error."""
        return bool(predicate(self.error))

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            UnwrapError: Always, since Err has no Ok value to unwrap.
        """
        raise UnwrapError('value is an Err')

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Raises:
            ExpectError: Always, with msg as its message.
        """
        raise ExpectError(msg)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[Err[E]], T]) -> T:
        """Pass self to f and return its result."""
        return f(self)

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_(self, other: Result[Any, Any]) -> Err[E]:
        """Return self since this is Err.

        Raises:
            ArgumentError: If other is not a Result.
        """
        require_argument(other, _RESULT_TYPES, 'other must be a Result')
        return self

    def and_then(self, f: Callable[[Any], Result[Any, Any]]) -> Err[E]:  # noqa: ARG002
        """Return self without calling f."""
        return self

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        """Return other since this is Err.

        Raises:
            ArgumentError: If other is not a Result.
        """
        require_argument(other, _RESULT_TYPES, 'other must be a Result; you might want unwrap_or')
        return other

    def or_else[T, F](self, f: Callable[[Err[E]], Result[T, F]]) -> Result[T, F]:
        """Pass self to a recovery function and return the Result it produces.

        Raises:
            ArgumentError: If f returns something other than a Result while
                the strict block return type policy is active.
        """
        return check_block_return(f(self), _RESULT_TYPES, 'or_else', 'a Result')

    def match[R](self, *, ok: Callable[[Any], R], err: Callable[[E], R]) -> R:  # noqa: ARG002
        """Call the err handler with the contained error and return its result."""
        return err(self.error)

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        from okopt.types.option import Nothing

        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        from okopt.types.option import Some

        return Some(self.error)


_RESULT_TYPES = (Ok, Err)

type Result[T, E = Any] = Ok[T] | Err[E]


def collect[T, E](results: Iterable[Result[T, E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Raises:
        ArgumentError: If an item is not a Result.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        require_argument(result, _RESULT_TYPES, 'collect requires an iterable of Results')
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
