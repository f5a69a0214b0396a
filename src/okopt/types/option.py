"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from okopt._internal.guards import check_block_return, compare_foreign, payloads_equal, require_argument
from okopt.errors import ExpectError, UnwrapError

if TYPE_CHECKING:
    from okopt.types.result import ArbitraryType, Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. Any value can be wrapped,
    including None: ``Some(None)`` is present and is never flattened to
    Nothing.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> some.zip(Some('a'))
        Some(value=[42, 'a'])
    """

    value: T

    def __eq__(self, other: object) -> bool:
        """Compare by tag and payload.

        Raises:
            NotComparableError: If other is not an Option, unless the lenient
                comparison policy is active.
        """
        if isinstance(other, Some):
            return payloads_equal(self.value, other.value)
        if isinstance(other, NothingType):
            return False
        return compare_foreign(self, other, self.value, holds_value=True)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((Some, self.value))

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_blank(self) -> bool:
        """Return False; a Some is always present."""
        return False

    def some_and(self, predicate: Callable[[T], object]) -> bool:
        """Return True if the predicate holds for the contained value."""
        return bool(predicate(self.value))

    def none_or(self, predicate: Callable[[T], object]) -> bool:
        """Return True if the predicate holds for the contained value."""
        return bool(predicate(self.value))

    def to_sequence(self) -> list[T]:
        """Return a one-element list holding the value."""
        return [self.value]

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def tap_some(self, f: Callable[[T], object]) -> Some[T]:
        """Call f with the contained value for its side effects.

        This is Rust's ``inspect``; the name avoids clashing with ``inspect``
        the module and ``tap`` in other libraries.

        Returns:
            self, unchanged.
        """
        f(self.value)
        return self

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        The function returns a plain value which is wrapped in Some. Use
        and_then() for functions that already return an Option.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> Some[U]:  # noqa: ARG002
        """Return Some(f(value)); the default is only used by Nothing."""
        return Some(f(self.value))

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> Some[U]:  # noqa: ARG002
        """Return Some(f(value)); the default factory is never called."""
        return Some(f(self.value))

    def filter(self, predicate: Callable[[T], object]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns a truthy value to keep the value.

        Returns:
            Some(value) if predicate(value) is truthy, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def ok(self) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from okopt.types.result import Ok

        return Ok(self.value)

    def ok_or[E](self, err: E) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value).

        Args:
            err: Ignored error value.

        Returns:
            Ok containing the value.
        """
        from okopt.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, f: Callable[[], E]) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value) without calling f."""
        from okopt.types.result import Ok

        return Ok(self.value)

    def or_(self, other: Option[T]) -> Some[T]:
        """Return self if Some, else return other.

        Raises:
            ArgumentError: If other is not an Option.
        """
        require_argument(other, _OPTION_TYPES, 'other must be an Option; you might want unwrap_or')
        return self

    def or_else(self, f: Callable[[], Option[T]]) -> Some[T]:  # noqa: ARG002
        """Return self unchanged since this is Some."""
        return self

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other if self is Some, else return Nothing.

        Raises:
            ArgumentError: If other is not an Option.
        """
        require_argument(other, _OPTION_TYPES, 'other must be an Option')
        return other

    def and_then[U](self, f: Callable[[], Option[U]]) -> Option[U]:
        """Evaluate f and return the Option it produces.

        Unlike map(), f must itself return an Option, which is returned as-is.

        Raises:
            ArgumentError: If f returns something other than an Option while
                the strict block return type policy is active.
        """
        return check_block_return(f(), _OPTION_TYPES, 'and_then', 'an Option')

    def xor(self, other: Option[T]) -> Option[T]:
        """Return Some if exactly one of self and other is Some, else Nothing."""
        require_argument(other, _OPTION_TYPES, 'other must be an Option')
        if isinstance(other, NothingType):
            return self
        return Nothing

    def zip[U](self, other: Option[U]) -> Some[list[Any]] | NothingType:
        """Combine two Some values into a two-element list.

        If both are Some, returns Some([self.value, other.value]).
        If other is Nothing, returns Nothing.
        """
        require_argument(other, _OPTION_TYPES, 'other must be an Option')
        if isinstance(other, Some):
            return Some([self.value, other.value])
        return Nothing

    def zip_with[U, R](self, other: Option[U], f: Callable[[T, U], R]) -> Some[R] | NothingType:
        """Combine two Some values with a function.

        If both are Some, returns Some(f(self.value, other.value)); f is not
        called otherwise.
        """
        require_argument(other, _OPTION_TYPES, 'other must be an Option')
        if isinstance(other, Some):
            return Some(f(self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Option[U]]) -> Option[U]:
        """Flatten one level of nesting: Some(Some(x)) becomes Some(x).

        A Some holding something other than an Option is returned unchanged.
        """
        if isinstance(self.value, _OPTION_TYPES):
            return self.value
        return self  # type: ignore[return-value]


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Operations on Nothing return Nothing, a default, or the result of a
    fallback function. Fallback functions are only called here.

    Use the `Nothing` constant instead of instantiating directly; separate
    instances compare equal anyway.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
        >>> Nothing.ok_or('missing')
        Err(error='missing')
    """

    def __eq__(self, other: object) -> bool:
        """Compare by tag.

        Raises:
            NotComparableError: If other is not an Option, unless the lenient
                comparison policy is active.
        """
        if isinstance(other, NothingType):
            return True
        if isinstance(other, Some):
            return False
        return compare_foreign(self, other, None, holds_value=False)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(NothingType)

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def is_blank(self) -> bool:
        """Return True; Nothing counts as blank."""
        return True

    def some_and(self, predicate: Callable[[Any], object]) -> bool:  # noqa: ARG002
        """Return False without calling the predicate."""
        return False

    def none_or(self, predicate: Callable[[Any], object]) -> bool:  # noqa: ARG002
        """Return True without calling the predicate."""
        return True

    def to_sequence(self) -> list[Any]:
        """Return an empty list."""
        return []

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            UnwrapError: Always, since Nothing has no value to unwrap.
        """
        raise UnwrapError('cannot unwrap Nothing')

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Raises:
            ExpectError: Always, with msg as its message.
        """
        raise ExpectError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def tap_some(self, f: Callable[[Any], object]) -> NothingType:  # noqa: ARG002
        """Return self without calling f."""
        return self

    def map(self, f: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to map."""
        return self

    def map_or[U](self, default: U, f: Callable[[Any], U]) -> Some[U]:  # noqa: ARG002
        """Return Some(default) without calling f."""
        return Some(default)

    def map_or_else[U](
        self, default: Callable[[], U], f: Callable[[Any], U]  # noqa: ARG002
    ) -> Some[U] | NothingType:
        """Compute a default and wrap it in Some if it is present.

        A blank default (None, empty string or container, Nothing, ...) gives
        Nothing instead; see okopt.presence.is_blank.
        """
        from okopt.presence import is_present

        value = default()
        if is_present(value):
            return Some(value)
        return Nothing

    def filter(self, predicate: Callable[[Any], object]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to filter."""
        return self

    def ok(self) -> Err[ArbitraryType]:
        """Convert to Result, returning an Err with no detail."""
        from okopt.types.result import Err

        return Err()

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from okopt.types.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from okopt.types.result import Err

        return Err(f())

    def or_[T](self, other: Option[T]) -> Option[T]:
        """Return other since self is Nothing.

        Raises:
            ArgumentError: If other is not an Option.
        """
        require_argument(other, _OPTION_TYPES, 'other must be an Option; you might want unwrap_or')
        return other

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        """Evaluate the fallback and return the Option it produces.

        Raises:
            ArgumentError: If f returns something other than an Option while
                the strict block return type policy is active.
        """
        return check_block_return(f(), _OPTION_TYPES, 'or_else', 'an Option')

    def and_(self, other: Option[Any]) -> NothingType:
        """Return Nothing since self is Nothing.

        Raises:
            ArgumentError: If other is not an Option.
        """
        require_argument(other, _OPTION_TYPES, 'other must be an Option')
        return self

    def and_then(self, f: Callable[[], Option[Any]]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling f."""
        return self

    def xor[T](self, other: Option[T]) -> Option[T]:
        """Return other if it is Some, else Nothing."""
        require_argument(other, _OPTION_TYPES, 'other must be an Option')
        return other

    def zip(self, other: Option[Any]) -> NothingType:
        """Return Nothing since self is Nothing."""
        require_argument(other, _OPTION_TYPES, 'other must be an Option')
        return self

    def zip_with(self, other: Option[Any], f: Callable[[Any, Any], Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling f."""
        require_argument(other, _OPTION_TYPES, 'other must be an Option')
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def __repr__(self) -> str:
        return 'Nothing'


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""

_OPTION_TYPES = (Some, NothingType)

type Option[T] = Some[T] | NothingType
