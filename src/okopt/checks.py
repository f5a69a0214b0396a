"""Runtime type checks and conversions into the Option/Result algebras."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

from okopt.errors import ResultRequiredError, TypeMismatchError
from okopt.types.option import Nothing, NothingType, Option, Some
from okopt.types.result import Err, Ok, Result

__all__ = [
    'is_option',
    'is_result',
    'not_type_or_raise',
    'require_result',
    'to_option',
    'type_or',
    'type_or_else',
    'type_or_raise',
]


def type_or_raise[T](obj: object, type_: type[T], message: str | None = None) -> T:
    """Return obj if it is an instance of type_, else raise TypeMismatchError.

    Examples:
        >>> type_or_raise('hello', str)
        'hello'
        >>> type_or_raise(123, str)
        Traceback (most recent call last):
        ...
        okopt.errors.TypeMismatchError: Expected str but got int
    """
    if not isinstance(obj, type_):
        raise TypeMismatchError(message or f'Expected {type_.__name__} but got {type(obj).__name__}')
    return obj


def type_or[T](obj: object, type_: type[T], default: T) -> T:
    """Return obj if it is an instance of type_, else default."""
    if isinstance(obj, type_):
        return obj
    return default


def type_or_else[T](obj: object, type_: type[T], f: Callable[[], T]) -> T:
    """Return obj if it is an instance of type_, else the result of calling f."""
    if isinstance(obj, type_):
        return obj
    return f()


def not_type_or_raise[T](obj: T, type_: type, message: str | None = None) -> T:
    """Return obj unless it is an instance of type_, in which case raise TypeMismatchError."""
    if isinstance(obj, type_):
        raise TypeMismatchError(
            message or f'Expected anything but {type_.__name__} but got {type(obj).__name__}'
        )
    return obj


def is_result(obj: object) -> TypeIs[Result[Any, Any]]:
    """Return True if obj is an Ok or an Err."""
    return isinstance(obj, Ok | Err)


def is_option(obj: object) -> TypeIs[Option[Any]]:
    """Return True if obj is a Some or Nothing."""
    return isinstance(obj, Some | NothingType)


def require_result[R: Ok[Any] | Err[Any]](obj: R | object) -> R:
    """Return obj if it is a Result, else raise ResultRequiredError."""
    if not is_result(obj):
        raise ResultRequiredError(f'value must be a Result, got {type(obj).__name__}')
    return obj  # type: ignore[return-value]


def to_option[T](obj: T | None) -> Option[T]:
    """Wrap a possibly-None value: None becomes Nothing, anything else Some.

    Examples:
        >>> to_option(None)
        Nothing
        >>> to_option(0)
        Some(value=0)
    """
    if obj is None:
        return Nothing
    return Some(obj)
