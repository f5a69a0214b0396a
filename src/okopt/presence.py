"""Presence helpers: blank/present predicates and fallbacks.

Blankness follows the usual web-framework convention: None, False,
whitespace-only strings and empty containers are blank. Objects can decide
for themselves by defining an ``is_blank()`` method; Nothing is blank and
every Some is present.
"""

from __future__ import annotations

from collections.abc import Callable, Sized
from typing import Any

from okopt.errors import NotPresentError, TypeMismatchError

__all__ = [
    'blank_or',
    'blank_or_else',
    'blank_or_raise',
    'is_blank',
    'is_present',
    'present_or',
    'present_or_else',
    'present_or_raise',
]


def is_blank(obj: object) -> bool:
    """Return True if obj is None, False, whitespace-only, or empty.

    Examples:
        >>> is_blank('  ')
        True
        >>> is_blank([0])
        False
    """
    if obj is None or obj is False:
        return True
    hook = getattr(type(obj), 'is_blank', None)
    if callable(hook):
        return bool(hook(obj))
    if isinstance(obj, str):
        return not obj.strip()
    if isinstance(obj, Sized):
        return len(obj) == 0
    return False


def is_present(obj: object) -> bool:
    """Return True if obj is not blank."""
    return not is_blank(obj)


def _check_default_type(obj: object, default: object) -> None:
    # A None receiver accepts any default.
    if obj is not None and type(default) is not type(obj):
        raise TypeMismatchError(
            f'Type mismatch: default value is a {type(default).__name__} '
            f'but original was a {type(obj).__name__}'
        )


def present_or_raise[T](obj: T, message: str) -> T:
    """Return obj if it is present, else raise NotPresentError(message).

    Useful to fail early on a strong expectation rather than later with an
    ambiguous error somewhere else.
    """
    if is_blank(obj):
        raise NotPresentError(message)
    return obj


def present_or[T](obj: T | None, default: T) -> T:
    """Return obj if it is present, else default.

    Raises:
        TypeMismatchError: If obj is not None and default has a different type.
    """
    _check_default_type(obj, default)
    if is_present(obj):
        return obj  # type: ignore[return-value]
    return default


def present_or_else[T](obj: T, f: Callable[[], Any]) -> Any:
    """Return obj if it is present, else the result of calling f."""
    if is_blank(obj):
        return f()
    return obj


def blank_or_raise[T](obj: T, message: str) -> T:
    """Return obj if it is blank, else raise NotPresentError(message)."""
    if not is_blank(obj):
        raise NotPresentError(message)
    return obj


def blank_or[T](obj: T | None, default: T) -> T | None:
    """Return obj if it is blank, else default.

    Raises:
        TypeMismatchError: If obj is not None and default has a different type.
    """
    _check_default_type(obj, default)
    if is_blank(obj):
        return obj
    return default


def blank_or_else[T](obj: T, f: Callable[[], Any]) -> Any:
    """Return obj if it is blank, else the result of calling f."""
    if not is_blank(obj):
        return f()
    return obj
