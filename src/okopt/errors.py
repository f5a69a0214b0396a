"""Error taxonomy shared by Option, Result and the helper functions."""

from __future__ import annotations

__all__ = [
    'ArgumentError',
    'ExpectError',
    'NotComparableError',
    'NotPresentError',
    'OkoptError',
    'ResultRequiredError',
    'TypeMismatchError',
    'UnwrapError',
]


class OkoptError(Exception):
    """Base class for every error raised by okopt."""


class NotPresentError(OkoptError):
    """A value was required to be present (or blank) and was not."""


class TypeMismatchError(OkoptError, TypeError):
    """A value's type disagrees with the expected type."""


class UnwrapError(OkoptError):
    """unwrap() was called on a variant holding no extractable value."""


class ExpectError(OkoptError):
    """expect() was called on a variant holding no extractable value.

    The message is the caller-supplied diagnostic, verbatim.
    """


class ArgumentError(OkoptError, TypeError):
    """A combinator received an argument or callback result of the wrong algebra."""


class ResultRequiredError(OkoptError, TypeError):
    """A Result was required and something else was given."""

    def __init__(self, message: str = 'value must be a Result') -> None:
        super().__init__(message)


class NotComparableError(OkoptError, TypeError):
    """Equality was attempted between an Option or Result and an unrelated type."""

    def __init__(self, left: object, right: object) -> None:
        self.left_type = type(left)
        self.right_type = type(right)
        super().__init__(f'Cannot compare {self.left_type.__name__} to {self.right_type.__name__}')
