"""Runtime checks shared by Option and Result.

Lacking static enforcement, the combinators check their arguments and the
results of their callbacks here, so misuse fails at the call site with an
ArgumentError rather than later with an AttributeError on a bare value.
"""

from __future__ import annotations

from okopt._logging import get_logger
from okopt.errors import ArgumentError, NotComparableError
from okopt.policy import lenient_inner_value_comparison, strict_block_return_type

__all__ = ['check_block_return', 'compare_foreign', 'payloads_equal', 'require_argument']


def require_argument(other: object, expected: tuple[type, ...], message: str) -> None:
    """Raise ArgumentError unless ``other`` is one of the expected variant types.

    Argument checks are not affected by the policy.
    """
    if not isinstance(other, expected):
        raise ArgumentError(message)


def check_block_return[R](result: R, expected: tuple[type, ...], combinator: str, algebra: str) -> R:
    """Check the return value of an and_then/or_else callback.

    Under the strict policy a result outside ``expected`` raises ArgumentError;
    otherwise it is passed through and logged.

    Args:
        result: What the callback returned.
        expected: The variant types of the algebra the combinator belongs to.
        combinator: Name of the calling combinator, for the message.
        algebra: Name of the expected algebra, for the message.

    Returns:
        ``result`` unchanged.
    """
    if isinstance(result, expected):
        return result
    if strict_block_return_type():
        raise ArgumentError(f'{combinator} callback must return {algebra}, got {type(result).__name__}')
    get_logger(__name__).debug(
        'unchecked_block_return',
        combinator=combinator,
        expected=algebra,
        returned=type(result).__name__,
    )
    return result


def payloads_equal(left: object, right: object) -> bool:
    """Compare the payloads of two variants of the same tag.

    Nested Options and Results that cannot be compared to each other are
    unequal, so ``Some(Some(1)) == Some(1)`` is False rather than an error.
    """
    try:
        return bool(left == right)
    except NotComparableError:
        return False


def _is_variant(obj: object) -> bool:
    from okopt.types.option import NothingType, Some
    from okopt.types.result import Err, Ok

    return isinstance(obj, Some | NothingType | Ok | Err)


def compare_foreign(variant: object, other: object, payload: object, *, holds_value: bool) -> bool:
    """Compare a variant against something outside its own algebra.

    Under the lenient comparison policy a bare value is compared against the
    payload of a Some or Ok; a Nothing or Err never equals a bare value.
    Everything else raises NotComparableError.
    """
    if _is_variant(other) or not lenient_inner_value_comparison():
        raise NotComparableError(variant, other)
    return holds_value and bool(payload == other)
