"""Runtime policy: how pedantic Option and Result are at their seams.

Two switches are tracked:

* ``strict_block_return_type``: whether ``and_then``/``or_else`` callbacks must
  return the algebra they were called on. On by default; a wrong return type
  raises ArgumentError at the call site instead of failing later with an
  ``AttributeError`` somewhere downstream.
* ``lenient_inner_value_comparison``: whether ``Some(x) == y`` and
  ``Ok(x) == y`` compare ``x == y`` instead of raising NotComparableError.
  Off by default. Hashes are not lenient: ``Some(1) == 1`` holds but
  ``hash(Some(1)) != hash(1)``, so a bare value is never found in a set or
  dict keyed by Options.

The process default comes from the environment (``OKOPT_*`` variables) and
can be replaced with configure(). Temporary overrides are context-local, so
they are isolated per thread and per asyncio task.
"""

from __future__ import annotations

import contextlib
import dataclasses
import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

from okopt._logging import configure_logging, get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = [
    'Policy',
    'configure',
    'get_policy',
    'lenient_comparison',
    'lenient_inner_value_comparison',
    'override_policy',
    'relaxed_block_checks',
    'reset_policy',
    'strict_block_return_type',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class Policy:
    """Policy settings for combinator checks and equality.

    Attributes:
        strict_block_return_type: Enforce the return type of and_then/or_else callbacks.
        lenient_inner_value_comparison: Let Some/Ok compare their payload to bare values.
            Equality only; hashing still tells a variant from its payload.
    """

    strict_block_return_type: bool = True
    lenient_inner_value_comparison: bool = False


# Process default (resolved lazily from the environment)
_default: Policy | None = None

# Context-local override stack top; None means "use the process default"
_override: ContextVar[Policy | None] = ContextVar('okopt_policy', default=None)


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment.

    Unknown values are reported and ignored.
    """
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    get_logger(__name__).warning('unknown_env_flag', variable=name, value=raw, default=default)
    return default


def _detect_policy() -> Policy:
    """Build the process default from OKOPT_* environment variables."""
    defaults = Policy()
    return Policy(
        strict_block_return_type=_env_flag(
            'OKOPT_STRICT_BLOCK_RETURN_TYPE', defaults.strict_block_return_type
        ),
        lenient_inner_value_comparison=_env_flag(
            'OKOPT_LENIENT_INNER_VALUE_COMPARISON', defaults.lenient_inner_value_comparison
        ),
    )


def _process_default() -> Policy:
    global _default  # noqa: PLW0603

    if _default is None:
        _default = _detect_policy()
    return _default


def get_policy() -> Policy:
    """Return the effective policy for the current context."""
    override = _override.get()
    if override is not None:
        return override
    return _process_default()


def strict_block_return_type() -> bool:
    """Return True if and_then/or_else callback results are type-checked."""
    return get_policy().strict_block_return_type


def lenient_inner_value_comparison() -> bool:
    """Return True if Some/Ok may be compared against bare values."""
    return get_policy().lenient_inner_value_comparison


def configure(
    *,
    strict_block_return_type: bool | None = None,
    lenient_inner_value_comparison: bool | None = None,
    log_level: str | None = None,
) -> Policy:
    """Replace the process-wide default policy.

    Fields left as None keep their current value. Active context-local
    overrides are not affected. This is not synchronized; call it during
    startup, before threads or tasks start using okopt.

    Args:
        strict_block_return_type: Enforce the return type of and_then/or_else callbacks.
        lenient_inner_value_comparison: Let Some/Ok compare their payload to bare values.
        log_level: If given, also configure structured logging at this level.

    Returns:
        The new process default.

    Example:
        ```python
        from okopt import configure

        configure(lenient_inner_value_comparison=True, log_level='DEBUG')
        ```
    """
    global _default  # noqa: PLW0603

    if log_level is not None:
        configure_logging(log_level)

    changes = {
        key: value
        for key, value in (
            ('strict_block_return_type', strict_block_return_type),
            ('lenient_inner_value_comparison', lenient_inner_value_comparison),
        )
        if value is not None
    }
    _default = dataclasses.replace(_process_default(), **changes)
    get_logger(__name__).debug('policy_configured', **dataclasses.asdict(_default))
    return _default


def reset_policy() -> None:
    """Forget the process default so it is detected from the environment again."""
    global _default  # noqa: PLW0603

    _default = None


@contextlib.contextmanager
def override_policy(
    *,
    strict_block_return_type: bool | None = None,
    lenient_inner_value_comparison: bool | None = None,
) -> Iterator[Policy]:
    """Override policy fields for the dynamic extent of a ``with`` block.

    The enclosing policy is restored on exit, including when the block raises.
    Nested overrides restore the immediately enclosing value.

    Yields:
        The policy in effect inside the block.
    """
    changes = {
        key: value
        for key, value in (
            ('strict_block_return_type', strict_block_return_type),
            ('lenient_inner_value_comparison', lenient_inner_value_comparison),
        )
        if value is not None
    }
    policy = dataclasses.replace(get_policy(), **changes)
    logger = get_logger(__name__)
    token = _override.set(policy)
    logger.debug('policy_override_entered', **changes)
    try:
        yield policy
    finally:
        _override.reset(token)
        logger.debug('policy_override_exited', **changes)


def relaxed_block_checks() -> contextlib.AbstractContextManager[Policy]:
    """Skip the return type checks of and_then/or_else callbacks inside a ``with`` block.

    Example:
        ```python
        from okopt import Ok, relaxed_block_checks

        with relaxed_block_checks():
            Ok(1).and_then(lambda r: 'not a result')  # 'not a result'
        ```
    """
    return override_policy(strict_block_return_type=False)


def lenient_comparison() -> contextlib.AbstractContextManager[Policy]:
    """Allow ``Some(x) == y`` and ``Ok(x) == y`` inside a ``with`` block."""
    return override_policy(lenient_inner_value_comparison=True)
