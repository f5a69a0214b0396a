"""Structured logging for okopt.

okopt logs little: debug entries when the policy default changes, when a
scoped override is entered or left and when a relaxed combinator passes an
unchecked callback result through, plus a warning for unusable ``OKOPT_*``
values. Entries go through structlog. configure_logging() routes structlog
entries and plain stdlib records through one ProcessorFormatter so both
render the same way.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

_hooks: list[Callable[[dict[str, Any]], None]] = []


def _call_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _hooks:
        hook(dict(event_dict))
    return event_dict


def _enrich() -> list[Any]:
    """Processors run on okopt entries and foreign stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _call_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Install structlog and a root stdlib handler sharing one renderer.

    Replaces the handlers of the root logger. Safe to call again to change
    the level or the output format.

    Args:
        level: Level name for the root logger; unknown names mean INFO.
        json_output: Render JSON lines if True, else console output (colored on a tty).
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_enrich(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_enrich(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger for ``name``.

    Until structlog is configured (by configure_logging() or by the host
    application), entries are rendered as key=value text and handed to the
    stdlib logger of the same name, so okopt is exactly as quiet as the
    stdlib logging setup it runs under.
    """
    if structlog.is_configured():
        return structlog.get_logger(name).bind()
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_enrich(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.KeyValueRenderer(key_order=['event']),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    ).bind()


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Call ``hook`` with a copy of every entry that passes the level filter.

    Hook exceptions propagate to the logging call.
    """
    _hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    if hook in _hooks:
        _hooks.remove(hook)


def clear_log_hooks() -> None:
    _hooks.clear()
