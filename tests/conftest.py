"""Pytest configuration and shared fixtures for okopt tests."""

import logging

import pytest
import structlog

from okopt._logging import clear_log_hooks
from okopt.policy import reset_policy

POLICY_ENV_VARS = (
    'OKOPT_STRICT_BLOCK_RETURN_TYPE',
    'OKOPT_LENIENT_INNER_VALUE_COMPARISON',
)


@pytest.fixture(autouse=True)
def clean_okopt_state(monkeypatch):
    """Start every test from the built-in policy with no log hooks."""
    root = logging.getLogger()
    saved_level = root.level
    for name in POLICY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_policy()
    clear_log_hooks()
    yield
    reset_policy()
    clear_log_hooks()
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(saved_level)


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from okopt import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from okopt import Err

    return Err('test error')


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from okopt import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from okopt import Nothing

    return Nothing


@pytest.fixture
def explode():
    """A callback that fails the test if it is ever invoked."""

    def _explode(*_args):
        raise AssertionError('callback must not be invoked')

    return _explode
