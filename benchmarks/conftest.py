"""Pytest configuration for okopt benchmarks."""

import pytest

from okopt.policy import reset_policy


def pytest_configure(config):
    """Configure pytest for benchmarks."""
    config.addinivalue_line('markers', 'benchmark: mark test as a benchmark')


@pytest.fixture(autouse=True)
def default_policy():
    """Measure against the built-in policy."""
    reset_policy()
    yield
    reset_policy()
