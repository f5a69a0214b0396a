"""Benchmarks comparing okopt Result vs returns library.

Run with: pytest benchmarks/ --benchmark-only -v
"""

# returns library imports
from returns.result import Failure, Success

# okopt imports
from okopt import Err, Ok, collect, relaxed_block_checks

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark Result/Ok/Err creation."""

    def test_okopt_ok_creation(self, benchmark):
        """Benchmark okopt Ok creation."""
        benchmark(Ok, 42)

    def test_returns_success_creation(self, benchmark):
        """Benchmark returns Success creation."""
        benchmark(Success, 42)

    def test_okopt_err_creation(self, benchmark):
        """Benchmark okopt Err creation."""
        benchmark(Err, 'error')

    def test_okopt_bare_err_creation(self, benchmark):
        """Benchmark okopt Err() with the Arbitrary payload."""
        benchmark(Err)

    def test_returns_failure_creation(self, benchmark):
        """Benchmark returns Failure creation."""
        benchmark(Failure, 'error')


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestMethodCalls:
    """Benchmark common method calls."""

    def test_okopt_map(self, benchmark):
        """Benchmark okopt map."""
        ok = Ok(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_returns_map(self, benchmark):
        """Benchmark returns map."""
        ok = Success(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_okopt_and_then(self, benchmark):
        """Benchmark okopt and_then with the strict return check."""
        ok = Ok(5)
        benchmark(ok.and_then, lambda r: Ok(r.value * 2))

    def test_okopt_and_then_relaxed(self, benchmark):
        """Benchmark okopt and_then without the return check."""
        ok = Ok(5)
        with relaxed_block_checks():
            benchmark(ok.and_then, lambda r: Ok(r.value * 2))

    def test_returns_bind(self, benchmark):
        """Benchmark returns bind."""
        ok = Success(5)
        benchmark(ok.bind, lambda x: Success(x * 2))

    def test_okopt_unwrap_or(self, benchmark):
        """Benchmark okopt unwrap_or."""
        ok = Ok(5)
        benchmark(ok.unwrap_or, 0)

    def test_returns_value_or(self, benchmark):
        """Benchmark returns value_or."""
        ok = Success(5)
        benchmark(ok.value_or, 0)

    def test_okopt_equality(self, benchmark):
        """Benchmark okopt Ok == Ok."""
        left, right = Ok(5), Ok(5)
        benchmark(left.__eq__, right)

    def test_returns_equality(self, benchmark):
        """Benchmark returns Success == Success."""
        left, right = Success(5), Success(5)
        benchmark(left.__eq__, right)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestChaining:
    """Benchmark chained operations."""

    def test_okopt_chain_3(self, benchmark):
        """Benchmark okopt 3-step chain."""

        def chain():
            return Ok(5).map(lambda x: x + 1).map(lambda x: x * 2).and_then(lambda r: Ok(r.value - 1))

        benchmark(chain)

    def test_returns_chain_3(self, benchmark):
        """Benchmark returns 3-step chain."""

        def chain():
            return Success(5).map(lambda x: x + 1).map(lambda x: x * 2).bind(lambda x: Success(x - 1))

        benchmark(chain)

    def test_okopt_recover(self, benchmark):
        """Benchmark okopt or_else recovery."""
        err = Err('fail')
        benchmark(err.or_else, lambda e: Ok(len(e.error)))


# =============================================================================
# Collect benchmarks
# =============================================================================


class TestCollect:
    """Benchmark collecting results."""

    def test_okopt_collect_100(self, benchmark):
        """Benchmark okopt collect with 100 items."""
        items = [Ok(i) for i in range(100)]
        benchmark(collect, items)

    def test_okopt_collect_with_err(self, benchmark):
        """Benchmark okopt collect with early error."""
        items = [Ok(i) if i != 5 else Err('fail') for i in range(100)]
        benchmark(collect, items)


# =============================================================================
# Pattern matching benchmarks
# =============================================================================


class TestPatternMatching:
    """Benchmark pattern matching."""

    def test_okopt_match_ok(self, benchmark):
        """Benchmark okopt pattern matching on Ok."""
        ok = Ok(42)

        def match_it():
            match ok:
                case Ok(v):
                    return v
                case Err(e):
                    return e

        benchmark(match_it)

    def test_okopt_match_method(self, benchmark):
        """Benchmark okopt match() with handlers."""
        ok = Ok(42)
        benchmark(ok.match, ok=lambda v: v, err=lambda e: e)

    def test_returns_match_success(self, benchmark):
        """Benchmark returns pattern matching on Success."""
        ok = Success(42)

        def match_it():
            match ok:
                case Success(v):
                    return v
                case Failure(e):
                    return e

        benchmark(match_it)


# =============================================================================
# Memory benchmarks
# =============================================================================


class TestMemory:
    """Rough memory comparison via object creation."""

    def test_okopt_create_1000(self, benchmark):
        """Create 1000 okopt Ok objects."""

        def create():
            return [Ok(i) for i in range(1000)]

        benchmark(create)

    def test_returns_create_1000(self, benchmark):
        """Create 1000 returns Success objects."""

        def create():
            return [Success(i) for i in range(1000)]

        benchmark(create)
