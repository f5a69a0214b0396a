"""Benchmarks for Option type.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from okopt import Nothing, OptionalDict, Some, is_blank

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation."""
        benchmark(Some, 42)

    def test_nothing_access(self, benchmark):
        """Benchmark Nothing singleton access."""

        def get_nothing():
            return Nothing

        benchmark(get_nothing)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_some_map(self, benchmark):
        """Benchmark Some.map."""
        some = Some(5)
        benchmark(some.map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        """Benchmark Nothing.map."""
        benchmark(Nothing.map, lambda x: x * 2)

    def test_some_and_then(self, benchmark):
        """Benchmark Some.and_then with the strict return check."""
        some = Some(5)
        benchmark(some.and_then, lambda: Some(10))

    def test_nothing_or_else(self, benchmark):
        """Benchmark Nothing.or_else with the strict return check."""
        benchmark(Nothing.or_else, lambda: Some(0))

    def test_some_unwrap_or(self, benchmark):
        """Benchmark Some.unwrap_or."""
        some = Some(5)
        benchmark(some.unwrap_or, 0)

    def test_nothing_unwrap_or(self, benchmark):
        """Benchmark Nothing.unwrap_or."""
        benchmark(Nothing.unwrap_or, 0)

    def test_some_equality(self, benchmark):
        """Benchmark Some == Some."""
        left, right = Some(5), Some(5)
        benchmark(left.__eq__, right)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionChaining:
    """Benchmark chained Option operations."""

    def test_some_chain_3(self, benchmark):
        """Benchmark 3-step chain on Some."""

        def chain():
            return Some(5).map(lambda x: x + 1).map(lambda x: x * 2).filter(lambda x: x > 5)

        benchmark(chain)

    def test_nothing_chain_3(self, benchmark):
        """Benchmark 3-step chain on Nothing (should short-circuit)."""

        def chain():
            return Nothing.map(lambda x: x + 1).map(lambda x: x * 2).filter(lambda x: x > 5)

        benchmark(chain)


# =============================================================================
# Conversion benchmarks
# =============================================================================


class TestOptionConversion:
    """Benchmark Option conversions."""

    def test_some_ok_or(self, benchmark):
        """Benchmark Some.ok_or."""
        some = Some(42)
        benchmark(some.ok_or, 'error')

    def test_nothing_ok_or(self, benchmark):
        """Benchmark Nothing.ok_or."""
        benchmark(Nothing.ok_or, 'error')

    def test_some_zip(self, benchmark):
        """Benchmark Some.zip."""
        benchmark(Some(1).zip, Some(2))


# =============================================================================
# Helper benchmarks
# =============================================================================


class TestHelpers:
    """Benchmark helpers built on Option."""

    def test_optional_dict_dig(self, benchmark):
        """Benchmark a three-level dig."""
        d = OptionalDict(a={'b': {'c': 1}})
        benchmark(d.dig, 'a', 'b', 'c')

    def test_is_blank_text(self, benchmark):
        """Benchmark is_blank on a whitespace string."""
        benchmark(is_blank, '   ')


# =============================================================================
# Pattern matching benchmarks
# =============================================================================


class TestOptionPatternMatching:
    """Benchmark pattern matching on Option."""

    def test_match_some(self, benchmark):
        """Benchmark pattern matching on Some."""
        some = Some(42)

        def match_it():
            match some:
                case Some(v):
                    return v
                case _:
                    return None

        benchmark(match_it)
