"""Benchmarks for Option type.

Run with: uv run pytest benchmarks/bench_option.py --benchmark-only -v
"""

from klaw_adt import Nothing, Option, Some

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        benchmark(Some, 42)

    def test_option_some_classmethod(self, benchmark):
        benchmark(Option.some, 42)

    def test_from_nullable_value(self, benchmark):
        benchmark(Option.from_nullable, 42)

    def test_from_nullable_none(self, benchmark):
        benchmark(Option.from_nullable, None)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_some_map(self, benchmark):
        some = Some(5)
        benchmark(some.map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        benchmark(Nothing.map, lambda x: x * 2)

    def test_nothing_map_or(self, benchmark):
        benchmark(Nothing.map_or, lambda x: x * 2, 0)

    def test_some_unwrap_or(self, benchmark):
        some = Some(5)
        benchmark(some.unwrap_or, 0)

    def test_some_when(self, benchmark):
        some = Some(5)
        benchmark(some.when, some=lambda v: v, none=lambda: 0)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionChaining:
    """Benchmark chained Option operations."""

    def test_some_chain_3(self, benchmark):
        def chain():
            return Some(5).map(lambda x: x + 1).filter(lambda x: x > 2).map(lambda x: x * 2)

        benchmark(chain)

    def test_nothing_chain_3(self, benchmark):
        """Benchmark 3-step chain on Nothing (should short-circuit)."""

        def chain():
            return Nothing.map(lambda x: x + 1).filter(lambda x: x > 2).map(lambda x: x * 2)

        benchmark(chain)

    def test_some_ok_or(self, benchmark):
        some = Some(42)
        benchmark(some.ok_or, ValueError('error'))


# =============================================================================
# Pattern matching benchmarks
# =============================================================================


class TestOptionPatternMatching:
    """Benchmark pattern matching on Option."""

    def test_match_some(self, benchmark):
        some = Some(42)

        def match_it():
            match some:
                case Some(v):
                    return v
                case _:
                    return None

        benchmark(match_it)
