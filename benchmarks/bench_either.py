"""Benchmarks for Either and Result types.

Run with: uv run pytest benchmarks/bench_either.py --benchmark-only -v
"""

from klaw_adt import Either, Err, Left, Ok, Result, Right

# =============================================================================
# Result benchmarks
# =============================================================================


class TestResult:
    """Benchmark Result operations."""

    def test_ok_creation(self, benchmark):
        benchmark(Ok, 42)

    def test_of_success(self, benchmark):
        benchmark(Result.of, lambda: 42)

    def test_of_failure(self, benchmark):
        def fail():
            raise ValueError('boom')

        benchmark(Result.of, fail)

    def test_ok_map(self, benchmark):
        ok = Ok(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_err_map_or(self, benchmark):
        err = Err(ValueError('error'))
        benchmark(err.map_or, lambda x: x * 2, 0)


# =============================================================================
# Either benchmarks
# =============================================================================


class TestEither:
    """Benchmark Either operations."""

    def test_left_creation(self, benchmark):
        benchmark(Either.left, 42)

    def test_map_both_sides(self, benchmark):
        left = Left(5)
        benchmark(left.map, lambda x: x + 1, str)

    def test_right_map_left_or(self, benchmark):
        right = Right(5)
        benchmark(right.map_left_or, lambda x: x + 1, 0)

    def test_left_as_option_left(self, benchmark):
        left = Left(5)
        benchmark(left.as_option_left)

    def test_right_as_result_left(self, benchmark):
        right = Right(5)
        benchmark(right.as_result_left)

    def test_conversion_chain(self, benchmark):
        def chain():
            return Either.right('123').map_right(int).as_option_right().ok_or().map(lambda x: x * 2)

        benchmark(chain)
