"""Benchmark: Colback row access overhead vs raw Polars row iteration.

Measures the cost of building a view and materialising RowRefs compared to
reading rows straight from Polars. Run with:

    uv run python benchmarks/bench_overhead.py

Results are printed as a table showing absolute times and relative overhead.
"""

from __future__ import annotations

import timeit
from dataclasses import dataclass

import polars as pl

from colback import Field, Float64, Schema, UInt8, UInt64, Utf8
from colback_polars import PolarsTable

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


class Users(Schema):
    id: UInt64
    name: Utf8
    age: UInt8
    score: Float64 = Field(null="default", default=0.0)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_df(n: int) -> pl.DataFrame:
    """Create a raw Polars DataFrame with n rows, typed for ``Users``."""
    return pl.DataFrame(
        {
            "id": pl.Series(range(n), dtype=pl.UInt64),
            "name": [f"user_{i}" for i in range(n)],
            "age": pl.Series([20 + (i % 60) for i in range(n)], dtype=pl.UInt8),
            "score": [50.0 + (i % 50) if i % 10 else None for i in range(n)],
        }
    )


@dataclass
class BenchResult:
    label: str
    raw_us: float
    colback_us: float

    @property
    def overhead_us(self) -> float:
        return self.colback_us - self.raw_us

    @property
    def overhead_pct(self) -> float:
        return (self.overhead_us / self.raw_us) * 100 if self.raw_us > 0 else float("inf")


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------

ITERATIONS = 1000


def bench_build(n: int) -> BenchResult:
    """Measure view construction against looking the columns up by hand."""
    df = make_df(n)
    table = PolarsTable(df)

    def raw_lookup():
        return [df.get_column(name) for name in ("id", "name", "age", "score")]

    raw_time = timeit.timeit(raw_lookup, number=ITERATIONS)
    colback_time = timeit.timeit(lambda: Users.view(table), number=ITERATIONS)
    return BenchResult(
        f"build view, {n:,} rows",
        raw_time / ITERATIONS * 1_000_000,
        colback_time / ITERATIONS * 1_000_000,
    )


def bench_get(n: int) -> BenchResult:
    """Measure random access to a single row."""
    df = make_df(n)
    rows = Users.view(PolarsTable(df))
    idx = n // 2

    raw_time = timeit.timeit(lambda: df.row(idx, named=True), number=ITERATIONS)
    colback_time = timeit.timeit(lambda: rows.get(idx), number=ITERATIONS)
    return BenchResult(
        f"get one row, {n:,} rows",
        raw_time / ITERATIONS * 1_000_000,
        colback_time / ITERATIONS * 1_000_000,
    )


def bench_iter(n: int) -> BenchResult:
    """Measure a full pass over every row."""
    df = make_df(n)
    rows = Users.view(PolarsTable(df))

    iters = max(3, ITERATIONS // (n // 100 + 1))

    def raw_pass():
        for _ in df.iter_rows(named=True):
            pass

    def colback_pass():
        for _ in rows.iter():
            pass

    raw_time = timeit.timeit(raw_pass, number=iters)
    colback_time = timeit.timeit(colback_pass, number=iters)
    return BenchResult(
        f"iterate all rows, {n:,} rows",
        raw_time / iters * 1_000_000,
        colback_time / iters * 1_000_000,
    )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    results: list[BenchResult] = []

    for n in [100, 10_000, 100_000]:
        results.append(bench_build(n))
        results.append(bench_get(n))
        results.append(bench_iter(n))

    print()
    print(f"{'Benchmark':<45} {'Raw (us)':>10} {'Colback (us)':>13} {'Overhead':>10}")
    print("-" * 82)
    for r in results:
        if r.overhead_pct < 10000:
            overhead_str = f"+{r.overhead_pct:.0f}%"
        else:
            overhead_str = f"+{r.overhead_us:.0f}us"
        print(f"{r.label:<45} {r.raw_us:>10.1f} {r.colback_us:>13.1f} {overhead_str:>10}")
    print()


if __name__ == "__main__":
    main()
