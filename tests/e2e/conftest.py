"""Shared fixtures for end-to-end tests.

Provides parquet/CSV files with realistic data for reading rows through the
Polars and Arrow backends.
"""

from __future__ import annotations

import polars as pl
import pytest

# ---------------------------------------------------------------------------
# Data generation helpers
# ---------------------------------------------------------------------------


def _make_users(n: int = 100) -> pl.DataFrame:
    """Generate a users DataFrame with varied ages and scores."""
    import random

    random.seed(42)
    return pl.DataFrame(
        {
            "id": pl.Series(list(range(1, n + 1)), dtype=pl.UInt64),
            "name": [f"user_{i:03d}" for i in range(1, n + 1)],
            "age": pl.Series([random.randint(18, 65) for _ in range(n)], dtype=pl.UInt8),
            "score": pl.Series(
                [round(random.uniform(0, 100), 2) for _ in range(n)], dtype=pl.Float64
            ),
            "active": [i % 4 != 0 for i in range(n)],
        }
    )


def _make_nullable_users(n: int = 50) -> pl.DataFrame:
    """Generate users with nulls in age, score and active."""
    import random

    random.seed(33)
    ages = [random.randint(18, 65) if i % 5 != 0 else None for i in range(n)]
    scores = [round(random.uniform(0, 100), 2) if i % 3 != 0 else None for i in range(n)]
    active = [None if i % 7 == 0 else i % 2 == 0 for i in range(n)]
    return pl.DataFrame(
        {
            "id": pl.Series(list(range(1, n + 1)), dtype=pl.UInt64),
            "name": [f"user_{i:03d}" for i in range(1, n + 1)],
            "age": pl.Series(ages, dtype=pl.UInt8),
            "score": pl.Series(scores, dtype=pl.Float64),
            "active": pl.Series(active, dtype=pl.Boolean),
        }
    )


# ---------------------------------------------------------------------------
# File fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def users_df() -> pl.DataFrame:
    return _make_users()


@pytest.fixture(scope="session")
def nullable_users_df() -> pl.DataFrame:
    return _make_nullable_users()


@pytest.fixture(scope="session")
def users_parquet(tmp_path_factory: pytest.TempPathFactory) -> str:
    path = str(tmp_path_factory.mktemp("data") / "users.parquet")
    _make_users().write_parquet(path)
    return path


@pytest.fixture(scope="session")
def nullable_users_parquet(tmp_path_factory: pytest.TempPathFactory) -> str:
    path = str(tmp_path_factory.mktemp("data") / "nullable_users.parquet")
    _make_nullable_users().write_parquet(path)
    return path


@pytest.fixture(scope="session")
def users_csv(tmp_path_factory: pytest.TempPathFactory) -> str:
    path = str(tmp_path_factory.mktemp("data") / "users.csv")
    _make_users().write_csv(path)
    return path
