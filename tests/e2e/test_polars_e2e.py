"""E2E: read files through colback_polars and walk the rows."""

from __future__ import annotations

import polars as pl
import pytest

from colback import Bool, Field, Float64, Schema, UInt8, UInt64, Utf8, WrongDtypeError
from colback_polars import read_csv, read_parquet

# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------


class Users(Schema):
    id: UInt64
    name: Utf8
    age: UInt8
    score: Float64
    active: Bool


class UserNames(Schema):
    user_id: UInt64 = Field(name="id")
    name: Utf8


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestParquet:
    def test_rows_match_frame(self, users_parquet: str, users_df: pl.DataFrame) -> None:
        rows = read_parquet(users_parquet, Users)
        assert len(rows) == users_df.height
        for row, expected in zip(rows, users_df.iter_rows(named=True)):
            assert row == Users.RowRef(**expected)

    def test_subset_with_renamed_column(self, users_parquet: str) -> None:
        rows = read_parquet(users_parquet, UserNames)
        assert rows.get(0) == UserNames.RowRef(user_id=1, name="user_001")
        assert rows[99].user_id == 100

    def test_filter_in_python(self, users_parquet: str, users_df: pl.DataFrame) -> None:
        rows = read_parquet(users_parquet, Users)
        adults = [row.id for row in rows if row.active and row.age >= 40]
        expected = users_df.filter(pl.col("active") & (pl.col("age") >= 40))["id"].to_list()
        assert adults == expected

    def test_file_types_must_match(self, users_parquet: str) -> None:
        class WideAge(Schema):
            age: UInt64

        with pytest.raises(WrongDtypeError, match="expected UInt64, got UInt8"):
            read_parquet(users_parquet, WideAge)


class TestCsv:
    def test_csv_parsed_to_schema_types(self, users_csv: str, users_df: pl.DataFrame) -> None:
        rows = read_csv(users_csv, Users)
        assert rows.table.df["age"].dtype == pl.UInt8
        assert rows.get(5) == Users.RowRef(**users_df.row(5, named=True))

    def test_csv_extra_columns_ignored(self, users_csv: str) -> None:
        rows = read_csv(users_csv, UserNames)
        assert [r.name for r in rows][:2] == ["user_001", "user_002"]
