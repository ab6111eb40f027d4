"""PolarsTable — exposes a Polars DataFrame through the Colback table protocol."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import polars as pl

from colback.catalog import TypeMapping
from colback_polars.conversion import map_polars_dtype


class PolarsColumn:
    """One Series of a Polars DataFrame."""

    __slots__ = ("_series",)

    def __init__(self, series: pl.Series) -> None:
        self._series = series

    @property
    def series(self) -> pl.Series:
        return self._series

    @property
    def storage_type(self) -> str:
        return map_polars_dtype(self._series.dtype)

    def __len__(self) -> int:
        return self._series.len()

    def null_count(self) -> int:
        return self._series.null_count()

    def first_null(self) -> int | None:
        if self._series.null_count() == 0:
            return None
        return self._series.is_null().arg_true().item(0)

    def typed_reader(self, mapping: TypeMapping) -> Callable[[int], Any]:
        # Series.__getitem__ returns a Python scalar, or None for a null cell.
        return self._series.__getitem__


class PolarsTable:
    """Colback table adapter for ``polars.DataFrame``.

    Lazy frames are not accepted: a view needs random access to rows, so
    collect first.
    """

    __slots__ = ("_df",)

    def __init__(self, df: pl.DataFrame) -> None:
        if isinstance(df, pl.LazyFrame):
            msg = "PolarsTable needs a DataFrame; call .collect() on the LazyFrame first"
            raise TypeError(msg)
        self._df = df

    @property
    def df(self) -> pl.DataFrame:
        """The wrapped DataFrame."""
        return self._df

    @property
    def height(self) -> int:
        return self._df.height

    def lookup_column(self, name: str) -> PolarsColumn | None:
        if name not in self._df.columns:
            return None
        return PolarsColumn(self._df.get_column(name))

    def __repr__(self) -> str:
        return f"PolarsTable({self._df.height} rows, {self._df.width} columns)"
