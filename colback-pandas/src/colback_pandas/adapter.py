"""PandasTable — exposes a Pandas DataFrame through the Colback table protocol.

Missing cells are whatever ``pd.isna`` reports: ``pd.NA`` in nullable
extension columns, ``None``, and ``NaN`` (including NaN in float columns,
following the Pandas convention).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pandas as pd

from colback.catalog import TypeMapping
from colback_pandas.conversion import map_pandas_dtype


class PandasColumn:
    """One Series of a Pandas DataFrame."""

    __slots__ = ("_series",)

    def __init__(self, series: pd.Series) -> None:
        self._series = series

    @property
    def series(self) -> pd.Series:
        return self._series

    @property
    def storage_type(self) -> str:
        return map_pandas_dtype(self._series.dtype)

    def __len__(self) -> int:
        return len(self._series)

    def null_count(self) -> int:
        return int(self._series.isna().sum())

    def first_null(self) -> int | None:
        mask = self._series.isna().to_numpy()
        if not mask.any():
            return None
        return int(mask.argmax())

    def typed_reader(self, mapping: TypeMapping) -> Callable[[int], Any]:
        # Positional access on the backing array; NumPy scalars are converted
        # to the row type (np.uint32 -> int, np.bool_ -> bool).
        values = self._series.array
        row_type = mapping.row_type

        def read(idx: int) -> Any:
            value = values[idx]
            if pd.isna(value):
                return None
            return row_type(value)

        return read


class PandasTable:
    """Colback table adapter for ``pandas.DataFrame``."""

    __slots__ = ("_df",)

    def __init__(self, df: pd.DataFrame) -> None:
        self._df = df

    @property
    def df(self) -> pd.DataFrame:
        """The wrapped DataFrame."""
        return self._df

    @property
    def height(self) -> int:
        return len(self._df)

    def lookup_column(self, name: str) -> PandasColumn | None:
        if name not in self._df.columns:
            return None
        selected = self._df[name]
        if isinstance(selected, pd.DataFrame):
            msg = f"column label {name!r} appears {selected.shape[1]} times; labels must be unique"
            raise ValueError(msg)
        return PandasColumn(selected)

    def __repr__(self) -> str:
        return f"PandasTable({len(self._df)} rows, {len(self._df.columns)} columns)"
