"""Colback Pandas backend adapter."""

from colback_pandas.adapter import PandasColumn, PandasTable
from colback_pandas.conversion import map_pandas_dtype, map_storage_type
from colback_pandas.io import from_dict, pandas_dtypes, view

__all__ = [
    "PandasTable",
    "PandasColumn",
    "map_pandas_dtype",
    "map_storage_type",
    "pandas_dtypes",
    "view",
    "from_dict",
]
