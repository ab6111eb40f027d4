"""Colback Polars backend adapter."""

from colback_polars.adapter import PolarsColumn, PolarsTable
from colback_polars.conversion import map_polars_dtype, map_storage_type
from colback_polars.io import from_dict, polars_schema, read_csv, read_parquet, view

__all__ = [
    "PolarsTable",
    "PolarsColumn",
    "map_polars_dtype",
    "map_storage_type",
    "polars_schema",
    "view",
    "from_dict",
    "read_csv",
    "read_parquet",
]
