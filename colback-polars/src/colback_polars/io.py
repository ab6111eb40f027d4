"""Construction and read operations for the Polars backend.

Every function returns a validated view; the DataFrame it reads from is
reachable through ``view.table.df``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import polars as pl

from colback import Schema, View, fields
from colback_polars.adapter import PolarsTable
from colback_polars.conversion import map_storage_type

S = TypeVar("S", bound=Schema)


def polars_schema(schema: type[S]) -> dict[str, pl.DataType]:
    """Build a Polars schema dict (source column → dtype) from a Colback schema.

    Fields sharing a source column contribute one entry, from the first of them.
    """
    result: dict[str, pl.DataType] = {}
    for spec in fields(schema):
        result.setdefault(spec.source_column, map_storage_type(spec.mapping.storage_type))
    return result


def view(df: pl.DataFrame, schema: type[S]) -> View[Any]:
    """Build a view of ``schema`` over an existing DataFrame."""
    return schema.view(PolarsTable(df))


def from_dict(schema: type[S], data: dict[str, Sequence[Any]]) -> View[Any]:
    """Create a DataFrame from columnar data, typed by ``schema``, and view it.

    Keys are source column names. Values are converted to the declared storage
    types; ``None`` becomes a null cell.
    """
    overrides = {k: v for k, v in polars_schema(schema).items() if k in data}
    df = pl.DataFrame(data, schema_overrides=overrides)
    return view(df, schema)


def read_parquet(path: str, schema: type[S]) -> View[Any]:
    """Read a Parquet file and view it with ``schema``.

    The file's column types must already match the schema; no casting is done.
    """
    return view(pl.read_parquet(path), schema)


def read_csv(path: str, schema: type[S], **kwargs: Any) -> View[Any]:
    """Read a CSV file, parsing the schema's source columns as their declared types."""
    overrides = polars_schema(schema)
    overrides.update(kwargs.pop("schema_overrides", None) or {})
    df = pl.read_csv(path, schema_overrides=overrides, **kwargs)
    return view(df, schema)
