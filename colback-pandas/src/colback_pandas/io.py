"""Construction helpers for the Pandas backend."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import pandas as pd

from colback import Schema, View, fields
from colback_pandas.adapter import PandasTable
from colback_pandas.conversion import map_storage_type

S = TypeVar("S", bound=Schema)


def pandas_dtypes(schema: type[S]) -> dict[str, Any]:
    """Map each source column of ``schema`` to its nullable Pandas dtype."""
    result: dict[str, Any] = {}
    for spec in fields(schema):
        result.setdefault(spec.source_column, map_storage_type(spec.mapping.storage_type))
    return result


def view(df: pd.DataFrame, schema: type[S]) -> View[Any]:
    """Build a view of ``schema`` over an existing DataFrame."""
    return schema.view(PandasTable(df))


def from_dict(schema: type[S], data: dict[str, Sequence[Any]]) -> View[Any]:
    """Create a DataFrame from columnar data, typed by ``schema``, and view it."""
    dtypes = pandas_dtypes(schema)
    df = pd.DataFrame(
        {name: pd.array(values, dtype=dtypes.get(name)) for name, values in data.items()}
    )
    return view(df, schema)
