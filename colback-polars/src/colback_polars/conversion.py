"""Dtype mapping between Colback storage types and Polars types."""

from __future__ import annotations

import polars as pl

# ---------------------------------------------------------------------------
# Storage type → Polars mapping
# ---------------------------------------------------------------------------

STORAGE_TO_POLARS: dict[str, pl.DataType] = {
    "Bool": pl.Boolean(),
    "UInt8": pl.UInt8(),
    "UInt16": pl.UInt16(),
    "UInt32": pl.UInt32(),
    "UInt64": pl.UInt64(),
    "Int8": pl.Int8(),
    "Int16": pl.Int16(),
    "Int32": pl.Int32(),
    "Int64": pl.Int64(),
    "Float32": pl.Float32(),
    "Float64": pl.Float64(),
    "Utf8": pl.String(),
}

# ---------------------------------------------------------------------------
# Polars → storage type mapping (keyed by Polars DataType class, not instance)
# ---------------------------------------------------------------------------

POLARS_TO_STORAGE: dict[type[pl.DataType], str] = {
    pl.Boolean: "Bool",
    pl.UInt8: "UInt8",
    pl.UInt16: "UInt16",
    pl.UInt32: "UInt32",
    pl.UInt64: "UInt64",
    pl.Int8: "Int8",
    pl.Int16: "Int16",
    pl.Int32: "Int32",
    pl.Int64: "Int64",
    pl.Float32: "Float32",
    pl.Float64: "Float64",
    pl.String: "Utf8",
}


def map_storage_type(storage_type: str) -> pl.DataType:
    """Map a catalog storage name to a Polars DataType."""
    if storage_type in STORAGE_TO_POLARS:
        return STORAGE_TO_POLARS[storage_type]
    msg = f"Unsupported storage type: {storage_type}"
    raise TypeError(msg)


def map_polars_dtype(pl_dtype: pl.DataType | type[pl.DataType]) -> str:
    """Map a Polars DataType to a catalog storage name.

    Dtypes outside the catalog map to their Polars name (``"Date"``,
    ``"List(Int64)"``), which never equals a catalog storage name.
    """
    dtype_cls = pl_dtype if isinstance(pl_dtype, type) else type(pl_dtype)
    if dtype_cls in POLARS_TO_STORAGE:
        return POLARS_TO_STORAGE[dtype_cls]
    return str(pl_dtype)
