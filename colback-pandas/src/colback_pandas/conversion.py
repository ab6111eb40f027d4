"""Dtype mapping between Colback storage types and Pandas types."""

from __future__ import annotations

from typing import Any

import pandas as pd

# ---------------------------------------------------------------------------
# Storage type → Pandas mapping (uses nullable extension types)
# ---------------------------------------------------------------------------

STORAGE_TO_PANDAS: dict[str, Any] = {
    "Bool": pd.BooleanDtype(),
    "UInt8": pd.UInt8Dtype(),
    "UInt16": pd.UInt16Dtype(),
    "UInt32": pd.UInt32Dtype(),
    "UInt64": pd.UInt64Dtype(),
    "Int8": pd.Int8Dtype(),
    "Int16": pd.Int16Dtype(),
    "Int32": pd.Int32Dtype(),
    "Int64": pd.Int64Dtype(),
    "Float32": pd.Float32Dtype(),
    "Float64": pd.Float64Dtype(),
    "Utf8": pd.StringDtype(),
}

# ---------------------------------------------------------------------------
# Pandas → storage type mapping
# ---------------------------------------------------------------------------

# Keyed by str(dtype): covers both the nullable extension dtypes ("UInt32",
# "boolean", "string") and plain NumPy dtypes ("uint32", "bool"). Plain
# "object" columns are not treated as text.
PANDAS_TO_STORAGE: dict[str, str] = {
    "boolean": "Bool",
    "bool": "Bool",
    "UInt8": "UInt8",
    "uint8": "UInt8",
    "UInt16": "UInt16",
    "uint16": "UInt16",
    "UInt32": "UInt32",
    "uint32": "UInt32",
    "UInt64": "UInt64",
    "uint64": "UInt64",
    "Int8": "Int8",
    "int8": "Int8",
    "Int16": "Int16",
    "int16": "Int16",
    "Int32": "Int32",
    "int32": "Int32",
    "Int64": "Int64",
    "int64": "Int64",
    "Float32": "Float32",
    "float32": "Float32",
    "Float64": "Float64",
    "float64": "Float64",
    "string": "Utf8",
    "str": "Utf8",
}


def map_storage_type(storage_type: str) -> Any:
    """Map a catalog storage name to a nullable Pandas dtype."""
    if storage_type in STORAGE_TO_PANDAS:
        return STORAGE_TO_PANDAS[storage_type]
    msg = f"Unsupported storage type: {storage_type}"
    raise TypeError(msg)


def map_pandas_dtype(pd_dtype: Any) -> str:
    """Map a Pandas dtype to a catalog storage name (or its own name)."""
    name = str(pd_dtype)
    return PANDAS_TO_STORAGE.get(name, name)
