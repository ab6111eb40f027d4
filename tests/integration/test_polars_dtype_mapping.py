"""Unit tests for dtype mapping between Colback storage types and Polars."""

from __future__ import annotations

import polars as pl
import pytest

from colback import CATALOG
from colback_polars.conversion import map_polars_dtype, map_storage_type


class TestConcreteTypes:
    @pytest.mark.parametrize(
        ("storage_type", "expected_polars"),
        [
            ("Bool", pl.Boolean()),
            ("UInt8", pl.UInt8()),
            ("UInt16", pl.UInt16()),
            ("UInt32", pl.UInt32()),
            ("UInt64", pl.UInt64()),
            ("Int8", pl.Int8()),
            ("Int16", pl.Int16()),
            ("Int32", pl.Int32()),
            ("Int64", pl.Int64()),
            ("Float32", pl.Float32()),
            ("Float64", pl.Float64()),
            ("Utf8", pl.String()),
        ],
    )
    def test_storage_to_polars(self, storage_type: str, expected_polars: pl.DataType) -> None:
        assert map_storage_type(storage_type) == expected_polars
        assert map_polars_dtype(expected_polars) == storage_type

    def test_every_catalog_entry_mapped(self) -> None:
        for mapping in CATALOG.values():
            assert map_polars_dtype(map_storage_type(mapping.storage_type)) == mapping.storage_type

    def test_dtype_class_accepted(self) -> None:
        assert map_polars_dtype(pl.UInt32) == "UInt32"

    def test_unknown_polars_dtype_keeps_name(self) -> None:
        assert map_polars_dtype(pl.Date()) == "Date"

    def test_unknown_storage_type(self) -> None:
        with pytest.raises(TypeError, match="Unsupported storage type"):
            map_storage_type("Date")
