"""Integration tests for views over pyarrow Tables and RecordBatches."""

from __future__ import annotations

import pyarrow as pa
import pytest

from colback import (
    Bool,
    Field,
    Float32,
    InvalidNullError,
    MissingColumnError,
    Schema,
    UInt16,
    UInt32,
    Utf8,
    WrongDtypeError,
)
from colback.arrow import ArrowTable, map_arrow_type, view


class Readings(Schema):
    sensor: UInt32
    ok: Bool = Field(null="default", default=False)
    level: UInt16 | None = Field(null="option")
    value: Float32
    unit: Utf8


def _table() -> pa.Table:
    return pa.table(
        {
            "sensor": pa.array([1, 2, 3], type=pa.uint32()),
            "ok": pa.array([True, None, False], type=pa.bool_()),
            "level": pa.array([None, 7, 8], type=pa.uint16()),
            "value": pa.array([0.5, 1.5, 2.5], type=pa.float32()),
            "unit": pa.array(["m", "s", None], type=pa.string()),
        }
    )


class TestArrowView:
    def test_rows(self) -> None:
        rows = view(_table(), Readings)
        assert len(rows) == 3
        assert rows.get(0) == Readings.RowRef(sensor=1, ok=True, level=None, value=0.5, unit="m")
        assert rows.get(1) == Readings.RowRef(sensor=2, ok=False, level=7, value=1.5, unit="s")

    def test_null_text_is_invalid(self) -> None:
        rows = view(_table(), Readings)
        with pytest.raises(InvalidNullError) as exc_info:
            rows.get(2)
        assert (exc_info.value.col, exc_info.value.idx) == ("unit", 2)

    def test_record_batch(self) -> None:
        batch = _table().to_batches()[0]
        rows = view(batch, Readings)
        assert rows.get(1).level == 7

    def test_chunked_columns(self) -> None:
        table = pa.concat_tables([_table().slice(0, 2), _table().slice(0, 2)])
        rows = view(table, Readings)
        assert len(rows) == 4
        assert [r.sensor for r in rows] == [1, 2, 1, 2]

    def test_missing_column(self) -> None:
        with pytest.raises(MissingColumnError, match="unit"):
            view(_table().drop_columns(["unit"]), Readings)

    def test_wrong_dtype(self) -> None:
        table = _table().set_column(0, "sensor", pa.array([1, 2, 3], type=pa.int64()))
        with pytest.raises(WrongDtypeError) as exc_info:
            view(table, Readings)
        assert (exc_info.value.expected, exc_info.value.actual) == ("UInt32", "Int64")

    def test_unknown_arrow_type_keeps_name(self) -> None:
        assert map_arrow_type(pa.date32()) == "date32[day]"
        assert map_arrow_type(pa.large_string()) == "Utf8"


class TestArrowColumn:
    def test_first_null(self) -> None:
        table = ArrowTable(_table())
        level = table.lookup_column("level")
        sensor = table.lookup_column("sensor")
        assert level is not None and sensor is not None
        assert level.null_count() == 1
        assert level.first_null() == 0
        assert sensor.first_null() is None
        assert table.lookup_column("missing") is None
