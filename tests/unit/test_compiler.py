"""Unit tests for colback.compiler — bindings, materializers and emitted classes."""

from __future__ import annotations

import dataclasses

import pytest

from colback import (
    Bool,
    Float64,
    InvalidFactoryValueError,
    InvalidNullError,
    NullPolicy,
    Schema,
    UInt16,
    UInt32,
    UnsupportedTypeError,
)
from colback.compiler import (
    FieldBinding,
    bind_fields,
    build_materializer,
    build_row_class,
    compile_schema,
)
from colback.fields import FieldSpec


def _reader(values: list[object]):
    return values.__getitem__


class TestMaterializers:
    def test_error_policy(self) -> None:
        materialize = build_materializer(FieldSpec(name="a", dtype=UInt32))
        read = _reader([5, None])
        assert materialize(read, 0) == 5
        with pytest.raises(InvalidNullError) as exc_info:
            materialize(read, 1)
        assert (exc_info.value.col, exc_info.value.idx) == ("a", 1)

    def test_error_policy_uses_source_column(self) -> None:
        spec = FieldSpec(name="a", dtype=UInt32, source_column="col_a")
        with pytest.raises(InvalidNullError, match="col_a"):
            build_materializer(spec)(_reader([None]), 0)

    def test_option_policy(self) -> None:
        spec = FieldSpec(name="a", dtype=UInt16, optional=True, null_policy="option")
        materialize = build_materializer(spec)
        read = _reader([None, 7])
        assert materialize(read, 0) is None
        assert materialize(read, 1) == 7

    def test_default_policy(self) -> None:
        spec = FieldSpec(name="a", dtype=UInt32, null_policy=NullPolicy.DEFAULT, default=1)
        materialize = build_materializer(spec)
        read = _reader([None, 5])
        assert materialize(read, 0) == 1
        assert materialize(read, 1) == 5

    def test_default_keeps_falsy_values(self) -> None:
        spec = FieldSpec(name="a", dtype=Bool, null_policy="default", default=True)
        assert build_materializer(spec)(_reader([False]), 0) is False

    def test_default_factory(self) -> None:
        spec = FieldSpec(name="a", dtype=UInt32, null_policy="default", default_factory=lambda: 3)
        assert build_materializer(spec)(_reader([None]), 0) == 3

    def test_default_factory_result_checked(self) -> None:
        spec = FieldSpec(name="a", dtype=Bool, null_policy="default", default_factory=lambda: 1)
        materialize = build_materializer(spec)
        assert materialize(_reader([True]), 0) is True
        with pytest.raises(InvalidFactoryValueError):
            materialize(_reader([None]), 0)

    def test_float_default_normalised(self) -> None:
        spec = FieldSpec(name="p", dtype=Float64, null_policy="default", default=3)
        value = build_materializer(spec)(_reader([None]), 0)
        assert value == 3.0
        assert type(value) is float


class TestEmission:
    def test_bind_fields(self) -> None:
        specs = [FieldSpec(name="a", dtype=UInt32), FieldSpec(name="b", dtype=Bool)]
        bindings = bind_fields(specs)
        assert all(isinstance(b, FieldBinding) for b in bindings)
        assert [b.name for b in bindings] == ["a", "b"]
        assert [b.mapping.storage_type for b in bindings] == ["UInt32", "Bool"]

    def test_build_row_class(self) -> None:
        bindings = bind_fields(
            [
                FieldSpec(name="a", dtype=UInt32),
                FieldSpec(name="c", dtype=UInt16, optional=True, null_policy="option"),
            ]
        )
        row_class = build_row_class("Thing", bindings)
        assert row_class.__name__ == "ThingRowRef"
        assert [f.name for f in dataclasses.fields(row_class)] == ["a", "c"]
        row = row_class(1, None)
        assert (row.a, row.c) == (1, None)
        assert not hasattr(row, "__dict__")

    def test_compile_schema_rejects_invalid_specs(self) -> None:
        with pytest.raises(UnsupportedTypeError):
            compile_schema(Schema, [FieldSpec(name="a", dtype=int)])

    def test_single_error_message_unchanged(self) -> None:
        with pytest.raises(UnsupportedTypeError) as exc_info:
            compile_schema(Schema, [FieldSpec(name="a", dtype=int)])
        assert "more schema error" not in str(exc_info.value)
        assert exc_info.value.errors == [exc_info.value]
