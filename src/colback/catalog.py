"""The closed catalog of supported field types.

Each supported primitive maps to a small descriptor record (``TypeMapping``):

- ``storage_type`` — backend-neutral name of the column storage a table must
  report for the field (adapters translate their native dtypes to these names)
- ``accessor`` — the typed accessor used to read a cell of that column
- ``row_type`` — the Python type a materialised value has on a RowRef

There is no extension point: a type absent from the catalog is rejected when
the schema is defined.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from typing import Any

from colback import dtypes


@dataclasses.dataclass(frozen=True, slots=True)
class TypeMapping:
    """Storage and row representation of one catalog primitive."""

    dtype: type
    storage_type: str
    accessor: str
    row_type: type
    min_value: int | None = None
    max_value: int | None = None

    def accepts(self, value: Any) -> bool:
        """Return True if ``value`` is a valid row value for this type."""
        if self.row_type is bool:
            return isinstance(value, bool)
        # bool is an int subclass, but True is not a valid UInt8
        if isinstance(value, bool):
            return False
        if self.row_type is int:
            if not isinstance(value, int):
                return False
            if self.min_value is not None and value < self.min_value:
                return False
            return not (self.max_value is not None and value > self.max_value)
        if self.row_type is float:
            return isinstance(value, (int, float))
        return isinstance(value, self.row_type)


def _integer(dtype: type[dtypes.IntegerType]) -> TypeMapping:
    bits = dtype.bits
    if dtype.signed:
        accessor, low, high = f"i{bits}", -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
    else:
        accessor, low, high = f"u{bits}", 0, 2**bits - 1
    return TypeMapping(dtype, dtype.__name__, accessor, int, min_value=low, max_value=high)


def _mapping(dtype: type) -> TypeMapping:
    if issubclass(dtype, dtypes.IntegerType):
        return _integer(dtype)
    if issubclass(dtype, dtypes.FloatType):
        return TypeMapping(dtype, dtype.__name__, f"f{dtype.bits}", float)
    if dtype is dtypes.Bool:
        return TypeMapping(dtype, "Bool", "bool", bool)
    return TypeMapping(dtype, "Utf8", "str", str)


CATALOG: dict[type, TypeMapping] = {dtype: _mapping(dtype) for dtype in dtypes.PRIMITIVES}

STORAGE_TYPES: frozenset[str] = frozenset(m.storage_type for m in CATALOG.values())


def lookup(dtype: Any) -> TypeMapping | None:
    """Return the catalog entry for a primitive field type, or None."""
    if not isinstance(dtype, type):
        return None
    return CATALOG.get(dtype)


def unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Split an annotation into ``(inner, is_optional)``.

    ``UInt16 | None`` and ``Optional[UInt16]`` both give ``(UInt16, True)``.
    Unions of more than one non-None member are returned unchanged; the
    catalog lookup then rejects them.
    """
    origin = typing.get_origin(annotation)
    if origin is typing.Union or isinstance(annotation, types.UnionType):
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0], True
    return annotation, False


def type_name(annotation: Any) -> str:
    """Human-readable name of an annotation for error messages."""
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation)
