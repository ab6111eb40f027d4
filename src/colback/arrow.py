"""Table adapter for pyarrow Tables and RecordBatches.

Arrow columns are read cell by cell (``array[idx].as_py()``); nothing is
converted up front.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from colback.catalog import TypeMapping

if TYPE_CHECKING:
    import pyarrow as pa

    from colback.schema import Schema
    from colback.view import View

S = TypeVar("S", bound="Schema")

# Keyed by str(arrow DataType), so pyarrow is not needed at import time.
ARROW_TO_STORAGE: dict[str, str] = {
    "bool": "Bool",
    "uint8": "UInt8",
    "uint16": "UInt16",
    "uint32": "UInt32",
    "uint64": "UInt64",
    "int8": "Int8",
    "int16": "Int16",
    "int32": "Int32",
    "int64": "Int64",
    "float": "Float32",
    "double": "Float64",
    "string": "Utf8",
    "large_string": "Utf8",
    "string_view": "Utf8",
}


def map_arrow_type(arrow_type: Any) -> str:
    """Map a pyarrow DataType to a catalog storage name (or its own name)."""
    name = str(arrow_type)
    return ARROW_TO_STORAGE.get(name, name)


class ArrowColumn:
    """One column of an Arrow table: a ChunkedArray or an Array."""

    __slots__ = ("_array",)

    def __init__(self, array: pa.ChunkedArray | pa.Array) -> None:
        self._array = array

    @property
    def storage_type(self) -> str:
        return map_arrow_type(self._array.type)

    def __len__(self) -> int:
        return len(self._array)

    def null_count(self) -> int:
        return self._array.null_count

    def first_null(self) -> int | None:
        if self._array.null_count == 0:
            return None
        import pyarrow.compute as pc

        idx = pc.index(self._array.is_null(), True).as_py()
        return None if idx < 0 else idx

    def typed_reader(self, mapping: TypeMapping) -> Callable[[int], Any]:
        array = self._array

        def read(idx: int) -> Any:
            return array[idx].as_py()

        return read


class ArrowTable:
    """Colback table adapter for ``pyarrow.Table`` and ``pyarrow.RecordBatch``."""

    __slots__ = ("_data",)

    def __init__(self, data: pa.Table | pa.RecordBatch) -> None:
        self._data = data

    @property
    def data(self) -> pa.Table | pa.RecordBatch:
        """The wrapped Arrow object."""
        return self._data

    @property
    def height(self) -> int:
        return self._data.num_rows

    def lookup_column(self, name: str) -> ArrowColumn | None:
        if name not in self._data.schema.names:
            return None
        return ArrowColumn(self._data.column(name))

    def __repr__(self) -> str:
        return f"ArrowTable({self._data.num_rows} rows)"


def view(data: pa.Table | pa.RecordBatch, schema: type[S]) -> View[Any]:
    """Build a view of ``schema`` over an Arrow table or record batch."""
    return schema.view(ArrowTable(data))
