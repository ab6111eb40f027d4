"""Table protocols (what adapters must implement)."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from colback.catalog import TypeMapping


@runtime_checkable
class ColumnProtocol(Protocol):
    """One named column of a table.

    ``storage_type`` is the column's dtype expressed as a catalog storage name
    (``"UInt32"``, ``"Utf8"``, ...) or, for dtypes outside the catalog, the
    backend's own name for it.
    """

    @property
    def storage_type(self) -> str: ...

    def __len__(self) -> int: ...

    def null_count(self) -> int: ...

    def first_null(self) -> int | None:
        """Index of the first null cell, or None when there is none."""
        ...

    def typed_reader(self, mapping: TypeMapping) -> Callable[[int], Any]:
        """Bind a reader returning the cell at ``idx`` as ``mapping.row_type`` or None.

        Called once per view, after the storage type was checked against
        ``mapping``. The reader must not copy the column.
        """
        ...


@runtime_checkable
class TableProtocol(Protocol):
    """Interface that all table adapters must implement.

    Every column of a table has exactly ``height`` cells.
    """

    @property
    def height(self) -> int: ...

    def lookup_column(self, name: str) -> ColumnProtocol | None: ...
