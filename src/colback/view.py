"""View — a validated, read-only binding between a schema and one table.

A view is built once per table. Building it checks that every field's source
column exists and has the storage type the schema declares, then binds one
typed reader per field. After that, reading a row is indexing: ``get(idx)``
reads each field's cell, applies the field's null policy and returns a
RowRef.

Concrete view classes (``TradesView`` for a schema ``Trades``) are emitted by
``colback.compiler``; this module holds the behaviour they share.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from colback._protocols import TableProtocol
from colback.errors import InvalidNullError, MissingColumnError, RowIndexError, WrongDtypeError
from colback.fields import NullPolicy
from colback.validation import is_eager_null_check

if TYPE_CHECKING:
    from colback.compiler import FieldBinding
    from colback.schema import Schema

logger = logging.getLogger(__name__)

R = TypeVar("R")


class View(Generic[R]):
    """A typed view over the rows of one table.

    Not instantiated directly: use ``Schema.view(table)`` or
    ``Schema.View.build(table)``. The view keeps a reference to the table
    and never copies it; the table must not be mutated while views over it
    are in use.
    """

    __slots__ = ("_table", "_height", "_readers")

    # Set on each compiled subclass
    schema: ClassVar[type[Schema]]
    row_class: ClassVar[type]
    bindings: ClassVar[tuple[FieldBinding, ...]]

    def __init__(
        self,
        *,
        _table: TableProtocol,
        _height: int,
        _readers: tuple[Callable[[int], Any], ...],
    ) -> None:
        self._table = _table
        self._height = _height
        self._readers = _readers

    # --- Construction ---

    @classmethod
    def build(cls, table: TableProtocol) -> View[R]:
        """Validate ``table`` against the schema and bind a view over it.

        Fields are checked in schema order; the first missing column or dtype
        mismatch aborts construction.

        Raises:
            MissingColumnError: a field's source column is absent.
            WrongDtypeError: a column's storage type differs from the field's type.
            InvalidNullError: eager null checking is enabled and a
                ``null="error"`` column contains a null.
        """
        if "bindings" not in cls.__dict__:
            raise TypeError(f"{cls.__name__} is not bound to a schema; use Schema.view()")
        if not isinstance(table, TableProtocol):
            raise TypeError(
                f"Expected a table adapter (e.g. colback_polars.PolarsTable), "
                f"got {type(table).__name__}"
            )

        readers: list[Callable[[int], Any]] = []
        columns = []
        for binding in cls.bindings:
            col = binding.source_column
            column = table.lookup_column(col)
            if column is None:
                raise MissingColumnError(col)
            expected = binding.mapping.storage_type
            actual = column.storage_type
            if actual != expected:
                raise WrongDtypeError(col, expected, actual)
            readers.append(column.typed_reader(binding.mapping))
            columns.append(column)

        if is_eager_null_check():
            for binding, column in zip(cls.bindings, columns):
                if binding.policy is not NullPolicy.ERROR or column.null_count() == 0:
                    continue
                idx = column.first_null()
                if idx is not None:
                    raise InvalidNullError(binding.source_column, idx)

        height = table.height
        logger.debug("built %s over %d rows", cls.__name__, height)
        return cls(_table=table, _height=height, _readers=tuple(readers))

    # --- Properties ---

    @property
    def table(self) -> TableProtocol:
        """The table adapter this view reads from."""
        return self._table

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    def __len__(self) -> int:
        return self._height

    # --- Row access ---

    def get(self, idx: int) -> R:
        """Materialise row ``idx``.

        Either every field is read or the call fails; a partially populated
        row is never returned.

        Raises:
            RowIndexError: ``idx`` is outside ``0 <= idx < len(view)``.
            InvalidNullError: a ``null="error"`` field is null in this row.
            InvalidFactoryValueError: a ``default_factory`` returned a value of
                the wrong type.
            TypeError: ``idx`` is not an integer, or is a ``bool``.
        """
        if isinstance(idx, bool) or not hasattr(type(idx), "__index__"):
            raise TypeError(f"row index must be an int, not {type(idx).__name__}")
        idx = operator.index(idx)
        if not 0 <= idx < self._height:
            raise RowIndexError(idx, self._height)
        values = [
            binding.materialize(read, idx)
            for binding, read in zip(self.bindings, self._readers)
        ]
        return self.row_class(*values)

    def __getitem__(self, idx: int) -> R:
        return self.get(idx)

    def iter(self) -> Iterator[R | InvalidNullError]:
        """Iterate over every row in order, returning failures instead of raising.

        Each element is either a RowRef or the ``InvalidNullError`` for that
        row, so one bad row does not stop the rest. Every call starts a new
        pass from row 0.
        """
        for idx in range(self._height):
            try:
                yield self.get(idx)
            except InvalidNullError as e:
                yield e

    def __iter__(self) -> Iterator[R]:
        """Iterate over every row in order, raising on the first bad row."""
        for idx in range(self._height):
            yield self.get(idx)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._height} rows)"
