"""Shared fixtures: an in-memory table that implements the Colback table protocol."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from colback.catalog import TypeMapping


class ListColumn:
    """A column backed by a Python list; ``None`` marks a null cell."""

    def __init__(self, storage_type: str, values: Sequence[Any]) -> None:
        self.storage_type = storage_type
        self.values = list(values)
        self.reads = 0

    def __len__(self) -> int:
        return len(self.values)

    def null_count(self) -> int:
        return sum(1 for v in self.values if v is None)

    def first_null(self) -> int | None:
        for idx, value in enumerate(self.values):
            if value is None:
                return idx
        return None

    def typed_reader(self, mapping: TypeMapping) -> Callable[[int], Any]:
        def read(idx: int) -> Any:
            self.reads += 1
            return self.values[idx]

        return read


class ListTable:
    """A table of ListColumns keyed by name: ``{"a": ("UInt32", [1, 2])}``."""

    def __init__(self, columns: dict[str, tuple[str, Sequence[Any]]]) -> None:
        self.columns = {name: ListColumn(st, vals) for name, (st, vals) in columns.items()}
        self.lookups: list[str] = []

    @property
    def height(self) -> int:
        return len(next(iter(self.columns.values()))) if self.columns else 0

    def lookup_column(self, name: str) -> ListColumn | None:
        self.lookups.append(name)
        return self.columns.get(name)


@pytest.fixture
def make_table() -> type[ListTable]:
    return ListTable


@pytest.fixture(autouse=True)
def _reset_null_check(monkeypatch: pytest.MonkeyPatch) -> Any:
    import colback.validation

    monkeypatch.delenv("COLBACK_NULL_CHECK", raising=False)
    colback.validation._null_check = None
    yield
    colback.validation._null_check = None
