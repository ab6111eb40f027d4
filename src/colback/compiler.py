"""Schema compiler: turns validated FieldSpecs into a View class and a RowRef class.

For a schema ``Trades`` the compiler emits, once per schema:

- ``TradesRowRef`` — a frozen, slotted dataclass with one attribute per field
- ``TradesView`` — a ``View`` subclass carrying the field bindings

A binding pairs a field with its catalog entry and a *materializer*, a small
function specialised for the field's null policy that turns the raw cell
returned by a column reader into the field value.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from colback.catalog import TypeMapping
from colback.errors import InvalidFactoryValueError, InvalidNullError
from colback.fields import MISSING, FieldSpec, NullPolicy, validate_fields
from colback.view import View

if TYPE_CHECKING:
    from colback.schema import Schema

logger = logging.getLogger(__name__)

Reader = Callable[[int], Any]
Materializer = Callable[[Reader, int], Any]


@dataclasses.dataclass(frozen=True, slots=True)
class FieldBinding:
    """Everything a view needs to bind and read one field."""

    spec: FieldSpec
    mapping: TypeMapping
    materialize: Materializer

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def source_column(self) -> str:
        return self.spec.source_column

    @property
    def policy(self) -> NullPolicy:
        return self.spec.policy


# ---------------------------------------------------------------------------
# Materializers
# ---------------------------------------------------------------------------


def _optional_materializer() -> Materializer:
    def materialize(read: Reader, idx: int) -> Any:
        return read(idx)

    return materialize


def _default_materializer(default: Any) -> Materializer:
    def materialize(read: Reader, idx: int) -> Any:
        value = read(idx)
        return default if value is None else value

    return materialize


def _factory_materializer(
    factory: Callable[[], Any], col: str, mapping: TypeMapping
) -> Materializer:
    def materialize(read: Reader, idx: int) -> Any:
        value = read(idx)
        if value is not None:
            return value
        value = factory()
        if not mapping.accepts(value):
            raise InvalidFactoryValueError(col, idx, value, mapping.storage_type)
        return _as_row_type(mapping, value)

    return materialize


def _as_row_type(mapping: TypeMapping, value: Any) -> Any:
    # Float fields accept int defaults; the row always holds a float.
    if mapping.row_type is float:
        return float(value)
    return value


def _error_materializer(col: str) -> Materializer:
    def materialize(read: Reader, idx: int) -> Any:
        value = read(idx)
        if value is None:
            raise InvalidNullError(col, idx)
        return value

    return materialize


def build_materializer(spec: FieldSpec) -> Materializer:
    """Return the materializer implementing ``spec``'s null policy."""
    policy = spec.policy
    if policy is NullPolicy.OPTION:
        return _optional_materializer()
    if policy is NullPolicy.DEFAULT:
        if spec.default_factory is not MISSING:
            return _factory_materializer(spec.default_factory, spec.source_column, spec.mapping)
        return _default_materializer(_as_row_type(spec.mapping, spec.default))
    return _error_materializer(spec.source_column)


# ---------------------------------------------------------------------------
# Emission
# ---------------------------------------------------------------------------


def bind_fields(specs: Sequence[FieldSpec]) -> tuple[FieldBinding, ...]:
    """Pair each validated field with its catalog entry and materializer."""
    return tuple(
        FieldBinding(spec=spec, mapping=spec.mapping, materialize=build_materializer(spec))
        for spec in specs
    )


def build_row_class(
    schema_name: str, bindings: Sequence[FieldBinding], module: str | None = None
) -> type:
    """Build the frozen dataclass representing one materialised row."""
    fields: list[tuple[str, Any]] = []
    for binding in bindings:
        row_type: Any = binding.mapping.row_type
        if binding.policy is NullPolicy.OPTION:
            row_type = row_type | None
        fields.append((binding.name, row_type))

    namespace = {"__module__": module} if module else None
    return dataclasses.make_dataclass(
        f"{schema_name}RowRef",
        fields,
        namespace=namespace,
        frozen=True,
        slots=True,
    )


def build_view_class(
    schema: type[Schema], row_class: type, bindings: tuple[FieldBinding, ...]
) -> type[View[Any]]:
    """Build the ``View`` subclass bound to ``schema``."""
    namespace = {
        "__slots__": (),
        "__module__": schema.__module__,
        "__qualname__": f"{schema.__qualname__}View",
        "schema": schema,
        "row_class": row_class,
        "bindings": bindings,
    }
    return type(f"{schema.__name__}View", (View,), namespace)


def compile_schema(schema: type[Schema], specs: Sequence[FieldSpec]) -> tuple[type, type]:
    """Validate ``specs`` and emit ``(view_class, row_class)`` for ``schema``.

    Raises the first ``SchemaDefinitionError`` found; its ``errors``
    attribute lists every problem in the schema.
    """
    errors = validate_fields(specs)
    if errors:
        first = errors[0]
        first.errors = errors
        if len(errors) > 1:
            first.args = (f"{first.args[0]} (and {len(errors) - 1} more schema error(s))",)
        raise first

    bindings = bind_fields(specs)
    row_class = build_row_class(schema.__name__, bindings, module=schema.__module__)
    view_class = build_view_class(schema, row_class, bindings)
    logger.debug(
        "compiled schema %s: %s",
        schema.__name__,
        ", ".join(f"{b.name}<-{b.source_column}:{b.mapping.storage_type}" for b in bindings),
    )
    return view_class, row_class
