"""Schema base class and schema metaclass.

Defines the declaration layer:
- ``SchemaMeta`` — metaclass that turns annotations into FieldSpecs and
  compiles them into a View class and a RowRef class
- ``Schema`` — base class for user-defined row schemas
- ``make_schema()`` — functional construction, like ``dataclasses.make_dataclass``
"""

from __future__ import annotations

import logging
import sys
import typing
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from colback.catalog import type_name, unwrap_optional
from colback.compiler import compile_schema
from colback.errors import FieldNameError, UnnamedFieldsError
from colback.fields import FieldInfo, FieldSpec, check_field_name

if TYPE_CHECKING:
    from colback._protocols import TableProtocol
    from colback.view import View

logger = logging.getLogger(__name__)

S = TypeVar("S", bound="Schema")


# ---------------------------------------------------------------------------
# Schema metaclass
# ---------------------------------------------------------------------------


def _resolve_annotations(cls: type, name: str) -> dict[str, Any]:
    # get_type_hints() handles PEP 563 string annotations and traverses the MRO.
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        import warnings

        warnings.warn(
            f"Schema {name!r}: get_type_hints() failed, falling back to raw annotations. "
            "Forward references may not be resolved correctly.",
            stacklevel=3,
        )
        annotations: dict[str, Any] = {}
        for base in reversed(cls.__mro__):
            annotations.update(getattr(base, "__annotations__", {}))
        return annotations


def _inherited_spec(cls: type, col_name: str) -> FieldSpec | None:
    for base in cls.__mro__[1:]:
        spec = getattr(base, "_fields", {}).get(col_name)
        if spec is not None:
            return spec
    return None


class SchemaMeta(type):
    """Metaclass for Schema that compiles annotations into a view.

    At class creation time:
    1. Collects annotations from the class and all bases (MRO traversal).
    2. Builds a FieldSpec for each non-private field, applying ``Field()``
       options from the class body or from the base class that declared it.
    3. Validates every field and raises the first ``SchemaDefinitionError``.
    4. Stores the specs in ``cls._fields`` and on the class as attributes, and
       installs the compiled ``cls.View`` and ``cls.RowRef``.
    """

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ) -> SchemaMeta:
        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        # The Schema base class itself declares no fields and gets no view.
        if not any(isinstance(base, SchemaMeta) for base in bases):
            cls._fields = {}  # type: ignore[attr-defined]
            return cls

        specs: list[FieldSpec] = []
        for col_name, annotation in _resolve_annotations(cls, name).items():
            if col_name.startswith("_") or typing.get_origin(annotation) is ClassVar:
                continue
            dtype, optional = unwrap_optional(annotation)
            if col_name in namespace:
                value = namespace[col_name]
                # A bare value is read as a default; validation rejects it
                # unless the field also says null="default", which it cannot.
                info = value if isinstance(value, FieldInfo) else FieldInfo(default=value)
                specs.append(FieldSpec.from_declaration(col_name, dtype, optional, info))
                continue
            parent = _inherited_spec(cls, col_name)
            if parent is not None:
                specs.append(
                    FieldSpec(
                        name=col_name,
                        dtype=dtype,
                        optional=optional,
                        source_column=parent.source_column,
                        null_policy=parent.null_policy,
                        default=parent.default,
                        default_factory=parent.default_factory,
                    )
                )
            else:
                specs.append(FieldSpec.from_declaration(col_name, dtype, optional, None))

        view_class, row_class = compile_schema(cls, specs)

        for spec in specs:
            setattr(cls, spec.name, spec)
        cls._fields = {spec.name: spec for spec in specs}  # type: ignore[attr-defined]
        cls.View = view_class  # type: ignore[attr-defined]
        cls.RowRef = row_class  # type: ignore[attr-defined]
        return cls

    def __repr__(cls) -> str:
        fields = getattr(cls, "_fields", {})
        if not fields:
            return cls.__name__
        cols = ", ".join(
            f"{spec.name}: {type_name(spec.dtype)}{' | None' if spec.optional else ''}"
            for spec in fields.values()
        )
        return f"{cls.__name__}({cols})"


# ---------------------------------------------------------------------------
# Schema base class
# ---------------------------------------------------------------------------


class Schema(metaclass=SchemaMeta):
    """Base class for user-defined row schemas.

    Subclass this to declare the fields of a row::

        class Trades(Schema):
            qty: UInt32
            filled: Bool = Field(null="default", default=False)
            venue: Utf8 | None = Field(null="option")
            price: Float64 = Field(name="px")

    Declaring the class validates it; errors surface as
    ``SchemaDefinitionError`` from the class statement. Each schema gets a
    ``View`` class (``Trades.View``) and a frozen ``RowRef`` dataclass
    (``Trades.RowRef``).
    """

    if TYPE_CHECKING:
        _fields: ClassVar[dict[str, FieldSpec]]
        View: ClassVar[type[View[Any]]]
        RowRef: ClassVar[type]

    @classmethod
    def view(cls, table: TableProtocol) -> View[Any]:
        """Validate ``table`` and return a view over it (``cls.View.build``)."""
        if "View" not in cls.__dict__:
            raise TypeError(f"{cls.__name__} has no compiled view")
        return cls.View.build(table)


def fields(schema: type[Schema]) -> tuple[FieldSpec, ...]:
    """Return the FieldSpecs of a schema, in field order."""
    return tuple(schema._fields.values())


# ---------------------------------------------------------------------------
# Functional construction
# ---------------------------------------------------------------------------


def make_schema(
    name: str,
    fields: Iterable[Any],
    *,
    bases: tuple[type[Schema], ...] = (),
    module: str | None = None,
) -> type[Schema]:
    """Create a schema class from a list of field declarations.

    Each entry is ``(name, dtype)`` or ``(name, dtype, Field(...))``::

        Trades = make_schema("Trades", [
            ("qty", UInt32),
            ("venue", Utf8 | None, Field(null="option")),
        ])

    Raises:
        UnnamedFieldsError: an entry has no field name.
        FieldNameError: a field name is invalid or repeated.
        SchemaDefinitionError: any per-field invariant fails.
    """
    annotations: dict[str, Any] = {}
    namespace: dict[str, Any] = {}
    for position, entry in enumerate(fields):
        if not isinstance(entry, tuple) or len(entry) not in (2, 3):
            raise UnnamedFieldsError(
                f"{name}: field #{position} must be (name, dtype) or (name, dtype, Field()), "
                f"got {entry!r}"
            )
        col_name = entry[0]
        if not isinstance(col_name, str):
            raise UnnamedFieldsError(f"{name}: field #{position} has no name")
        name_error = check_field_name(col_name)
        if name_error is not None:
            raise name_error
        if col_name in annotations:
            raise FieldNameError(f"{name}: duplicate field name {col_name!r}", field=col_name)
        annotations[col_name] = entry[1]
        if len(entry) == 3:
            namespace[col_name] = entry[2]

    if module is None:
        try:
            module = sys._getframe(1).f_globals.get("__name__", "__main__")
        except (AttributeError, ValueError):
            module = __name__

    namespace["__annotations__"] = annotations
    namespace["__module__"] = module
    schema = SchemaMeta(name, bases or (Schema,), namespace)
    logger.debug("created schema %r", schema)
    return schema  # type: ignore[return-value]
