"""Per-field declarations and their definition-time validation.

Provides:
- ``NullPolicy`` — how a null cell becomes a field value
- ``FieldInfo`` — options declared via ``Field()``
- ``Field()`` — constructor function used as a schema attribute default
- ``FieldSpec`` — one fully resolved field of a schema
- ``validate_field`` / ``validate_fields`` — the per-field invariants
"""

from __future__ import annotations

import dataclasses
import enum
import keyword
from collections.abc import Callable, Iterable
from typing import Any

from colback.catalog import TypeMapping, lookup, type_name
from colback.errors import (
    FieldNameError,
    InvalidDefaultError,
    MissingDefaultError,
    NullPolicyError,
    SchemaDefinitionError,
    UnsupportedTypeError,
)

# Names that would shadow the attributes SchemaMeta installs on a schema class.
RESERVED_NAMES = frozenset({"view", "View", "RowRef"})


class NullPolicy(enum.Enum):
    """Null handling policy for a field.

    - ``ERROR`` — a null cell fails the row with ``InvalidNullError``.
    - ``OPTION`` — a null cell becomes ``None``; the field must be optional.
    - ``DEFAULT`` — a null cell becomes the field's default value.
    """

    ERROR = "error"
    OPTION = "option"
    DEFAULT = "default"


_STR_TO_POLICY = {p.value: p for p in NullPolicy}


class _Missing:
    """Sentinel for an absent default (``None`` is a legal literal)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


# ---------------------------------------------------------------------------
# FieldInfo / Field()
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True, slots=True)
class FieldInfo:
    """Immutable container for the options of one field.

    Created by ``Field()`` and read by ``SchemaMeta``. The ``null`` option is
    kept as given; it is checked together with the annotation when the schema
    is compiled, so that the error can name the field.
    """

    name: str | None = None
    null: NullPolicy | str | None = None
    default: Any = MISSING
    default_factory: Callable[[], Any] | Any = MISSING

    def has_default(self) -> bool:
        return self.default is not MISSING or self.default_factory is not MISSING


def Field(
    *,
    name: str | None = None,
    null: NullPolicy | str | None = None,
    default: Any = MISSING,
    default_factory: Callable[[], Any] | Any = MISSING,
) -> Any:
    """Declare the source column and null handling of a schema field.

    Returns a ``FieldInfo`` that ``SchemaMeta`` detects at class creation
    time. The return type is ``Any`` so it satisfies any field annotation.

    Usage::

        class Trades(Schema):
            qty: UInt32 = Field(null="default", default=0)
            venue: Utf8 | None = Field(null="option")
            price: Float64 = Field(name="px")
    """
    return FieldInfo(name=name, null=null, default=default, default_factory=default_factory)


# ---------------------------------------------------------------------------
# FieldSpec
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True, slots=True)
class FieldSpec:
    """A schema field as declared: annotation plus ``Field()`` options.

    ``dtype`` is the annotation with any ``| None`` stripped and ``optional``
    records whether it was present. ``null_policy`` is the raw option; use
    ``policy`` once the spec has passed validation.
    """

    name: str
    dtype: Any
    optional: bool = False
    source_column: str = ""
    null_policy: NullPolicy | str | None = None
    default: Any = MISSING
    default_factory: Any = MISSING

    def __post_init__(self) -> None:
        if not self.source_column:
            object.__setattr__(self, "source_column", self.name)

    @classmethod
    def from_declaration(
        cls, name: str, dtype: Any, optional: bool, info: FieldInfo | None
    ) -> FieldSpec:
        info = info or FieldInfo()
        return cls(
            name=name,
            dtype=dtype,
            optional=optional,
            source_column=info.name or name,
            null_policy=info.null,
            default=info.default,
            default_factory=info.default_factory,
        )

    @property
    def policy(self) -> NullPolicy:
        """The null policy, with the ``"error"`` default applied."""
        if self.null_policy is None:
            return NullPolicy.ERROR
        if isinstance(self.null_policy, NullPolicy):
            return self.null_policy
        return _STR_TO_POLICY[self.null_policy]

    @property
    def mapping(self) -> TypeMapping:
        """The catalog entry for this field's primitive type."""
        mapping = lookup(self.dtype)
        if mapping is None:
            raise UnsupportedTypeError(
                f"unsupported field type {type_name(self.dtype)}", field=self.name
            )
        return mapping

    def has_default(self) -> bool:
        return self.default is not MISSING or self.default_factory is not MISSING


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def check_field_name(name: Any) -> SchemaDefinitionError | None:
    """Return an error if ``name`` cannot be used as a field name."""
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        return FieldNameError(f"invalid field name {name!r}", field=str(name))
    if name.startswith("_"):
        return FieldNameError(f"field name {name!r} must not start with '_'", field=name)
    if name in RESERVED_NAMES:
        return FieldNameError(f"field name {name!r} is reserved", field=name)
    return None


def validate_field(spec: FieldSpec) -> list[SchemaDefinitionError]:
    """Check one field's invariants, independently of every other field."""
    errors: list[SchemaDefinitionError] = []
    name = spec.name

    name_error = check_field_name(name)
    if name_error is not None:
        errors.append(name_error)

    mapping = lookup(spec.dtype)
    if mapping is None:
        errors.append(
            UnsupportedTypeError(
                f"unsupported field type {type_name(spec.dtype)} for field {name!r}",
                field=name,
            )
        )

    raw = spec.null_policy
    if raw is not None and not isinstance(raw, NullPolicy) and not (
        isinstance(raw, str) and raw in _STR_TO_POLICY
    ):
        errors.append(
            NullPolicyError(
                f"field {name!r}: unknown null policy {raw!r}, "
                "expected one of 'error', 'option', 'default'",
                field=name,
            )
        )
        return errors
    policy = spec.policy

    if policy is NullPolicy.OPTION and not spec.optional:
        errors.append(
            NullPolicyError(
                f"field {name!r}: null='option' requires the field type to be T | None",
                field=name,
            )
        )
    elif spec.optional and policy is not NullPolicy.OPTION:
        errors.append(
            NullPolicyError(f"field {name!r}: T | None fields must use null='option'", field=name)
        )

    if policy is NullPolicy.DEFAULT:
        if not spec.has_default():
            errors.append(
                MissingDefaultError(
                    f"field {name!r}: null='default' requires Field(default=...) "
                    "or Field(default_factory=...)",
                    field=name,
                )
            )
        elif spec.default is not MISSING and spec.default_factory is not MISSING:
            errors.append(
                NullPolicyError(
                    f"field {name!r}: cannot specify both default and default_factory",
                    field=name,
                )
            )
        elif spec.default_factory is not MISSING and not callable(spec.default_factory):
            errors.append(
                NullPolicyError(f"field {name!r}: default_factory must be callable", field=name)
            )
        elif (
            spec.default is not MISSING
            and mapping is not None
            and not mapping.accepts(spec.default)
        ):
            errors.append(
                InvalidDefaultError(
                    f"field {name!r}: default {spec.default!r} is not a valid "
                    f"{mapping.storage_type} value",
                    field=name,
                )
            )
    elif spec.has_default():
        errors.append(
            NullPolicyError(
                f"field {name!r}: a default is only allowed with null='default'", field=name
            )
        )

    return errors


def validate_fields(specs: Iterable[FieldSpec]) -> list[SchemaDefinitionError]:
    """Check every field of a schema and collect all failures in field order."""
    errors: list[SchemaDefinitionError] = []
    seen: set[str] = set()
    for spec in specs:
        if spec.name in seen:
            errors.append(FieldNameError(f"duplicate field name {spec.name!r}", field=spec.name))
            continue
        seen.add(spec.name)
        errors.extend(validate_field(spec))
    return errors
