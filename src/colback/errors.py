"""Exception hierarchy for Colback.

Two families:

- ``SchemaDefinitionError`` and subclasses are raised once, when a schema is
  declared. They are programming faults in the schema itself.
- ``MissingColumnError``, ``WrongDtypeError``, ``InvalidNullError`` and
  ``RowIndexError`` are raised while building a view or reading rows.
"""

from __future__ import annotations


class ColbackError(Exception):
    """Base class for all Colback errors."""


# ---------------------------------------------------------------------------
# Definition-time errors
# ---------------------------------------------------------------------------


class SchemaDefinitionError(ColbackError):
    """A schema declaration is invalid.

    ``field`` names the offending field (``None`` for schema-level problems).
    When a schema has several invalid fields, the error raised from the class
    statement is the first one and ``errors`` lists all of them.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        self.errors: list[SchemaDefinitionError] = [self]
        super().__init__(message)


class UnsupportedTypeError(SchemaDefinitionError):
    """The field's declared type is not in the type catalog."""


class NullPolicyError(SchemaDefinitionError):
    """The null policy does not agree with the field's optionality or default."""


class MissingDefaultError(SchemaDefinitionError):
    """``null="default"`` was chosen but no default was given."""


class InvalidDefaultError(SchemaDefinitionError):
    """The literal default is not a valid value of the field's type."""


class UnnamedFieldsError(SchemaDefinitionError):
    """A schema was declared with positional (unnamed) fields."""


class FieldNameError(SchemaDefinitionError):
    """A field name is invalid, reserved or duplicated."""


# ---------------------------------------------------------------------------
# Build-time and row-time errors
# ---------------------------------------------------------------------------


class MissingColumnError(ColbackError):
    """The table lacks a column the schema reads from."""

    def __init__(self, col: str) -> None:
        self.col = col
        super().__init__(f"missing required column(s): {col!r}")


class WrongDtypeError(ColbackError):
    """A column's storage type differs from the type the schema declares."""

    def __init__(self, col: str, expected: str, actual: str) -> None:
        self.col = col
        self.expected = expected
        self.actual = actual
        super().__init__(f"column {col} has wrong dtype: expected {expected}, got {actual}")


class InvalidNullError(ColbackError):
    """A null cell was found in a column whose field uses ``null="error"``."""

    def __init__(self, col: str, idx: int) -> None:
        self.col = col
        self.idx = idx
        super().__init__(f"null values encountered in non-nullable column {col} at row {idx}")


class RowIndexError(ColbackError, IndexError):
    """A row index outside ``0 <= idx < len(view)``."""

    def __init__(self, idx: int, height: int) -> None:
        self.idx = idx
        self.height = height
        super().__init__(f"row index {idx} out of range for view of height {height}")


class InvalidFactoryValueError(ColbackError, TypeError):
    """A ``default_factory`` returned a value the field's type cannot hold."""

    def __init__(self, col: str, idx: int, value: object, expected: str) -> None:
        self.col = col
        self.idx = idx
        self.value = value
        super().__init__(
            f"default_factory for column {col} returned {value!r} at row {idx}, "
            f"which is not a valid {expected}"
        )
