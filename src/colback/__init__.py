"""Colback: column-backed row views with validated, typed field access."""

from colback._protocols import ColumnProtocol, TableProtocol
from colback.catalog import CATALOG, TypeMapping, lookup
from colback.dtypes import (
    Bool,
    Float32,
    Float64,
    FloatType,
    Int8,
    Int16,
    Int32,
    Int64,
    IntegerType,
    NumericType,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    Utf8,
)
from colback.errors import (
    ColbackError,
    FieldNameError,
    InvalidDefaultError,
    InvalidFactoryValueError,
    InvalidNullError,
    MissingColumnError,
    MissingDefaultError,
    NullPolicyError,
    RowIndexError,
    SchemaDefinitionError,
    UnnamedFieldsError,
    UnsupportedTypeError,
    WrongDtypeError,
)
from colback.fields import Field, FieldInfo, FieldSpec, NullPolicy
from colback.schema import Schema, fields, make_schema
from colback.validation import NullCheck, get_null_check, is_eager_null_check, set_null_check
from colback.view import View

__all__ = [
    # Table protocols
    "TableProtocol",
    "ColumnProtocol",
    # Schema layer
    "Schema",
    "Field",
    "FieldInfo",
    "FieldSpec",
    "NullPolicy",
    "fields",
    "make_schema",
    # View layer
    "View",
    # Type catalog
    "CATALOG",
    "TypeMapping",
    "lookup",
    # Type categories
    "NumericType",
    "IntegerType",
    "FloatType",
    # Boolean
    "Bool",
    # Unsigned integers
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    # Signed integers
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    # Floating point
    "Float32",
    "Float64",
    # Text
    "Utf8",
    # Errors
    "ColbackError",
    "SchemaDefinitionError",
    "UnsupportedTypeError",
    "NullPolicyError",
    "MissingDefaultError",
    "InvalidDefaultError",
    "UnnamedFieldsError",
    "FieldNameError",
    "MissingColumnError",
    "WrongDtypeError",
    "InvalidNullError",
    "InvalidFactoryValueError",
    "RowIndexError",
    # Null-check configuration
    "NullCheck",
    "set_null_check",
    "get_null_check",
    "is_eager_null_check",
]
