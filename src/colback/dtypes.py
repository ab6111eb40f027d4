"""Primitive field types for Colback schemas.

A field is annotated with one of these classes (``UInt32``, ``Utf8 | None``).
They are never instantiated. Each one carries just enough about its storage
for ``colback.catalog`` to derive the catalog entry: a bit width for numeric
types, and signedness for integers.
"""

from __future__ import annotations

from typing import ClassVar

# ---------------------------------------------------------------------------
# Type categories
# ---------------------------------------------------------------------------


class NumericType:
    """Fixed-width numeric storage."""

    bits: ClassVar[int]


class IntegerType(NumericType):
    """Integer storage; ``signed`` selects the value range."""

    signed: ClassVar[bool]


class UnsignedIntegerType(IntegerType):
    signed = False


class SignedIntegerType(IntegerType):
    signed = True


class FloatType(NumericType):
    """IEEE 754 floating point."""


# ---------------------------------------------------------------------------
# Concrete types
# ---------------------------------------------------------------------------


class Bool:
    """Boolean."""


class UInt8(UnsignedIntegerType):
    bits = 8


class UInt16(UnsignedIntegerType):
    bits = 16


class UInt32(UnsignedIntegerType):
    bits = 32


class UInt64(UnsignedIntegerType):
    bits = 64


class Int8(SignedIntegerType):
    bits = 8


class Int16(SignedIntegerType):
    bits = 16


class Int32(SignedIntegerType):
    bits = 32


class Int64(SignedIntegerType):
    bits = 64


class Float32(FloatType):
    bits = 32


class Float64(FloatType):
    bits = 64


class Utf8:
    """UTF-8 text."""


PRIMITIVES: tuple[type, ...] = (
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    Int8,
    Int16,
    Int32,
    Int64,
    Float32,
    Float64,
    Bool,
    Utf8,
)
