"""Null handling: the error, option and default null policies.

Demonstrates how Colback treats null cells, per field.
"""

from __future__ import annotations

from colback import (
    Bool,
    Field,
    Float64,
    InvalidNullError,
    NullCheck,
    Schema,
    UInt8,
    UInt64,
    Utf8,
    set_null_check,
)
from colback_polars import from_dict

# ---------------------------------------------------------------------------
# Schema with one field per null policy
# ---------------------------------------------------------------------------


class Users(Schema):
    id: UInt64
    # null="error" (the default): a null cell fails the row
    name: Utf8
    # null="option": a null cell reads as None
    age: UInt8 | None = Field(null="option")
    # null="default": a null cell reads as the default
    score: Float64 = Field(null="default", default=0.0)
    tags: Utf8 = Field(null="default", default_factory=str)
    active: Bool = Field(null="default", default=True)


DATA = {
    "id": [1, 2, 3, 4, 5],
    "name": ["Alice", "Bob", None, "Diana", "Eve"],
    "age": [30, None, 35, None, 40],
    "score": [85.0, 92.5, None, 95.0, None],
    "tags": ["a", None, "c", None, "e"],
    "active": [True, None, False, None, True],
}

users = from_dict(Users, DATA)

# ---------------------------------------------------------------------------
# iter() hands back failures in place of rows, without stopping
# ---------------------------------------------------------------------------

print("iter():")
for result in users.iter():
    if isinstance(result, InvalidNullError):
        print(f"  error: {result}")
    else:
        print(f"  {result}")
print()

# ---------------------------------------------------------------------------
# Plain iteration raises on the first bad row
# ---------------------------------------------------------------------------

try:
    names = [row.name for row in users]
except InvalidNullError as e:
    print(f"for-loop stopped: {e}")
print()

# ---------------------------------------------------------------------------
# Eager null checking rejects the table when the view is built
# ---------------------------------------------------------------------------

set_null_check(NullCheck.EAGER)
try:
    from_dict(Users, DATA)
except InvalidNullError as e:
    print(f"eager check: {e}")
finally:
    set_null_check(None)
