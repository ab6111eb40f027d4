"""Basic usage: schema definition, building a view, reading rows.

Demonstrates the core Colback workflow with the Polars backend.
"""

from __future__ import annotations

import tempfile

import polars as pl

from colback import Field, Float64, Schema, UInt32, UInt64, Utf8, WrongDtypeError
from colback_polars import from_dict, read_parquet, view

# ---------------------------------------------------------------------------
# 1. Define a schema: one annotated attribute per field
# ---------------------------------------------------------------------------


class Users(Schema):
    id: UInt64
    name: Utf8
    age: UInt32
    score: Float64 = Field(name="final_score")


print(f"Schema: {Users!r}")
print()

# ---------------------------------------------------------------------------
# 2. Build a view over columnar data
# ---------------------------------------------------------------------------

users = from_dict(
    Users,
    {
        "id": [1, 2, 3, 4, 5],
        "name": ["Alice", "Bob", "Charlie", "Diana", "Eve"],
        "age": [30, 25, 35, 28, 40],
        "final_score": [85.0, 92.5, 78.0, 95.0, 88.0],
    },
)
print(f"Built {users!r}")
print()

# ---------------------------------------------------------------------------
# 3. Read rows: by index, or by iterating
# ---------------------------------------------------------------------------

first = users.get(0)
print(f"users.get(0) = {first}")
print(f"first.name = {first.name}, first.score = {first.score}")
print()

over_30 = [row.name for row in users if row.age > 30]
print(f"Users over 30: {over_30}")
print()

# ---------------------------------------------------------------------------
# 4. Parquet round trip: the file's types are checked when the view is built
# ---------------------------------------------------------------------------

with tempfile.NamedTemporaryFile(suffix=".parquet") as f:
    users.table.df.write_parquet(f.name)
    again = read_parquet(f.name, Users)
    print(f"Read back {len(again)} rows; last row = {again[len(again) - 1]}")
print()

# ---------------------------------------------------------------------------
# 5. A table with the wrong storage type is rejected up front
# ---------------------------------------------------------------------------

untyped = pl.DataFrame(
    {"id": [1], "name": ["Zed"], "age": [50], "final_score": [1.0]}
)  # id and age default to Int64
try:
    view(untyped, Users)
except WrongDtypeError as e:
    print(f"Rejected: {e}")
