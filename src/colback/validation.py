"""Runtime null-check toggle.

Null cells in ``null="error"`` fields are reported **lazily** by default: the
view is built without scanning any data, and ``View.get(idx)`` raises
``InvalidNullError`` for the row that contains the null. Eager checking moves
that failure to ``View.build``, which then scans each such column once.

Enable it via environment variable (ideal for CI) or programmatically::

    # Environment variable
    COLBACK_NULL_CHECK=eager pytest tests/

    # Programmatic
    from colback import NullCheck, set_null_check
    set_null_check(NullCheck.EAGER)

``set_null_check()`` also accepts strings (``"lazy"``, ``"eager"``) and
booleans (``True`` → ``EAGER``, ``False`` → ``LAZY``).
"""

from __future__ import annotations

import enum
import os


class NullCheck(enum.Enum):
    """When nulls in ``null="error"`` fields are detected.

    - ``LAZY`` — per row, in ``View.get``. No scan at build time.
    - ``EAGER`` — at ``View.build``, by scanning each column once.
    """

    LAZY = "lazy"
    EAGER = "eager"


ENV_VAR = "COLBACK_NULL_CHECK"

_null_check: NullCheck | None = None

_STR_TO_LEVEL = {v.value: v for v in NullCheck}


def get_null_check() -> NullCheck:
    """Return the current null-check mode."""
    if _null_check is not None:
        return _null_check
    env = os.environ.get(ENV_VAR, "").lower()
    level = _STR_TO_LEVEL.get(env)
    if level is not None:
        return level
    if env in ("1", "true", "yes"):
        return NullCheck.EAGER
    return NullCheck.LAZY


def is_eager_null_check() -> bool:
    """Return whether ``View.build`` scans for nulls."""
    return get_null_check() is NullCheck.EAGER


def set_null_check(level: NullCheck | bool | str | None) -> None:
    """Set the null-check mode.

    Accepts a ``NullCheck`` enum, a mode string (``"lazy"``, ``"eager"``) or a
    boolean (``True`` → ``EAGER``, ``False`` → ``LAZY``). ``None`` clears the
    override so the environment variable applies again.
    """
    global _null_check
    if level is None or isinstance(level, NullCheck):
        _null_check = level
    elif isinstance(level, bool):
        _null_check = NullCheck.EAGER if level else NullCheck.LAZY
    elif isinstance(level, str):
        parsed = _STR_TO_LEVEL.get(level.lower())
        if parsed is None:
            raise ValueError(
                f"Invalid null check mode: {level!r}. "
                f"Use NullCheck.LAZY / EAGER, a string, or a bool."
            )
        _null_check = parsed
    else:
        raise TypeError(f"Expected NullCheck, str, or bool, got {type(level).__name__}")
