"""Nox sessions for testing against multiple backend versions."""

import nox

nox.options.default_venv_backend = "uv"

POLARS_VERSIONS = ["1.0.0", "1.20.0"]
PANDAS_VERSIONS = ["2.0.0", "2.2.0"]

CORE_TESTS = ["tests/unit"]

POLARS_TESTS = [
    "tests/integration/test_polars_view.py",
    "tests/integration/test_polars_dtype_mapping.py",
    "tests/e2e",
]

PANDAS_TESTS = [
    "tests/integration/test_pandas_view.py",
]


@nox.session(python=["3.10", "3.12"])
def test_core(session: nox.Session) -> None:
    """Run the backend-independent unit tests."""
    session.install("-e", ".[test]")
    session.run("pytest", *CORE_TESTS, "-q")


@nox.session(python=["3.10"])
@nox.parametrize("polars", POLARS_VERSIONS)
def test_polars(session: nox.Session, polars: str) -> None:
    """Test colback_polars against specific Polars versions."""
    session.install("-e", ".[test]", f"polars=={polars}")
    session.run("pytest", *POLARS_TESTS, "-q")


@nox.session(python=["3.10"])
@nox.parametrize("pandas", PANDAS_VERSIONS)
def test_pandas(session: nox.Session, pandas: str) -> None:
    """Test colback_pandas against specific Pandas versions."""
    deps = ["-e", ".[test]", f"pandas=={pandas}"]
    # pandas < 2.2 was compiled against numpy 1.x ABI
    if pandas < "2.2":
        deps.append("numpy<2")
    session.install(*deps)
    session.run("pytest", *PANDAS_TESTS, "-q")
