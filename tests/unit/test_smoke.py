"""Smoke tests — verify packages are importable."""


def test_import_colback() -> None:
    import colback

    assert colback is not None


def test_import_colback_arrow() -> None:
    import colback.arrow

    assert colback.arrow is not None


def test_import_colback_polars() -> None:
    import colback_polars

    assert colback_polars is not None


def test_import_colback_pandas() -> None:
    import colback_pandas

    assert colback_pandas is not None
