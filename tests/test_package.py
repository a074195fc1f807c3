"""Smoke test: verify the cviz package is importable."""

import cviz


def test_package_version() -> None:
    """Package must declare a __version__ string."""
    assert isinstance(cviz.__version__, str)
    assert cviz.__version__ == "0.0.1"
