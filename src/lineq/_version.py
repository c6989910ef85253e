"""Installed LINEQ version."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Version recorded in the installed distribution metadata."""
    try:
        return version("lineq")
    except PackageNotFoundError:
        # Running from a source checkout without `pip install -e .`
        return "0.0.0"
