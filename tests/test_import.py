"""Verify package imports work correctly."""


def test_import_pliegue() -> None:
    """Test that pliegue can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import pliegue

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert pliegue.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from pliegue import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_core_modules_import_independently() -> None:
    """Each layer imports without pulling in the high-level API first."""
    import importlib

    for name in (
        "pliegue.nodes",
        "pliegue.builders",
        "pliegue.fitting",
        "pliegue.renderers.text",
        "pliegue.serialization",
        "pliegue.css",
    ):
        assert importlib.import_module(name) is not None
