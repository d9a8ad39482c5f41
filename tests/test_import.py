"""Verify package imports work correctly."""


def test_import_graphdoc() -> None:
    """Test that graphdoc can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import graphdoc

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert graphdoc.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from graphdoc import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exported() -> None:
    import graphdoc

    for name in graphdoc.__all__:
        assert hasattr(graphdoc, name), name
