"""Verify package imports work correctly."""


def test_import_anyorder() -> None:
    """Test that anyorder can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import anyorder

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert anyorder.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from anyorder import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable from the package root."""
    import anyorder

    missing = [name for name in anyorder.__all__ if not hasattr(anyorder, name)]
    assert missing == []


def test_package_docstring_examples_import_what_they_use() -> None:
    """The custom style example imports re before calling re.escape."""
    import anyorder

    doc = anyorder.__doc__
    assert doc is not None
    example = doc[doc.index("Custom Styles:") :]
    assert example.index(">>> import re") < example.index("re.escape")
