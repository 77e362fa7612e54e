"""Verify package imports work correctly."""


def test_import_memberdoc() -> None:
    """Test that memberdoc can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import memberdoc

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert memberdoc.__version__ == expected


def test_public_api() -> None:
    import memberdoc

    for name in memberdoc.__all__:
        assert hasattr(memberdoc, name), name
