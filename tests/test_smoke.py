"""Smoke test to verify the project is set up correctly."""

from py_shell import __doc__, tokenize


def test_package_is_importable() -> None:
    """Verify that py_shell can be imported."""
    assert __doc__ is not None


def test_public_api() -> None:
    """The re-exported tokenizer is usable from the package root."""
    assert tokenize("echo hi") == ["echo", "hi"]
