"""Tests for errors module."""

import pytest

import swiftup.errors


def test_str_includes_hint() -> None:
    """SwiftupError renders the hint on its own line."""
    err = swiftup.errors.SwiftupError(message="Broken.", hint="Fix it.")
    assert str(err) == "Broken.\nHint: Fix it."


def test_str_without_hint() -> None:
    """SwiftupError renders only the message when there is no hint."""
    err = swiftup.errors.SwiftupError(message="Broken.")
    assert str(err) == "Broken."


def test_no_matching_version_mentions_specifier() -> None:
    """NoMatchingVersionError.make keeps the specifier and lists alternatives."""
    err = swiftup.errors.NoMatchingVersionError.make("9.9.9", "macos", ("5.3", "5.2.4"))
    assert "9.9.9" in str(err)
    assert err.specifier == "9.9.9"
    assert err.family == "macos"
    assert err.hint == "Available versions: 5.3, 5.2.4"


def test_errors_share_base_class() -> None:
    """Every failure kind can be caught as SwiftupError."""
    errors = [
        swiftup.errors.InvalidSpecifierError.make("nope"),
        swiftup.errors.NoMatchingVersionError.make("9.9.9", "ubuntu"),
        swiftup.errors.UnsupportedPlatformError.make("windows"),
    ]
    for err in errors:
        with pytest.raises(swiftup.errors.SwiftupError):
            raise err
