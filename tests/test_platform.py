"""Tests for platform module."""

import pytest

import swiftup.errors
import swiftup.platform


@pytest.mark.parametrize("name", ["darwin", "macOS", "mac", "osx", " macos "])
def test_normalize_family_macos_aliases(name: str) -> None:
    """normalize_family maps macOS aliases to macos."""
    assert swiftup.platform.normalize_family(name) == "macos"


def test_normalize_family_keeps_unknown() -> None:
    """normalize_family lower-cases unknown families without rejecting them."""
    assert swiftup.platform.normalize_family("Windows") == "windows"


def test_ubuntu_requires_variant() -> None:
    """Platform rejects ubuntu without an OS release."""
    with pytest.raises(
        swiftup.errors.UnsupportedPlatformError, match="requires an OS version"
    ):
        swiftup.platform.Platform(family="ubuntu")


def test_macos_rejects_variant() -> None:
    """Platform rejects an OS release for macos."""
    with pytest.raises(
        swiftup.errors.UnsupportedPlatformError, match="does not take an OS version"
    ):
        swiftup.platform.Platform(family="macos", variant="10.15")


def test_unknown_family_constructs() -> None:
    """Platform accepts families it has no rules for."""
    platform = swiftup.platform.Platform(family="windows", variant="10")
    assert platform.family == "windows"


def test_make_normalizes_family() -> None:
    """Platform.make normalizes the family name."""
    platform = swiftup.platform.Platform.make("Darwin")
    assert platform == swiftup.platform.Platform(family="macos")


def test_variant_digits() -> None:
    """variant_digits strips non-digit characters."""
    platform = swiftup.platform.Platform(family="ubuntu", variant="18.04")
    assert platform.variant_digits == "1804"
