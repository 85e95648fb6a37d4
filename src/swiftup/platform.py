"""Target platform value and family normalization."""

import dataclasses
import re

import beartype

import swiftup.errors

MACOS = "macos"
UBUNTU = "ubuntu"

_FAMILY_ALIASES = {
    "darwin": MACOS,
    "mac": MACOS,
    "macos": MACOS,
    "osx": MACOS,
    "ubuntu": UBUNTU,
}

# Families whose builds differ per OS release and so need a variant.
_VARIANT_FAMILIES = frozenset({UBUNTU})
_SINGLE_BUILD_FAMILIES = frozenset({MACOS})


@beartype.beartype
def normalize_family(name: str) -> str:
    """Get normalized family name, mapping common aliases."""
    key = name.strip().lower()
    return _FAMILY_ALIASES.get(key, key)


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class Platform:
    """Operating system a release is resolved and built for."""

    family: str
    """OS family, e.g. "macos" or "ubuntu"."""

    variant: str | None = None
    """OS release (e.g. "18.04"), only for families with per-release builds."""

    def __post_init__(self) -> None:
        if self.family in _VARIANT_FAMILIES and not self.variant:
            raise swiftup.errors.UnsupportedPlatformError(
                message=f"Platform {self.family} requires an OS version",
                hint="Pass the distribution release, e.g. --os-version 18.04.",
                family=self.family,
            )
        if self.family in _SINGLE_BUILD_FAMILIES and self.variant is not None:
            raise swiftup.errors.UnsupportedPlatformError(
                message=f"Platform {self.family} does not take an OS version",
                hint=f"Drop the OS version '{self.variant}'.",
                family=self.family,
            )

    @staticmethod
    def make(name: str, variant: str | None = None) -> "Platform":
        """Create a Platform from a user-supplied family name."""
        return Platform(family=normalize_family(name), variant=variant)

    @property
    def variant_digits(self) -> str:
        """Variant with every non-digit character removed ("18.04" -> "1804")."""
        return re.sub(r"\D", "", self.variant or "")
