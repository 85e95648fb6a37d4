"""User-facing errors with actionable context.

Errors are messages for humans. Each error should answer:
1. What went wrong?
2. What was the context?
3. What can the user do about it?

Every error raised by swiftup is a SwiftupError, so callers can catch the base
class or branch on the specific failure kind.
"""

import dataclasses

import beartype


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class SwiftupError(Exception):
    """Base error with structured context for user-facing messages."""

    message: str
    """What went wrong."""

    hint: str | None = None
    """What the user can do about it."""

    def __str__(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class InvalidSpecifierError(SwiftupError):
    """Version specifier is not a valid semver version or range."""

    specifier: str = dataclasses.field(kw_only=True)
    """The specifier as given by the user."""

    @staticmethod
    def make(specifier: str) -> "InvalidSpecifierError":
        """Create an InvalidSpecifierError with default message and hint."""
        return InvalidSpecifierError(
            message=f"Version '{specifier}' must be a valid semver format.",
            hint="Use an exact version (5.2.4), a partial version (5.2) or a range (^5.1, 5.2.x).",
            specifier=specifier,
        )


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class NoMatchingVersionError(SwiftupError):
    """No catalog release for the platform satisfies the specifier."""

    specifier: str = dataclasses.field(kw_only=True)
    """The specifier as given by the user."""

    family: str = dataclasses.field(kw_only=True)
    """Platform family the catalog was filtered to."""

    @staticmethod
    def make(
        specifier: str, family: str, available: tuple[str, ...] = ()
    ) -> "NoMatchingVersionError":
        """Create a NoMatchingVersionError listing the available versions."""
        available_str = ", ".join(available) if available else "(none)"
        return NoMatchingVersionError(
            message=f'Version "{specifier}" is not available for {family}',
            hint=f"Available versions: {available_str}",
            specifier=specifier,
            family=family,
        )


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class UnsupportedPlatformError(SwiftupError):
    """Platform family or variant has no known release naming convention."""

    family: str = dataclasses.field(kw_only=True)
    """Platform family that was rejected."""

    @staticmethod
    def make(family: str) -> "UnsupportedPlatformError":
        """Create an UnsupportedPlatformError with default message and hint."""
        return UnsupportedPlatformError(
            message=f"Cannot create download URL for an unsupported platform: {family}",
            hint="swiftup supports macOS and Ubuntu only.",
            family=family,
        )
