"""Resolve a semver specifier to the best catalog release for a platform."""

import collections.abc
import logging
import re
import typing as tp

import beartype
import semantic_version

import swiftup.catalog
import swiftup.errors
import swiftup.platform

logger = logging.getLogger(__name__)

# A version token followed by a pre-release or build tag ("5.2.4-beta", "5.2+b1").
# Hyphen ranges ("5.0 - 5.2") always have spaces around the hyphen.
_TAGGED_VERSION = re.compile(r"[0-9xX*][-+]")


@beartype.beartype
def parse_specifier(specifier: str) -> semantic_version.NpmSpec:
    """Parse an npm-style version range ("5.2.4", "5.2", "^5.1", "5.2.x", ">=4 <5").

    Unlike npm, pre-release and build tags are rejected: every catalog entry is
    a plain release.
    """
    expression = specifier.strip()
    if _TAGGED_VERSION.search(expression):
        raise swiftup.errors.InvalidSpecifierError.make(specifier)
    try:
        return semantic_version.NpmSpec(expression)
    except (ValueError, AttributeError):
        # Malformed hyphen ranges ("1 - ^") surface as AttributeError.
        raise swiftup.errors.InvalidSpecifierError.make(specifier) from None


@beartype.beartype
def format_range(clause: tp.Any) -> str:
    """Render a parsed range as comparators, e.g. ">=5.2.0 <5.3.0"."""
    base = semantic_version.base
    if isinstance(clause, base.AnyOf):
        return " || ".join(sorted(format_range(sub) for sub in clause.clauses))
    if isinstance(clause, base.AllOf):
        subs = sorted(clause.clauses, key=_range_sort_key)
        return " ".join(format_range(sub) for sub in subs)
    if isinstance(clause, base.Range):
        return f"{clause.operator}{clause.target}"
    if isinstance(clause, base.Always):
        return "*"
    if isinstance(clause, base.Never):
        return "<0.0.0"
    return str(clause)


def _range_sort_key(clause: tp.Any) -> tuple:
    if isinstance(clause, semantic_version.base.Range):
        return (0, clause.target, clause.operator)
    return (1, format_range(clause))


@beartype.beartype
def select_highest(
    versions: collections.abc.Iterable[semantic_version.Version],
    spec: semantic_version.NpmSpec,
) -> semantic_version.Version | None:
    """Return the greatest version satisfying spec, or None."""
    return max((version for version in versions if spec.match(version)), default=None)


@beartype.beartype
def format_version(version: semantic_version.Version) -> str:
    """Format a version the way release names spell it: 5.2.0 -> "5.2", 5.2.4 -> "5.2.4"."""
    if version.patch > 0:
        return f"{version.major}.{version.minor}.{version.patch}"
    return f"{version.major}.{version.minor}"


@beartype.beartype
def available_versions(platform: swiftup.platform.Platform) -> tuple[str, ...]:
    """Display forms of every release for the platform, newest first."""
    versions = swiftup.catalog.get_versions(platform.family)
    return tuple(format_version(version) for version in reversed(versions))


@beartype.beartype
def resolve(specifier: str, platform: swiftup.platform.Platform) -> str:
    """Resolve specifier to the highest matching release published for platform.

    Only releases built for platform.family are considered; there is no fallback
    to another family's releases.

    Raises:
        InvalidSpecifierError: specifier is not a valid semver version or range.
        NoMatchingVersionError: no release for the platform satisfies specifier.
    """
    spec = parse_specifier(specifier)
    logger.debug("Resolved range %s", format_range(spec.clause))

    versions = swiftup.catalog.get_versions(platform.family)
    match = select_highest(versions, spec)
    if match is None:
        raise swiftup.errors.NoMatchingVersionError.make(
            specifier, platform.family, available_versions(platform)
        )

    version = format_version(match)
    logger.debug("Found matching version %s", version)
    return version
