"""Static catalog of published Swift releases and the platforms they were built for.

Adding a release is a data-only change: append a row to _RELEASES.
"""

import dataclasses

import beartype
import semantic_version

import swiftup.platform

_BOTH = (swiftup.platform.MACOS, swiftup.platform.UBUNTU)
_UBUNTU = (swiftup.platform.UBUNTU,)

_RELEASES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("5.3", _BOTH),
    ("5.2.5", _UBUNTU),
    ("5.2.4", _BOTH),
    ("5.2.3", _UBUNTU),
    ("5.2.2", _BOTH),
    ("5.2.1", _UBUNTU),
    ("5.2", _BOTH),
    ("5.1.5", _UBUNTU),
    ("5.1.4", _UBUNTU),
    ("5.1.3", _BOTH),
    ("5.1.2", _BOTH),
    ("5.1.1", _UBUNTU),
    ("5.1", _BOTH),
    ("5.0.3", _UBUNTU),
    ("5.0.2", _UBUNTU),
    ("5.0.1", _BOTH),
    ("5.0", _BOTH),
    ("4.2.4", _UBUNTU),
    ("4.2.3", _UBUNTU),
    ("4.2.2", _UBUNTU),
    ("4.2.1", _BOTH),
    ("4.2", _BOTH),
    ("4.1.3", _UBUNTU),
    ("4.1.2", _BOTH),
    ("4.1.1", _UBUNTU),
    ("4.1", _BOTH),
    ("4.0.3", _BOTH),
    ("4.0.2", _BOTH),
    ("4.0", _BOTH),
    ("3.1.1", _BOTH),
    ("3.1", _BOTH),
    ("3.0.2", _BOTH),
    ("3.0.1", _BOTH),
    ("3.0", _BOTH),
    ("2.2.1", _BOTH),
    ("2.2", _BOTH),
)


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class CatalogEntry:
    """A published release."""

    version: semantic_version.Version
    """Release version; a missing patch component is 0."""

    families: frozenset[str]
    """Platform families the release was published for."""


@beartype.beartype
def _build_catalog(
    rows: tuple[tuple[str, tuple[str, ...]], ...],
) -> tuple[CatalogEntry, ...]:
    """Coerce raw rows into entries, rejecting duplicates and empty platform sets."""
    entries = []
    seen: set[semantic_version.Version] = set()
    for version_str, families in rows:
        version = semantic_version.Version.coerce(version_str)
        if version in seen:
            raise ValueError(f"Duplicate catalog version: {version_str}")
        if not families:
            raise ValueError(f"Catalog version {version_str} has no platforms")
        seen.add(version)
        entries.append(CatalogEntry(version=version, families=frozenset(families)))
    return tuple(entries)


_CATALOG = _build_catalog(_RELEASES)


@beartype.beartype
def get_entries() -> tuple[CatalogEntry, ...]:
    """Get every catalog entry, in table order."""
    return _CATALOG


@beartype.beartype
def get_versions(family: str) -> tuple[semantic_version.Version, ...]:
    """Get versions published for a platform family, ascending."""
    return tuple(
        sorted(entry.version for entry in _CATALOG if family in entry.families)
    )
