"""Download URL and archive name for a release on a platform."""

import dataclasses

import beartype

import swiftup.errors
import swiftup.platform

_BUILDS_BASE = "https://swift.org/builds"


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class PackageDescriptor:
    """Where to download a release archive and what it is called."""

    url: str
    """Fully qualified download URL."""

    name: str
    """Archive base name, without extension."""

    @property
    def filename(self) -> str:
        """Archive file name including extension."""
        return self.url.rsplit("/", maxsplit=1)[-1]


@beartype.beartype
def build_descriptor(
    version: str, platform: swiftup.platform.Platform
) -> PackageDescriptor:
    """Build the descriptor for version on platform.

    version is used verbatim; it is not checked against the catalog.
    """
    if platform.family == swiftup.platform.MACOS:
        segment = "xcode"
        name = f"swift-{version}-RELEASE-osx"
        ext = ".pkg"
    elif platform.family == swiftup.platform.UBUNTU:
        segment = f"ubuntu{platform.variant_digits}"
        name = f"swift-{version}-RELEASE-ubuntu{platform.variant}"
        ext = ".tar.gz"
    else:
        raise swiftup.errors.UnsupportedPlatformError.make(platform.family)

    url = (
        f"{_BUILDS_BASE}/swift-{version}-release/{segment}"
        f"/swift-{version}-RELEASE/{name}{ext}"
    )
    return PackageDescriptor(url=url, name=name)
