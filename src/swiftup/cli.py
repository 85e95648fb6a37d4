"""CLI definition using tyro."""

import dataclasses
import json
import logging
import os
import sys
import typing as tp

import beartype
import tyro

import swiftup.descriptor
import swiftup.errors
import swiftup.platform
import swiftup.versions


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class Resolve:
    """Print the release a version specifier resolves to."""

    version: str
    """Version or semver range, e.g. 5.2, 5.2.4, ^5.1."""

    os: str | None = None
    """OS family (macos, ubuntu). Defaults to $SWIFTUP_OS."""

    os_version: str | None = None
    """OS release, required for ubuntu. Defaults to $SWIFTUP_OS_VERSION."""

    verbose: bool = False
    """Show debug output."""


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class Url:
    """Resolve a version and print its download URL and archive name."""

    version: str
    """Version or semver range, e.g. 5.2, 5.2.4, ^5.1."""

    os: str | None = None
    """OS family (macos, ubuntu). Defaults to $SWIFTUP_OS."""

    os_version: str | None = None
    """OS release, required for ubuntu. Defaults to $SWIFTUP_OS_VERSION."""

    as_json: tp.Annotated[bool, tyro.conf.arg(name="json")] = False
    """Print a JSON object instead of plain lines."""

    verbose: bool = False
    """Show debug output."""


@beartype.beartype
@dataclasses.dataclass(frozen=True)
class List:
    """Show known releases for a platform, newest first."""

    os: str | None = None
    """OS family (macos, ubuntu). Defaults to $SWIFTUP_OS."""

    os_version: str | None = None
    """OS release, required for ubuntu. Defaults to $SWIFTUP_OS_VERSION."""

    verbose: bool = False
    """Show debug output."""


@beartype.beartype
def get_platform(
    os_name: str | None, os_version: str | None
) -> swiftup.platform.Platform:
    """Build the target platform from flags, falling back to the environment."""
    if os_name is None:
        os_name = os.environ.get("SWIFTUP_OS")
    if not os_name:
        raise swiftup.errors.SwiftupError(
            message="No target OS given.",
            hint="Pass --os (macos or ubuntu) or set SWIFTUP_OS.",
        )
    family = swiftup.platform.normalize_family(os_name)
    # SWIFTUP_OS_VERSION is ignored for macos; an explicit --os-version is not.
    if os_version is None and family != swiftup.platform.MACOS:
        os_version = os.environ.get("SWIFTUP_OS_VERSION") or None
    return swiftup.platform.Platform(family=family, variant=os_version)


@beartype.beartype
def run_resolve(cmd: Resolve) -> None:
    """Run the resolve command."""
    platform = get_platform(cmd.os, cmd.os_version)
    print(swiftup.versions.resolve(cmd.version, platform))


@beartype.beartype
def run_url(cmd: Url) -> None:
    """Run the url command."""
    platform = get_platform(cmd.os, cmd.os_version)
    version = swiftup.versions.resolve(cmd.version, platform)
    package = swiftup.descriptor.build_descriptor(version, platform)

    if cmd.as_json:
        print(
            json.dumps({"version": version, "name": package.name, "url": package.url})
        )
        return

    print(f"version: {version}")
    print(f"name: {package.name}")
    print(f"url: {package.url}")


@beartype.beartype
def run_list(cmd: List) -> None:
    """Run the list command."""
    platform = get_platform(cmd.os, cmd.os_version)
    versions = swiftup.versions.available_versions(platform)
    if not versions:
        print(f"No releases for {platform.family}.")
        return

    for version in versions:
        print(version)


@beartype.beartype
def _setup_logging(verbose: bool) -> None:
    """Send log records to stderr; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@beartype.beartype
def main() -> None:
    """Main entry point."""
    command = tyro.cli(Resolve | Url | List)  # type: ignore[arg-type]
    _setup_logging(command.verbose)

    try:
        match command:
            case Resolve() as cmd:
                run_resolve(cmd)
            case Url() as cmd:
                run_url(cmd)
            case List() as cmd:
                run_list(cmd)
    except swiftup.errors.SwiftupError as err:
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(1)
