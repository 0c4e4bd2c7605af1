"""Report the package version and the reply object kinds it can read."""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

from cmake_file_api.objects import OBJECT_TYPES
from cmake_file_api.serde_msgspec import StructBaseStrict, dumps_json

PACKAGE_NAME = "cmake-file-api"
DEV_VERSION = "0.0.0-dev"


class SupportedKind(StructBaseStrict, frozen=True):
    """One object kind the reader decodes."""

    kind: str
    major: int
    query_file: str


class VersionReport(StructBaseStrict, frozen=True):
    """Payload printed by ``cmake-file-api version``."""

    version: str
    python: str
    object_kinds: tuple[SupportedKind, ...]
    msgspec: str | None = None


def get_version() -> str:
    """Return the installed package version, or a dev marker when not installed."""
    try:
        return pkg_version(PACKAGE_NAME)
    except PackageNotFoundError:
        return DEV_VERSION


def supported_kinds() -> tuple[SupportedKind, ...]:
    """Return the kinds this build reads, with their stateless query file names."""
    return tuple(
        SupportedKind(
            kind=object_type.KIND.value,
            major=object_type.MAJOR,
            query_file=object_type.query_name(),
        )
        for object_type in OBJECT_TYPES
    )


def version_report() -> VersionReport:
    try:
        msgspec_version = pkg_version("msgspec")
    except PackageNotFoundError:
        msgspec_version = None
    return VersionReport(
        version=get_version(),
        python=sys.version.split()[0],
        object_kinds=supported_kinds(),
        msgspec=msgspec_version,
    )


def version_command() -> int:
    """Print the version report as JSON.

    Returns
    -------
    int
        Exit status code.
    """
    sys.stdout.write(dumps_json(version_report(), pretty=True).decode("utf-8") + "\n")
    return 0


__all__ = ["SupportedKind", "VersionReport", "get_version", "supported_kinds", "version_command"]
