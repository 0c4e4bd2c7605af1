"""Codemodel v2 "directory" objects."""

from __future__ import annotations

import msgspec

from cmake_file_api.objects.base import NonNegativeInt, ReplyStruct
from cmake_file_api.objects.codemodel_v2.backtrace_graph import BacktraceGraph


class DirectoryPaths(ReplyStruct, frozen=True):
    """Source and build directory of a build system directory."""

    source: str = "."
    build: str = "."


class InstallPath(ReplyStruct, frozen=True):
    """Path installed by an installer, either plain or with a renamed destination."""

    from_path: str = msgspec.field(default="", name="from")
    to_path: str | None = msgspec.field(default=None, name="to")


class TargetIdAndIndex(ReplyStruct, frozen=True):
    """A target referenced by id and by index into the configuration's targets."""

    id: str
    index: NonNegativeInt


class Installer(ReplyStruct, frozen=True):
    """One install() rule of a directory."""

    component: str
    installer_type: str = msgspec.field(default="", name="type")
    destination: str | None = None
    paths: tuple[InstallPath | str, ...] = ()
    is_exclude_from_all: bool = False
    is_for_all_components: bool = False
    is_optional: bool = False
    target_id: str | None = None
    target_index: NonNegativeInt | None = None
    target_is_import_library: bool = False
    target_install_namelink: str | None = None
    export_name: str | None = None
    export_targets: tuple[TargetIdAndIndex, ...] = ()
    runtime_dependency_set_name: str | None = None
    runtime_dependency_set_type: str | None = None
    file_set_name: str | None = None
    file_set_type: str | None = None
    file_set_directories: tuple[str, ...] = ()
    file_set_target: TargetIdAndIndex | None = None
    script_file: str | None = None
    cxx_module_bmi_target: TargetIdAndIndex | None = None
    backtrace: NonNegativeInt | None = None


class Directory(ReplyStruct, frozen=True):
    """A codemodel "directory" object, referenced from a configuration."""

    paths: DirectoryPaths = msgspec.field(default_factory=DirectoryPaths)
    installers: tuple[Installer, ...] = ()
    backtrace_graph: BacktraceGraph = msgspec.field(default_factory=BacktraceGraph)


__all__ = [
    "Directory",
    "DirectoryPaths",
    "InstallPath",
    "Installer",
    "TargetIdAndIndex",
]
