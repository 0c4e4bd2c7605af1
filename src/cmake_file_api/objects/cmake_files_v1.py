"""CMakeFiles v1: files read by CMake while configuring and generating."""

from __future__ import annotations

from typing import ClassVar

import msgspec

from cmake_file_api.objects.base import ObjectKind, ReplyObject, ReplyStruct


class CMakeFilesPaths(ReplyStruct, frozen=True):
    """Absolute top-level source and build directories."""

    source: str = ""
    build: str = ""


class CMakeFilesInput(ReplyStruct, frozen=True):
    """An input file, relative to the top-level source directory when inside it."""

    path: str
    is_generated: bool = False
    is_external: bool = False
    is_cmake: bool = msgspec.field(default=False, name="isCMake")


class GlobDependent(ReplyStruct, frozen=True):
    """A file(GLOB) call whose result the build system re-checks (added in 1.1)."""

    expression: str
    paths: tuple[str, ...] = ()
    recurse: bool = False
    list_directories: bool = False
    follow_symlinks: bool = False
    relative: str | None = None


class CMakeFiles(ReplyObject, frozen=True):
    """The ``cmakeFiles`` object, major version 1."""

    KIND: ClassVar[ObjectKind] = ObjectKind.CMAKE_FILES
    MAJOR: ClassVar[int] = 1

    paths: CMakeFilesPaths = msgspec.field(default_factory=CMakeFilesPaths)
    inputs: tuple[CMakeFilesInput, ...] = ()
    globs_dependent: tuple[GlobDependent, ...] = ()

    def project_inputs(self) -> list[CMakeFilesInput]:
        """Return inputs that belong to the project rather than CMake or externals."""
        return [
            item
            for item in self.inputs
            if not (item.is_cmake or item.is_external or item.is_generated)
        ]


__all__ = ["CMakeFiles", "CMakeFilesInput", "CMakeFilesPaths", "GlobDependent"]
