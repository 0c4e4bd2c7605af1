"""Codemodel v2 "target" objects."""

from __future__ import annotations

import shlex
from typing import Self

import msgspec

from cmake_file_api.objects.base import NonNegativeInt, ReferenceLoader, ReplyStruct
from cmake_file_api.objects.codemodel_v2.backtrace_graph import BacktraceGraph

_DEFINE_PREFIXES = ("-D", "/D")


class Folder(ReplyStruct, frozen=True):
    """Value of the FOLDER target property."""

    name: str


class TargetPaths(ReplyStruct, frozen=True):
    """Target source and build directories.

    Paths inside the top-level source/build directory are relative to it
    (``.`` for the top level itself); others are absolute.
    """

    source: str = "."
    build: str = "."


class Artifact(ReplyStruct, frozen=True):
    """An artifact on disk meant for consumption by dependents."""

    path: str


class InstallPrefix(ReplyStruct, frozen=True):
    """Value of CMAKE_INSTALL_PREFIX."""

    path: str


class InstallDestination(ReplyStruct, frozen=True):
    """Install destination, absolute or relative to the install prefix."""

    path: str
    backtrace: NonNegativeInt | None = None


class Install(ReplyStruct, frozen=True):
    """Install rule summary for a target."""

    prefix: InstallPrefix
    destinations: tuple[InstallDestination, ...] = ()


class Launcher(ReplyStruct, frozen=True):
    """An emulator or test launcher attached to an executable target."""

    command: str
    launcher_type: str = msgspec.field(default="", name="type")
    arguments: tuple[str, ...] = ()


class CommandFragment(ReplyStruct, frozen=True):
    """Fragment of a link or archive command line in native shell format."""

    fragment: str
    role: str = ""


class Sysroot(ReplyStruct, frozen=True):
    """Absolute sysroot path."""

    path: str


class Link(ReplyStruct, frozen=True):
    """Link step description for executables and shared libraries."""

    language: str
    command_fragments: tuple[CommandFragment, ...] = ()
    lto: bool = False
    sysroot: Sysroot | None = None


class Archive(ReplyStruct, frozen=True):
    """Archive step description for static libraries."""

    command_fragments: tuple[CommandFragment, ...] = ()
    lto: bool = False


class Dependency(ReplyStruct, frozen=True):
    """A target this target depends on, by id."""

    id: str
    backtrace: NonNegativeInt | None = None


class FileSet(ReplyStruct, frozen=True):
    """A target file set (added in codemodel 2.5)."""

    name: str
    type_name: str = msgspec.field(default="", name="type")
    visibility: str = ""
    base_directories: tuple[str, ...] = ()


class Source(ReplyStruct, frozen=True):
    """A source file of a target."""

    path: str
    compile_group_index: NonNegativeInt | None = None
    source_group_index: NonNegativeInt | None = None
    is_generated: bool = False
    file_set_index: NonNegativeInt | None = None
    backtrace: NonNegativeInt | None = None


class SourceGroup(ReplyStruct, frozen=True):
    """Sources grouped by source_group() or by default."""

    name: str
    source_indexes: tuple[NonNegativeInt, ...] = ()


class LanguageStandard(ReplyStruct, frozen=True):
    """Language standard of a compile group (added in codemodel 2.2)."""

    standard: str
    backtraces: tuple[NonNegativeInt, ...] = ()


class CompileCommandFragment(ReplyStruct, frozen=True):
    """Fragment of a compile command line in native shell format."""

    fragment: str
    backtrace: NonNegativeInt | None = None


class Include(ReplyStruct, frozen=True):
    """Include directory of a compile group."""

    path: str
    is_system: bool = False
    backtrace: NonNegativeInt | None = None


class Framework(ReplyStruct, frozen=True):
    """Apple framework directory (added in codemodel 2.6)."""

    path: str
    is_system: bool = False
    backtrace: NonNegativeInt | None = None


class PrecompileHeader(ReplyStruct, frozen=True):
    """Precompiled header of a compile group."""

    header: str
    backtrace: NonNegativeInt | None = None


class Define(ReplyStruct, frozen=True):
    """Preprocessor definition ``<name>[=<value>]``."""

    define: str
    backtrace: NonNegativeInt | None = None


class CompileGroup(ReplyStruct, frozen=True):
    """Sources compiled with the same language and settings."""

    language: str
    source_indexes: tuple[NonNegativeInt, ...] = ()
    language_standard: LanguageStandard | None = None
    compile_command_fragments: tuple[CompileCommandFragment, ...] = ()
    includes: tuple[Include, ...] = ()
    frameworks: tuple[Framework, ...] = ()
    precompile_headers: tuple[PrecompileHeader, ...] = ()
    defines: tuple[Define, ...] = ()
    sysroot: Sysroot | None = None

    def compile_fragments(self) -> list[str]:
        """Split every compile command fragment into single shell words.

        Fragments that are not valid shell syntax are skipped.

        Returns
        -------
        list[str]
            Flags in command-line order.
        """
        words: list[str] = []
        for fragment in self.compile_command_fragments:
            try:
                words.extend(shlex.split(fragment.fragment))
            except ValueError:
                continue
        return words

    def define_values(self) -> list[str]:
        """Return defines from ``defines`` plus ``-D``/``/D`` command fragments."""
        values = [define.define for define in self.defines]
        values.extend(
            flag[2:] for flag in self.compile_fragments() if flag.startswith(_DEFINE_PREFIXES)
        )
        return values

    def flags(self) -> list[str]:
        """Return command-line flags with defines filtered out."""
        return [flag for flag in self.compile_fragments() if not flag.startswith(_DEFINE_PREFIXES)]


class Target(ReplyStruct, frozen=True):
    """A codemodel "target" object, referenced from a configuration.

    Only ``name`` is required so that targets written by older or trimmed
    producers still decode. A source listed as a bare path string is
    normalized to a :class:`Source` during reference resolution.
    """

    name: str
    id: str = ""
    type_name: str = msgspec.field(default="", name="type")
    backtrace: NonNegativeInt | None = None
    folder: Folder | None = None
    paths: TargetPaths = msgspec.field(default_factory=TargetPaths)
    name_on_disk: str | None = None
    artifacts: tuple[Artifact, ...] = ()
    is_generator_provided: bool = False
    install: Install | None = None
    launchers: tuple[Launcher, ...] = ()
    link: Link | None = None
    archive: Archive | None = None
    dependencies: tuple[Dependency, ...] = ()
    file_sets: tuple[FileSet, ...] = ()
    sources: tuple[Source | str, ...] = ()
    source_groups: tuple[SourceGroup, ...] = ()
    compile_groups: tuple[CompileGroup, ...] = ()
    backtrace_graph: BacktraceGraph = msgspec.field(default_factory=BacktraceGraph)

    def resolve_references(self, loader: ReferenceLoader) -> Self:
        """Return the target with bare-string sources normalized."""
        _ = loader
        if all(isinstance(source, Source) for source in self.sources):
            return self
        normalized = tuple(
            Source(path=source) if isinstance(source, str) else source for source in self.sources
        )
        return msgspec.structs.replace(self, sources=normalized)

    def source_paths(self) -> list[str]:
        """Return the path of every source in declaration order."""
        return [source if isinstance(source, str) else source.path for source in self.sources]

    def compile_group_for(self, source: Source) -> CompileGroup | None:
        """Return the compile group a source belongs to, if it is compiled."""
        index = source.compile_group_index
        if index is None or index >= len(self.compile_groups):
            return None
        return self.compile_groups[index]

    def dependency_ids(self) -> list[str]:
        """Return the ids of the targets this target depends on."""
        return [dependency.id for dependency in self.dependencies]


__all__ = [
    "Archive",
    "Artifact",
    "CommandFragment",
    "CompileCommandFragment",
    "CompileGroup",
    "Define",
    "Dependency",
    "FileSet",
    "Folder",
    "Framework",
    "Include",
    "Install",
    "InstallDestination",
    "InstallPrefix",
    "LanguageStandard",
    "Launcher",
    "Link",
    "PrecompileHeader",
    "Source",
    "SourceGroup",
    "Sysroot",
    "Target",
    "TargetPaths",
]
