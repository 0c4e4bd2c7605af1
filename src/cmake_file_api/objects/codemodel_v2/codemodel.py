"""Codemodel v2: the build system structure as modeled by CMake.

The top-level codemodel file lists one entry per build configuration. Each
configuration names its directories and targets through ``jsonFile``
references; reading a codemodel materializes those references into
``Configuration.directories`` and ``Configuration.targets`` in the same order
as the reference lists.
"""

from __future__ import annotations

from typing import ClassVar, Self

import msgspec

from cmake_file_api.objects.base import (
    NonNegativeInt,
    ObjectKind,
    ReferenceLoader,
    ReplyObject,
    ReplyStruct,
)
from cmake_file_api.objects.codemodel_v2.directory import Directory
from cmake_file_api.objects.codemodel_v2.target import Target


class CodeModelPaths(ReplyStruct, frozen=True):
    """Absolute top-level source and build directories."""

    source: str = ""
    build: str = ""


class MinimumCMakeVersion(ReplyStruct, frozen=True):
    """Version given to the most local cmake_minimum_required() call."""

    version: str = msgspec.field(name="string")


class Project(ReplyStruct, frozen=True):
    """A project() in the build system. The first entry is the top-level project."""

    name: str
    parent_index: NonNegativeInt | None = None
    child_indexes: tuple[NonNegativeInt, ...] = ()
    directory_indexes: tuple[NonNegativeInt, ...] = ()
    target_indexes: tuple[NonNegativeInt, ...] = ()


class DirectoryReference(ReplyStruct, frozen=True):
    """Configuration entry for one build system directory."""

    json_file: str
    source: str = "."
    build: str = "."
    parent_index: NonNegativeInt | None = None
    child_indexes: tuple[NonNegativeInt, ...] = ()
    project_index: NonNegativeInt = 0
    target_indexes: tuple[NonNegativeInt, ...] = ()
    minimum_cmake_version: MinimumCMakeVersion | None = msgspec.field(
        default=None, name="minimumCMakeVersion"
    )
    has_install_rule: bool = False


class TargetReference(ReplyStruct, frozen=True):
    """Configuration entry for one build system target."""

    json_file: str
    name: str = ""
    id: str = ""
    directory_index: NonNegativeInt = 0
    project_index: NonNegativeInt = 0


class Configuration(ReplyStruct, frozen=True):
    """One build configuration, e.g. ``Debug``.

    ``directory_refs`` and ``target_refs`` hold the entries as written in the
    codemodel file (JSON keys ``directories`` and ``targets``). ``directories``
    and ``targets`` hold the objects those entries point to, position for
    position.
    """

    name: str = ""
    projects: tuple[Project, ...] = ()
    directory_refs: tuple[DirectoryReference, ...] = msgspec.field(
        default=(), name="directories"
    )
    target_refs: tuple[TargetReference, ...] = msgspec.field(default=(), name="targets")
    directories: tuple[Directory, ...] = msgspec.field(default=(), name="resolvedDirectories")
    targets: tuple[Target, ...] = msgspec.field(default=(), name="resolvedTargets")

    def resolve_references(self, loader: ReferenceLoader) -> Self:
        """Load every referenced directory and target file."""
        directories = tuple(loader.load(ref.json_file, Directory) for ref in self.directory_refs)
        targets = tuple(loader.load(ref.json_file, Target) for ref in self.target_refs)
        return msgspec.structs.replace(self, directories=directories, targets=targets)

    def target_by_name(self, name: str) -> Target | None:
        """Return the first resolved target called ``name``."""
        return next((target for target in self.targets if target.name == name), None)

    def target_by_id(self, target_id: str) -> Target | None:
        """Return the resolved target with id ``target_id``."""
        return next((target for target in self.targets if target.id == target_id), None)


class CodeModel(ReplyObject, frozen=True):
    """The ``codemodel`` object, major version 2."""

    KIND: ClassVar[ObjectKind] = ObjectKind.CODEMODEL
    MAJOR: ClassVar[int] = 2

    paths: CodeModelPaths = msgspec.field(default_factory=CodeModelPaths)
    configurations: tuple[Configuration, ...] = ()

    def resolve_references(self, loader: ReferenceLoader) -> Self:
        """Resolve the directories and targets of every configuration."""
        configurations = tuple(config.resolve_references(loader) for config in self.configurations)
        return msgspec.structs.replace(self, configurations=configurations)

    def configuration(self, name: str) -> Configuration | None:
        """Return the configuration called ``name``."""
        return next((config for config in self.configurations if config.name == name), None)


__all__ = [
    "CodeModel",
    "CodeModelPaths",
    "Configuration",
    "DirectoryReference",
    "MinimumCMakeVersion",
    "Project",
    "TargetReference",
]
