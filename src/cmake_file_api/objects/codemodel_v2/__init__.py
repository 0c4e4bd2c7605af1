"""Codemodel object kind, major version 2."""

from .backtrace_graph import BacktraceGraph, BacktraceNode
from .codemodel import (
    CodeModel,
    CodeModelPaths,
    Configuration,
    DirectoryReference,
    MinimumCMakeVersion,
    Project,
    TargetReference,
)
from .directory import Directory, DirectoryPaths, InstallPath, Installer, TargetIdAndIndex
from .target import (
    Archive,
    Artifact,
    CommandFragment,
    CompileCommandFragment,
    CompileGroup,
    Define,
    Dependency,
    FileSet,
    Folder,
    Framework,
    Include,
    Install,
    InstallDestination,
    InstallPrefix,
    LanguageStandard,
    Launcher,
    Link,
    PrecompileHeader,
    Source,
    SourceGroup,
    Sysroot,
    Target,
    TargetPaths,
)

__all__ = [
    "Archive",
    "Artifact",
    "BacktraceGraph",
    "BacktraceNode",
    "CodeModel",
    "CodeModelPaths",
    "CommandFragment",
    "CompileCommandFragment",
    "CompileGroup",
    "Configuration",
    "Define",
    "Dependency",
    "Directory",
    "DirectoryPaths",
    "DirectoryReference",
    "FileSet",
    "Folder",
    "Framework",
    "Include",
    "Install",
    "InstallDestination",
    "InstallPath",
    "InstallPrefix",
    "Installer",
    "LanguageStandard",
    "Launcher",
    "Link",
    "MinimumCMakeVersion",
    "PrecompileHeader",
    "Project",
    "Source",
    "SourceGroup",
    "Sysroot",
    "Target",
    "TargetIdAndIndex",
    "TargetPaths",
    "TargetReference",
]
