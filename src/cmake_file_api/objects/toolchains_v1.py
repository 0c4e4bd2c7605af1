"""Toolchains v1: compilers and implicit settings per enabled language."""

from __future__ import annotations

from typing import ClassVar

import msgspec

from cmake_file_api.objects.base import ObjectKind, ReplyObject, ReplyStruct


class CompilerImplicit(ReplyStruct, frozen=True):
    """Values of the ``CMAKE_<LANG>_IMPLICIT_*`` variables."""

    include_directories: tuple[str, ...] = ()
    link_directories: tuple[str, ...] = ()
    link_framework_directories: tuple[str, ...] = ()
    link_libraries: tuple[str, ...] = ()


class Compiler(ReplyStruct, frozen=True):
    """Compiler of one language."""

    path: str | None = None
    id: str | None = None
    version: str | None = None
    target: str | None = None
    implicit: CompilerImplicit = msgspec.field(default_factory=CompilerImplicit)


class Toolchain(ReplyStruct, frozen=True):
    """Toolchain for one language, e.g. ``C`` or ``CXX``."""

    language: str
    compiler: Compiler = msgspec.field(default_factory=Compiler)
    source_file_extensions: tuple[str, ...] = ()


class Toolchains(ReplyObject, frozen=True):
    """The ``toolchains`` object, major version 1."""

    KIND: ClassVar[ObjectKind] = ObjectKind.TOOLCHAINS
    MAJOR: ClassVar[int] = 1

    toolchains: tuple[Toolchain, ...] = ()

    def for_language(self, language: str) -> Toolchain | None:
        """Return the toolchain for ``language``."""
        return next((item for item in self.toolchains if item.language == language), None)


__all__ = ["Compiler", "CompilerImplicit", "Toolchain", "Toolchains"]
