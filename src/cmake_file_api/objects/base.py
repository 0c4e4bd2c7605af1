"""Shared building blocks for reply object schemas."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, ClassVar, Protocol, Self

import msgspec

from cmake_file_api.serde_msgspec import StructBaseCompat

NonNegativeInt = Annotated[int, msgspec.Meta(ge=0)]


class ObjectKind(StrEnum):
    """Object kinds served by the file API."""

    CODEMODEL = "codemodel"
    CONFIGURE_LOG = "configureLog"
    CACHE = "cache"
    CMAKE_FILES = "cmakeFiles"
    TOOLCHAINS = "toolchains"


class ReferenceLoader(Protocol):
    """Reads a reply file named by a reply-relative path into a typed value."""

    def load[T](self, json_file: str, target_type: type[T]) -> T:
        """Read, decode, and resolve the file at ``json_file``."""
        ...


class ReplyStruct(StructBaseCompat, frozen=True, rename="camel"):
    """Base struct for reply payloads: camelCase keys, unknown keys ignored."""

    def resolve_references(self, loader: ReferenceLoader) -> Self:
        """Return a copy with every embedded reference materialized.

        Structs without references return themselves unchanged.
        """
        _ = loader
        return self


class MajorMinor(ReplyStruct, frozen=True):
    """Object version. Minor bumps within a major are additive."""

    major: NonNegativeInt
    minor: NonNegativeInt

    def as_tuple(self) -> tuple[int, int]:
        """Return ``(major, minor)``."""
        return (self.major, self.minor)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


class ReplyObject(ReplyStruct, frozen=True):
    """Top-level reply object of one kind at one major version.

    ``KIND`` and ``MAJOR`` name the schema a subclass implements. ``kind`` and
    ``version`` mirror the members CMake writes into every object file; the
    reader fills them from the index entry when a file omits them.
    """

    KIND: ClassVar[ObjectKind]
    MAJOR: ClassVar[int]

    kind: str | None = None
    version: MajorMinor | None = None

    @classmethod
    def query_name(cls) -> str:
        """Return the stateless query file name, e.g. ``codemodel-v2``."""
        return f"{cls.KIND.value}-v{cls.MAJOR}"


__all__ = [
    "MajorMinor",
    "NonNegativeInt",
    "ObjectKind",
    "ReferenceLoader",
    "ReplyObject",
    "ReplyStruct",
]
