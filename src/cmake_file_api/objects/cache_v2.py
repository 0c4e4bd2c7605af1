"""Cache v2: entries of the persistent CMakeCache.txt."""

from __future__ import annotations

from typing import ClassVar

import msgspec

from cmake_file_api.objects.base import ObjectKind, ReplyObject, ReplyStruct


class CacheProperty(ReplyStruct, frozen=True):
    """A cache entry property such as HELPSTRING or ADVANCED."""

    name: str
    value: str


class CacheEntry(ReplyStruct, frozen=True):
    """One cache variable."""

    name: str
    value: str
    type_name: str = msgspec.field(name="type")
    properties: tuple[CacheProperty, ...] = ()

    def property_value(self, name: str) -> str | None:
        """Return the value of property ``name``, if set."""
        return next((prop.value for prop in self.properties if prop.name == name), None)


class Cache(ReplyObject, frozen=True):
    """The ``cache`` object, major version 2."""

    KIND: ClassVar[ObjectKind] = ObjectKind.CACHE
    MAJOR: ClassVar[int] = 2

    entries: tuple[CacheEntry, ...] = ()

    def entry(self, name: str) -> CacheEntry | None:
        """Return the cache entry called ``name``."""
        return next((entry for entry in self.entries if entry.name == name), None)


__all__ = ["Cache", "CacheEntry", "CacheProperty"]
