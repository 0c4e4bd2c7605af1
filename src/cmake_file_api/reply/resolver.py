"""Pick the index entry a typed schema can read."""

from __future__ import annotations

from cmake_file_api.errors import UnsupportedVersionError
from cmake_file_api.objects.base import MajorMinor, ObjectKind, ReplyObject
from cmake_file_api.reply.index import Index, ReplyFileReference


def available_versions(index: Index, kind: ObjectKind | str) -> tuple[MajorMinor, ...]:
    """Return every version the index advertises for ``kind``, in index order."""
    return tuple(entry.version for entry in index.entries_for(kind))


def find_entry(index: Index, kind: ObjectKind | str, major: int) -> ReplyFileReference | None:
    """Return the best entry for ``kind`` at ``major``, or None.

    Minor versions within a major are additive, so the highest minor is
    readable by a schema written for any lower minor of the same major. When
    the same ``(kind, major, minor)`` appears more than once the first listed
    entry is kept.
    """
    best: ReplyFileReference | None = None
    for entry in index.objects:
        if not entry.matches(kind, major):
            continue
        if best is None or entry.version.minor > best.version.minor:
            best = entry
    return best


def resolve(index: Index, kind: ObjectKind | str, major: int) -> ReplyFileReference:
    """Return the entry to read for ``kind`` at major version ``major``.

    Parameters
    ----------
    index
        Parsed index.
    kind
        Requested object kind.
    major
        Major version implemented by the caller's schema.

    Returns
    -------
    ReplyFileReference
        Entry with the highest advertised minor.

    Raises
    ------
    UnsupportedVersionError
        Raised when no entry of ``kind`` has major version ``major``.
    """
    entry = find_entry(index, kind, major)
    if entry is None:
        versions = available_versions(index, kind)
        raise UnsupportedVersionError(
            str(kind), major, [version.as_tuple() for version in versions]
        )
    return entry


def resolve_object(index: Index, object_type: type[ReplyObject]) -> ReplyFileReference:
    """Resolve the entry for a typed object schema."""
    return resolve(index, object_type.KIND, object_type.MAJOR)


__all__ = ["available_versions", "find_entry", "resolve", "resolve_object"]
