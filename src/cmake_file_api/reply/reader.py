"""Read typed reply objects from a build tree.

Reading an object runs locate -> parse index -> resolve version -> decode
the object file -> resolve embedded references. Every reference path is
joined onto the reply directory, never the working directory, and each
reference is read afresh. Any failure aborts the read; no partial graph is
returned.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import msgspec

from cmake_file_api.errors import MalformedIndexError, MalformedObjectError
from cmake_file_api.objects.base import ReplyObject, ReplyStruct
from cmake_file_api.paths import reply_dir
from cmake_file_api.reply.index import Index, ReplyFileReference, load_index, read_index_bytes
from cmake_file_api.reply.locator import locate_index
from cmake_file_api.reply.resolver import find_entry, resolve_object
from cmake_file_api.serde_msgspec import describe_decode_error, loads_json, loads_json_builtins

logger = logging.getLogger(__name__)


class ReplyFileLoader:
    """Load reply files relative to one reply directory.

    Decoded structs get the chance to resolve their own references through
    this loader, so nested files are read recursively as the schema dictates.
    """

    def __init__(self, reply_directory: Path) -> None:
        self._reply_dir = reply_directory

    @property
    def reply_dir(self) -> Path:
        """Return the directory reference paths are relative to."""
        return self._reply_dir

    def path_for(self, json_file: str) -> Path:
        """Return the on-disk path of a reply-relative reference."""
        return self._reply_dir / json_file

    def read_bytes(self, json_file: str) -> bytes:
        """Read the raw contents of a referenced file."""
        path = self.path_for(json_file)
        logger.debug("Reading reply file %s", path)
        return read_index_bytes(path)

    def load[T](self, json_file: str, target_type: type[T]) -> T:
        """Read, decode, and resolve the file at ``json_file``.

        Parameters
        ----------
        json_file
            Path relative to the reply directory.
        target_type
            Schema to decode into.

        Returns
        -------
        T
            Decoded value with references resolved.

        Raises
        ------
        MalformedObjectError
            Raised when the contents do not match ``target_type``.
        """
        payload = self.read_bytes(json_file)
        path = self.path_for(json_file)
        try:
            value = loads_json(payload, target_type=target_type)
        except msgspec.DecodeError as exc:
            msg = (
                f"Malformed reply file {path} for {target_type.__name__}: "
                f"{describe_decode_error(exc)}"
            )
            raise MalformedObjectError(msg, path=path) from exc
        if isinstance(value, ReplyStruct):
            return value.resolve_references(self)
        return value


class Reader:
    """Reader for one build tree's replies.

    The index is located and parsed once, when the reader is created, and is
    reused by every read on the instance. Create a new reader (or use the
    module-level :func:`read_object`) to pick up a newer CMake run.
    """

    def __init__(self, build_dir: Path | str, index: Index, *, index_path: Path) -> None:
        self._build_dir = Path(build_dir)
        self._index = index
        self._index_path = index_path
        self._loader = ReplyFileLoader(reply_dir(self._build_dir))

    @classmethod
    def from_build_dir(cls, build_dir: Path | str) -> Reader:
        """Create a reader from a build directory.

        Raises
        ------
        ReplyNotFoundError
            Raised when CMake has not written a reply index.
        MalformedIndexError
            Raised when the index cannot be parsed.
        ReplyIoError
            Raised when the index cannot be read.
        """
        index_path = locate_index(build_dir)
        index = load_index(index_path)
        return cls(build_dir, index, index_path=index_path)

    @property
    def build_dir(self) -> Path:
        """Return the build directory."""
        return self._build_dir

    @property
    def reply_dir(self) -> Path:
        """Return the reply directory."""
        return self._loader.reply_dir

    @property
    def index(self) -> Index:
        """Return the parsed index."""
        return self._index

    @property
    def index_path(self) -> Path:
        """Return the path of the index file this reader parsed."""
        return self._index_path

    def has_object(self, object_type: type[ReplyObject]) -> bool:
        """Return True when the index serves ``object_type``'s kind and major."""
        return find_entry(self._index, object_type.KIND, object_type.MAJOR) is not None

    def entry_for(self, object_type: type[ReplyObject]) -> ReplyFileReference:
        """Return the index entry :meth:`read_object` would read."""
        return resolve_object(self._index, object_type)

    def read_object[T: ReplyObject](self, object_type: type[T]) -> T:
        """Read a fully materialized object.

        Parameters
        ----------
        object_type
            Schema to read, e.g. ``CodeModelV2``.

        Returns
        -------
        T
            Object with every reference resolved. ``kind`` and ``version`` are
            taken from the index entry when the file omits them.

        Raises
        ------
        UnsupportedVersionError
            Raised when the index has no entry of the schema's major version.
        ReplyNotFoundError
            Raised when the object file or a file it references is missing.
        MalformedObjectError
            Raised when a file does not match its schema.
        ReplyIoError
            Raised for other filesystem failures.
        """
        entry = resolve_object(self._index, object_type)
        logger.debug(
            "Resolved %s to version %s in %s", object_type.KIND.value, entry.version, entry.json_file
        )
        value = self._loader.load(entry.json_file, object_type)
        return _stamp_entry(value, entry)

    def read_reply_file[T](self, json_file: str, target_type: type[T]) -> T:
        """Read any reply-relative file into ``target_type``."""
        return self._loader.load(json_file, target_type)

    def read_raw_index(self) -> dict[str, Any]:
        """Return the active index file decoded into builtin values.

        Raises
        ------
        MalformedIndexError
            Raised when the file is not a JSON object.
        """
        payload = read_index_bytes(self._index_path)
        try:
            document = loads_json_builtins(payload)
        except msgspec.DecodeError as exc:
            msg = f"Malformed index file {self._index_path}: {describe_decode_error(exc)}"
            raise MalformedIndexError(msg, path=self._index_path) from exc
        if not isinstance(document, dict):
            msg = f"Malformed index file {self._index_path}: expected a JSON object."
            raise MalformedIndexError(msg, path=self._index_path)
        return document


def _stamp_entry[T: ReplyObject](value: T, entry: ReplyFileReference) -> T:
    updates: dict[str, object] = {}
    if value.kind is None:
        updates["kind"] = entry.kind
    if value.version is None:
        updates["version"] = entry.version
    if not updates:
        return value
    return msgspec.structs.replace(value, **updates)


def read_index(build_dir: Path | str) -> Index:
    """Locate and parse the active index of a build tree."""
    return load_index(locate_index(build_dir))


def read_object[T: ReplyObject](build_dir: Path | str, object_type: type[T]) -> T:
    """Read one object with a fresh index lookup.

    Nothing is cached between calls, so consecutive calls may observe
    different CMake runs. Use a :class:`Reader` to read several objects from
    the same index.
    """
    return Reader.from_build_dir(build_dir).read_object(object_type)


__all__ = ["Reader", "ReplyFileLoader", "read_index", "read_object"]
