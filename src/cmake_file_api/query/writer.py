"""Write query descriptors that tell CMake which reply objects to generate."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Self

import msgspec

from cmake_file_api.errors import ClientNameNotSetError, QueryIoError, QueryWriteError
from cmake_file_api.objects import OBJECT_TYPES, ReplyObject
from cmake_file_api.paths import client_dirname, query_dir
from cmake_file_api.serde_msgspec import (
    StructBaseStrict,
    describe_decode_error,
    dumps_json,
    ensure_raw,
    loads_json_builtins,
)

logger = logging.getLogger(__name__)

QUERY_FILENAME = "query.json"


class _OptionalVersion(StructBaseStrict, frozen=True):
    major: int
    minor: int | None = None


class _Request(StructBaseStrict, frozen=True):
    kind: str
    version: _OptionalVersion


class _Query(StructBaseStrict, frozen=True):
    requests: tuple[_Request, ...] = ()
    client: msgspec.Raw | None = None


def encode_client_data(data: object) -> msgspec.Raw:
    """Encode stateful client data into raw JSON.

    ``bytes`` and ``msgspec.Raw`` are treated as already-encoded JSON and are
    embedded verbatim after a syntax check. Any other value, ``str`` included,
    is encoded as a JSON value.

    Raises
    ------
    QueryWriteError
        Raised when the data is not valid JSON or cannot be encoded.
    """
    if isinstance(data, (bytes, bytearray, msgspec.Raw)):
        raw = ensure_raw(bytes(data) if isinstance(data, bytearray) else data, copy=True)
        try:
            loads_json_builtins(raw)
        except msgspec.DecodeError as exc:
            msg = f"Client data is not valid JSON: {describe_decode_error(exc)}"
            raise QueryWriteError(msg) from exc
        return raw
    try:
        return msgspec.Raw(dumps_json(data))
    except (TypeError, msgspec.EncodeError) as exc:
        msg = f"Client data cannot be encoded as JSON: {exc}"
        raise QueryWriteError(msg) from exc


class Writer:
    """Builder for stateless and stateful queries.

    Builder methods return the writer so calls can be chained::

        Writer().request_object(CodeModelV2).write_stateless(build_dir)
    """

    def __init__(self) -> None:
        self._requests: list[_Request] = []
        self._client_name: str | None = None
        self._client_data: msgspec.Raw | None = None

    @property
    def client_name(self) -> str | None:
        """Return the stateful client name, if set."""
        return self._client_name

    @property
    def requests(self) -> tuple[tuple[str, int, int | None], ...]:
        """Return ``(kind, major, minor)`` for each request, in order."""
        return tuple(
            (request.kind, request.version.major, request.version.minor)
            for request in self._requests
        )

    def _add(self, object_type: type[ReplyObject], minor: int | None) -> Self:
        request = _Request(
            kind=object_type.KIND.value,
            version=_OptionalVersion(major=object_type.MAJOR, minor=minor),
        )
        if request not in self._requests:
            self._requests.append(request)
        return self

    def request_object(self, object_type: type[ReplyObject]) -> Self:
        """Request ``object_type`` at its major version."""
        return self._add(object_type, None)

    def request_exact(self, object_type: type[ReplyObject], minor: int) -> Self:
        """Request ``object_type`` at its major version and a specific minor.

        The minor version is only honored by stateful queries; stateless query
        file names carry the major version alone.
        """
        if minor < 0:
            msg = f"Minor version must be non-negative, got {minor}."
            raise ValueError(msg)
        return self._add(object_type, minor)

    def request_all_objects(self) -> Self:
        """Request every object kind this library can read."""
        for object_type in OBJECT_TYPES:
            self.request_object(object_type)
        return self

    def set_client(self, client_name: str, client_data: object = None) -> Self:
        """Set the stateful client name and the data CMake echoes back.

        Parameters
        ----------
        client_name
            Client identifier; the ``client-`` prefix is added when missing.
        client_data
            Opaque JSON-compatible value, or pre-encoded JSON bytes.
        """
        if not client_name or client_name == client_dirname(""):
            msg = "Client name must not be empty."
            raise ClientNameNotSetError(msg)
        self._client_name = client_name
        self._client_data = None if client_data is None else encode_client_data(client_data)
        return self

    def write_stateless(self, build_dir: Path | str) -> list[Path]:
        """Write one empty ``<kind>-v<major>`` file per request.

        Writing is idempotent: existing query files are left in place.

        Returns
        -------
        list[Path]
            Query files, in request order.

        Raises
        ------
        QueryIoError
            Raised when the query directory or a query file cannot be written.
        """
        directory = query_dir(build_dir)
        _make_dirs(directory)
        written: list[Path] = []
        for request in self._requests:
            path = directory / f"{request.kind}-v{request.version.major}"
            if path in written:
                continue
            try:
                path.touch(exist_ok=True)
            except OSError as exc:
                msg = f"Failed to write query file {path}: {exc}"
                raise QueryIoError(msg) from exc
            logger.debug("Wrote stateless query %s", path)
            written.append(path)
        return written

    def write_stateful(self, build_dir: Path | str, client_data: object = None) -> Path:
        """Write ``client-<name>/query.json`` holding every request.

        Parameters
        ----------
        build_dir
            CMake build directory.
        client_data
            Overrides the data given to :meth:`set_client` when not None.

        Returns
        -------
        Path
            Path of the written ``query.json``.

        Raises
        ------
        ClientNameNotSetError
            Raised when :meth:`set_client` was not called.
        QueryIoError
            Raised when the file cannot be written.
        """
        if self._client_name is None:
            msg = "Client name not set; call set_client() before write_stateful()."
            raise ClientNameNotSetError(msg)
        raw = self._client_data if client_data is None else encode_client_data(client_data)
        query = _Query(requests=tuple(self._requests), client=raw)
        directory = query_dir(build_dir) / client_dirname(self._client_name)
        _make_dirs(directory)
        path = directory / QUERY_FILENAME
        try:
            path.write_bytes(dumps_json(query))
        except OSError as exc:
            msg = f"Failed to write query file {path}: {exc}"
            raise QueryIoError(msg) from exc
        logger.debug("Wrote stateful query %s with %d requests", path, len(self._requests))
        return path


def _make_dirs(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Failed to create query directory {directory}: {exc}"
        raise QueryIoError(msg) from exc


__all__ = ["QUERY_FILENAME", "Writer", "encode_client_data", "query_dir"]
