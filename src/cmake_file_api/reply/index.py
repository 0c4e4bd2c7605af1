"""Index file model and parser.

The index names every object file CMake wrote for the queries it found, plus
a ``reply`` map answering each query file individually. Values in the
``reply`` map are heterogeneous (object reference, error marker, or a nested
map for a stateful client) and are classified after decoding. Stateful
client data is kept as raw JSON bytes so it is never reinterpreted.
"""

from __future__ import annotations

import logging
from pathlib import Path

import msgspec

from cmake_file_api.errors import MalformedIndexError, ReplyIoError, ReplyNotFoundError
from cmake_file_api.objects.base import MajorMinor, ObjectKind, ReplyStruct
from cmake_file_api.paths import CLIENT_PREFIX
from cmake_file_api.serde_msgspec import describe_decode_error, loads_json, loads_json_builtins

logger = logging.getLogger(__name__)

QUERY_JSON_KEY = "query.json"


class CMakeVersion(ReplyStruct, frozen=True):
    """Version of the CMake instance that generated the reply."""

    major: int = 0
    minor: int = 0
    patch: int = 0
    suffix: str = ""
    string: str = ""
    is_dirty: bool = False


class CMakePaths(ReplyStruct, frozen=True):
    """Absolute paths of the tools that ship with CMake."""

    cmake: str = ""
    ctest: str = ""
    cpack: str = ""
    root: str = ""


class CMakeGenerator(ReplyStruct, frozen=True):
    """Generator used for the build tree."""

    name: str = ""
    multi_config: bool = False
    platform: str | None = None


class CMakeInfo(ReplyStruct, frozen=True):
    """The ``cmake`` block of the index."""

    version: CMakeVersion = msgspec.field(default_factory=CMakeVersion)
    paths: CMakePaths = msgspec.field(default_factory=CMakePaths)
    generator: CMakeGenerator = msgspec.field(default_factory=CMakeGenerator)


class ReplyFileReference(ReplyStruct, frozen=True):
    """Index entry: an object kind/version and the reply-relative file holding it."""

    kind: str
    version: MajorMinor
    json_file: str

    def matches(self, kind: ObjectKind | str, major: int) -> bool:
        """Return True when the entry serves ``kind`` at major version ``major``."""
        return self.kind == kind and self.version.major == major


class ReplyErrorMarker(ReplyStruct, frozen=True):
    """A query that CMake could not answer."""

    error: str


class UnknownReply(ReplyStruct, frozen=True):
    """A ``reply`` value in a shape this library does not recognize."""

    raw: msgspec.Raw


class QueryJsonReply(ReplyStruct, frozen=True):
    """Echo of a stateful ``query.json``.

    ``client``, ``requests`` and ``responses`` hold the exact JSON bytes found
    in the index, or None when the member is absent.
    """

    client: msgspec.Raw | None = None
    requests: msgspec.Raw | None = None
    responses: msgspec.Raw | None = None

    def client_data(self) -> object:
        """Decode the echoed client data into builtin values."""
        return None if self.client is None else loads_json_builtins(self.client)

    def decoded_responses(self) -> list[ReplyFileReference | ReplyErrorMarker | UnknownReply]:
        """Classify each entry of the ``responses`` array.

        A ``responses`` member that is a single error object (the query file
        itself was invalid) yields a one-element list.
        """
        if self.responses is None:
            return []
        try:
            items = loads_json(self.responses, target_type=list[msgspec.Raw])
        except msgspec.ValidationError:
            return [_classify_response(self.responses)]
        return [_classify_response(item) for item in items]


type ReplyValue = ReplyFileReference | ReplyErrorMarker | UnknownReply
type ClientValue = ReplyFileReference | ReplyErrorMarker | QueryJsonReply | UnknownReply


class ClientReply(ReplyStruct, frozen=True):
    """Replies to the query files of one stateful client (``client-<name>``)."""

    name: str
    entries: dict[str, ClientValue] = {}

    @property
    def query(self) -> QueryJsonReply | None:
        """Return the ``query.json`` echo, if the client wrote one."""
        value = self.entries.get(QUERY_JSON_KEY)
        return value if isinstance(value, QueryJsonReply) else None


class Index(ReplyStruct, frozen=True):
    """Typed index of one CMake run."""

    objects: tuple[ReplyFileReference, ...]
    cmake: CMakeInfo = msgspec.field(default_factory=CMakeInfo)
    reply: dict[str, ReplyValue | ClientReply] = {}

    def entries_for(self, kind: ObjectKind | str) -> tuple[ReplyFileReference, ...]:
        """Return the entries of ``kind`` in index order."""
        return tuple(entry for entry in self.objects if entry.kind == kind)

    def client(self, name: str) -> ClientReply | None:
        """Return the replies to a stateful client's queries."""
        key = name if name.startswith(CLIENT_PREFIX) else f"{CLIENT_PREFIX}{name}"
        value = self.reply.get(key)
        return value if isinstance(value, ClientReply) else None


class _IndexDocument(ReplyStruct, frozen=True):
    objects: tuple[ReplyFileReference, ...]
    cmake: CMakeInfo = msgspec.field(default_factory=CMakeInfo)
    reply: dict[str, msgspec.Raw] = {}


def _decode_members(raw: msgspec.Raw) -> dict[str, msgspec.Raw] | None:
    try:
        return loads_json(raw, target_type=dict[str, msgspec.Raw])
    except msgspec.ValidationError:
        return None


def _classify_response(raw: msgspec.Raw) -> ReplyValue:
    members = _decode_members(raw)
    if members is None:
        return UnknownReply(raw=raw)
    try:
        if "error" in members:
            return loads_json(raw, target_type=ReplyErrorMarker)
        if "jsonFile" in members:
            return loads_json(raw, target_type=ReplyFileReference)
    except msgspec.ValidationError:
        return UnknownReply(raw=raw)
    return UnknownReply(raw=raw)


def _classify_client_value(key: str, raw: msgspec.Raw) -> ClientValue:
    if key != QUERY_JSON_KEY:
        return _classify_response(raw)
    members = _decode_members(raw)
    if members is None:
        return UnknownReply(raw=raw)
    if "error" in members and not {"client", "requests", "responses"} & members.keys():
        return _classify_response(raw)
    return QueryJsonReply(
        client=members.get("client"),
        requests=members.get("requests"),
        responses=members.get("responses"),
    )


def _classify_reply(reply: dict[str, msgspec.Raw]) -> dict[str, ReplyValue | ClientReply]:
    classified: dict[str, ReplyValue | ClientReply] = {}
    for key, raw in reply.items():
        if not key.startswith(CLIENT_PREFIX):
            classified[key] = _classify_response(raw)
            continue
        members = _decode_members(raw)
        if members is None:
            classified[key] = UnknownReply(raw=raw)
            continue
        classified[key] = ClientReply(
            name=key.removeprefix(CLIENT_PREFIX),
            entries={name: _classify_client_value(name, value) for name, value in members.items()},
        )
    return classified


def parse_index(buf: bytes | str, *, source: Path | None = None) -> Index:
    """Deserialize index file contents.

    Parameters
    ----------
    buf
        Contents of an ``index-*.json`` file.
    source
        Path the contents were read from, used in error messages.

    Returns
    -------
    Index
        Typed index. Unknown members are ignored.

    Raises
    ------
    MalformedIndexError
        Raised on invalid JSON or when ``objects`` or a required entry member
        is missing or has the wrong type.
    """
    try:
        document = loads_json(buf, target_type=_IndexDocument)
    except msgspec.DecodeError as exc:
        where = f" {source}" if source is not None else ""
        msg = f"Malformed index file{where}: {describe_decode_error(exc)}"
        raise MalformedIndexError(msg, path=source) from exc
    return Index(
        objects=document.objects,
        cmake=document.cmake,
        reply=_classify_reply(document.reply),
    )


def read_index_bytes(path: Path) -> bytes:
    """Read an index or object file, mapping OS errors to reply errors.

    Raises
    ------
    ReplyNotFoundError
        Raised when the file does not exist.
    ReplyIoError
        Raised for any other filesystem failure.
    """
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        msg = f"Reply file not found: {path}"
        raise ReplyNotFoundError(msg, path=path) from exc
    except OSError as exc:
        msg = f"Failed to read reply file {path}: {exc}"
        raise ReplyIoError(msg, path=path) from exc


def load_index(path: Path) -> Index:
    """Read and parse the index file at ``path``."""
    logger.debug("Reading index file %s", path)
    return parse_index(read_index_bytes(path), source=path)


__all__ = [
    "QUERY_JSON_KEY",
    "CMakeGenerator",
    "CMakeInfo",
    "CMakePaths",
    "CMakeVersion",
    "ClientReply",
    "ClientValue",
    "Index",
    "QueryJsonReply",
    "ReplyErrorMarker",
    "ReplyFileReference",
    "ReplyValue",
    "UnknownReply",
    "load_index",
    "parse_index",
    "read_index_bytes",
]
