"""Tests for writing stateless and stateful queries."""

from __future__ import annotations

import json
from pathlib import Path

import msgspec
import pytest

from cmake_file_api.errors import ClientNameNotSetError, QueryIoError, QueryWriteError
from cmake_file_api.objects import CacheV2, CodeModelV2, ToolchainsV1
from cmake_file_api.query.writer import Writer, encode_client_data, query_dir

_ALL_QUERY_NAMES = {"codemodel-v2", "configureLog-v1", "cache-v2", "toolchains-v1", "cmakeFiles-v1"}


def test_write_stateless_creates_empty_files(build_dir: Path) -> None:
    """Ensure one empty file per requested object is written."""
    written = Writer().request_all_objects().write_stateless(build_dir)

    directory = query_dir(build_dir)
    assert directory == build_dir / ".cmake" / "api" / "v1" / "query"
    assert {path.name for path in directory.iterdir()} == _ALL_QUERY_NAMES
    assert written == [directory / name for name in (
        "codemodel-v2", "configureLog-v1", "cache-v2", "toolchains-v1", "cmakeFiles-v1"
    )]
    assert all(path.read_bytes() == b"" for path in written)


def test_write_stateless_is_idempotent(build_dir: Path) -> None:
    """Ensure repeating a stateless write leaves the same files."""
    writer = Writer().request_object(CodeModelV2).request_object(CacheV2)
    writer.write_stateless(build_dir)
    writer.write_stateless(build_dir)
    assert sorted(path.name for path in query_dir(build_dir).iterdir()) == [
        "cache-v2",
        "codemodel-v2",
    ]


def test_stateless_ignores_minor(build_dir: Path) -> None:
    """Ensure exact-minor requests still use major-only file names."""
    Writer().request_exact(CodeModelV2, 3).request_object(CodeModelV2).write_stateless(build_dir)
    assert [path.name for path in query_dir(build_dir).iterdir()] == ["codemodel-v2"]


def test_write_stateful_document(build_dir: Path) -> None:
    """Ensure the stateful document lists requests in order with client data."""
    path = (
        Writer()
        .set_client("test_client", {"my_key": "my_value"})
        .request_object(CodeModelV2)
        .request_exact(ToolchainsV1, 2)
        .write_stateful(build_dir)
    )

    assert path == query_dir(build_dir) / "client-test_client" / "query.json"
    document = json.loads(path.read_text(encoding="utf-8"))
    assert document == {
        "requests": [
            {"kind": "codemodel", "version": {"major": 2}},
            {"kind": "toolchains", "version": {"major": 1, "minor": 2}},
        ],
        "client": {"my_key": "my_value"},
    }


def test_write_stateful_without_client_data(build_dir: Path) -> None:
    """Ensure client data is omitted when none was given."""
    path = Writer().set_client("client-ide").request_object(CacheV2).write_stateful(build_dir)
    assert path.parent.name == "client-ide"
    assert "client" not in json.loads(path.read_bytes())


def test_write_stateful_override_and_raw_bytes(build_dir: Path) -> None:
    """Ensure call-time client data wins and raw JSON is embedded verbatim."""
    raw = b'{"z": 1.50, "a": [true]}'
    path = (
        Writer()
        .set_client("ide", {"ignored": True})
        .request_object(CacheV2)
        .write_stateful(build_dir, client_data=msgspec.Raw(raw))
    )
    assert raw in path.read_bytes()


def test_write_stateful_overwrites(build_dir: Path) -> None:
    """Ensure a second stateful write replaces the first descriptor."""
    Writer().set_client("ide").request_all_objects().write_stateful(build_dir)
    path = Writer().set_client("ide").request_object(CacheV2).write_stateful(build_dir)
    assert len(json.loads(path.read_bytes())["requests"]) == 1


def test_write_stateful_requires_client_name(build_dir: Path) -> None:
    """Ensure stateful writes without a client name fail before touching disk."""
    with pytest.raises(ClientNameNotSetError):
        Writer().request_object(CacheV2).write_stateful(build_dir)
    assert not query_dir(build_dir).exists()


@pytest.mark.parametrize("name", ["", "client-"])
def test_set_client_rejects_empty_name(name: str) -> None:
    """Ensure empty client names are refused."""
    with pytest.raises(ClientNameNotSetError):
        Writer().set_client(name)


def test_request_exact_rejects_negative_minor() -> None:
    """Ensure negative minor versions are refused."""
    with pytest.raises(ValueError, match="non-negative"):
        Writer().request_exact(CacheV2, -1)


def test_duplicate_requests_are_collapsed() -> None:
    """Ensure requesting the same object twice records it once."""
    writer = Writer().request_object(CacheV2).request_object(CacheV2)
    assert writer.requests == (("cache", 2, None),)


def test_encode_client_data() -> None:
    """Ensure client data encoding treats bytes as JSON and str as a JSON string."""
    assert bytes(encode_client_data("text")) == b'"text"'
    assert bytes(encode_client_data(b"[1, 2]")) == b"[1, 2]"
    assert bytes(encode_client_data({"a": 1})) == b'{"a":1}'
    with pytest.raises(QueryWriteError):
        encode_client_data(b"{oops")
    with pytest.raises(QueryWriteError):
        encode_client_data(object())


def test_write_stateless_reports_io_errors(tmp_path: Path) -> None:
    """Ensure filesystem failures surface as query I/O errors."""
    build_file = tmp_path / "not-a-directory"
    build_file.write_text("", encoding="utf-8")
    with pytest.raises(QueryIoError) as excinfo:
        Writer().request_object(CacheV2).write_stateless(build_file)
    assert isinstance(excinfo.value, OSError)
