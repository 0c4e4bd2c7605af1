"""Tests for CLI command functions."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cmake_file_api.cli.commands.index import index_command
from cmake_file_api.cli.commands.query import query_command
from cmake_file_api.cli.commands.show import show_command
from cmake_file_api.cli.commands.sources import sources_command
from cmake_file_api.cli.commands.version import version_command
from cmake_file_api.cli.context import CliContext
from cmake_file_api.cli.exit_codes import ExitCode
from cmake_file_api.config import FileApiSettings
from cmake_file_api.paths import query_dir
from tests._support.reply_tree import ReplyTree


def test_query_command_writes_stateless_files(
    build_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure the query command requests every object by default."""
    exit_code = query_command(build_dir)

    assert exit_code == 0
    assert len(list(query_dir(build_dir).iterdir())) == 5
    assert len(capsys.readouterr().out.splitlines()) == 5


def test_query_command_stateful(build_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure --client writes a stateful query with the given client data."""
    exit_code = query_command(
        build_dir, kind=["cache-v2", "codemodel"], client="ide", client_data='{"id": 7}'
    )

    assert exit_code == 0
    path = query_dir(build_dir) / "client-ide" / "query.json"
    assert capsys.readouterr().out.strip() == str(path)
    document = json.loads(path.read_bytes())
    assert [request["kind"] for request in document["requests"]] == ["cache", "codemodel"]
    assert document["client"] == {"id": 7}


def test_query_command_uses_settings(tmp_path: Path) -> None:
    """Ensure configured build dir, requests and client fill in missing arguments."""
    build = tmp_path / "configured"
    context = CliContext(
        settings=FileApiSettings(
            build_dir=str(build), client_name="cfg", requests=("toolchains",)
        )
    )

    assert query_command(context=context) == 0
    document = json.loads((query_dir(build) / "client-cfg" / "query.json").read_bytes())
    assert document["requests"] == [{"kind": "toolchains", "version": {"major": 1}}]


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({"kind": ["nope"]}, ExitCode.VALIDATION_ERROR),
        ({"client": "ide", "client_data": "{bad"}, ExitCode.QUERY_WRITE_ERROR),
    ],
)
def test_query_command_errors(
    build_dir: Path,
    capsys: pytest.CaptureFixture[str],
    kwargs: dict[str, object],
    expected: ExitCode,
) -> None:
    """Ensure invalid requests report an error and a matching exit code."""
    exit_code = query_command(build_dir, **kwargs)  # type: ignore[arg-type]
    assert exit_code == expected
    assert capsys.readouterr().err.startswith("Error: ")


def test_commands_require_build_dir(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure commands fail cleanly without a build directory."""
    assert index_command() == ExitCode.VALIDATION_ERROR
    assert "build_dir" in capsys.readouterr().err


def test_index_command_prints_raw_index(
    full_reply: ReplyTree, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure the index command prints the active index JSON."""
    assert index_command(full_reply.build_dir) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["objects"] == full_reply.objects


def test_index_command_without_reply(build_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure a missing reply maps to the not-found exit code."""
    assert index_command(build_dir) == ExitCode.REPLY_NOT_FOUND
    assert "reply not generated" in capsys.readouterr().err


def test_show_command_prints_resolved_object(
    full_reply: ReplyTree, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure show prints the object with references materialized."""
    assert show_command("codemodel", full_reply.build_dir) == 0
    payload = json.loads(capsys.readouterr().out)
    debug = payload["configurations"][0]
    assert debug["name"] == "Debug"
    assert [target["name"] for target in debug["resolvedTargets"]] == ["app", "core"]
    assert debug["targets"][0]["jsonFile"] == "target-app-Debug.json"
    assert debug["resolvedTargets"][0]["type"] == "EXECUTABLE"


def test_show_command_errors(full_reply: ReplyTree, capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure unknown kinds are validation errors."""
    assert show_command("bogus", full_reply.build_dir) == ExitCode.VALIDATION_ERROR
    assert "Unsupported object kind" in capsys.readouterr().err


def test_show_command_unsupported_version(
    reply_tree: ReplyTree, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure an index without the needed major maps to its own exit code."""
    reply_tree.add_object("cache", 3, 0)
    reply_tree.write_index()
    assert show_command("cache", reply_tree.build_dir) == ExitCode.UNSUPPORTED_VERSION
    assert "major version 2" in capsys.readouterr().err


def test_sources_command_lists_compile_settings(
    full_reply: ReplyTree, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure sources lists each source with includes, defines and flags."""
    assert sources_command(full_reply.build_dir, config="Debug") == 0
    lines = [line.strip() for line in capsys.readouterr().out.splitlines()]

    assert lines[0] == "Configuration Debug"
    assert "app (EXECUTABLE)" in lines
    assert "src/main.cpp" in lines
    assert "includes: /work/project/include" in lines
    assert "defines: USE_CORE APP_DEBUG=1" in lines
    assert "flags: -O0 -g" in lines
    assert "include/app.h" in lines
    assert "Configuration Release" not in lines


def test_sources_command_unknown_configuration(
    full_reply: ReplyTree, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure an unknown configuration name is reported."""
    assert sources_command(full_reply.build_dir, config="MinSizeRel") == ExitCode.VALIDATION_ERROR
    assert "MinSizeRel" in capsys.readouterr().err


def test_version_command(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure the version report lists every readable object kind."""
    assert version_command() == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["version"]
    assert {item["query_file"] for item in payload["object_kinds"]} == {
        "codemodel-v2",
        "configureLog-v1",
        "cache-v2",
        "toolchains-v1",
        "cmakeFiles-v1",
    }
    codemodel = payload["object_kinds"][0]
    assert codemodel == {"kind": "codemodel", "major": 2, "query_file": "codemodel-v2"}


def test_module_entrypoint_shares_app_main() -> None:
    """Ensure ``python -m cmake_file_api.cli`` runs the same entry point as the script."""
    from cmake_file_api.cli import __main__ as module_entry
    from cmake_file_api.cli.app import main as app_main

    assert module_entry.main is app_main
