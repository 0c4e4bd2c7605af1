"""Run a real cmake against a tiny project and read its replies."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from cmake_file_api.objects import CacheV2, CMakeFilesV1, CodeModelV2, ToolchainsV1
from cmake_file_api.query.writer import Writer
from cmake_file_api.reply.reader import Reader

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(shutil.which("cmake") is None, reason="cmake is not installed"),
]

_CMAKE_LISTS = """
cmake_minimum_required(VERSION 3.14)
project(Sample LANGUAGES NONE)
add_custom_target(hello ALL COMMAND ${CMAKE_COMMAND} -E echo hello)
"""


def test_real_cmake_replies(tmp_path: Path) -> None:
    """Ensure replies from an actual cmake run decode into every schema requested."""
    source = tmp_path / "src"
    build = tmp_path / "build"
    source.mkdir()
    (source / "CMakeLists.txt").write_text(_CMAKE_LISTS, encoding="utf-8")
    Writer().request_all_objects().write_stateless(build)

    subprocess.run(
        ["cmake", "-S", str(source), "-B", str(build)],
        check=True,
        capture_output=True,
    )

    reader = Reader.from_build_dir(build)
    codemodel = reader.read_object(CodeModelV2)
    cache = reader.read_object(CacheV2)
    cmake_files = reader.read_object(CMakeFilesV1)

    assert reader.index.cmake.version.major >= 3
    assert codemodel.configurations
    assert any(target.name == "hello" for target in codemodel.configurations[0].targets)
    assert cache.entry("CMAKE_PROJECT_NAME") is not None
    assert any(item.path == "CMakeLists.txt" for item in cmake_files.inputs)
    if reader.has_object(ToolchainsV1):
        toolchains = reader.read_object(ToolchainsV1).toolchains
        assert all(toolchain.language == "NONE" for toolchain in toolchains)
