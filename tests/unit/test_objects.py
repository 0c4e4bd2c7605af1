"""Tests for the cache, toolchains, cmakeFiles and configureLog schemas."""

from __future__ import annotations

import json

import pytest

from cmake_file_api.objects import (
    OBJECT_TYPES,
    CacheV2,
    CMakeFilesV1,
    CodeModelV2,
    ConfigureLogV1,
    ObjectKind,
    ToolchainsV1,
    object_type_for,
)
from cmake_file_api.serde_msgspec import loads_json


def test_registry_covers_every_kind_once() -> None:
    """Ensure each object kind has exactly one schema."""
    assert sorted(object_type.KIND for object_type in OBJECT_TYPES) == sorted(ObjectKind)
    assert [object_type.query_name() for object_type in OBJECT_TYPES] == [
        "codemodel-v2",
        "configureLog-v1",
        "cache-v2",
        "toolchains-v1",
        "cmakeFiles-v1",
    ]


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("codemodel", CodeModelV2),
        ("codemodel-v2", CodeModelV2),
        ("cache", CacheV2),
        ("cmakeFiles-v1", CMakeFilesV1),
        ("configureLog", ConfigureLogV1),
        ("toolchains", ToolchainsV1),
    ],
)
def test_object_type_for(name: str, expected: type) -> None:
    """Ensure kind and query names resolve to schemas."""
    assert object_type_for(name) is expected


@pytest.mark.parametrize("name", ["codemodel-v1", "unknown", ""])
def test_object_type_for_rejects_unknown(name: str) -> None:
    """Ensure unsupported names list the supported ones."""
    with pytest.raises(ValueError, match="codemodel-v2"):
        object_type_for(name)


def test_cache_entries_and_properties() -> None:
    """Ensure cache entries decode with their properties."""
    cache = loads_json(
        json.dumps(
            {
                "entries": [
                    {
                        "name": "CMAKE_BUILD_TYPE",
                        "value": "Release",
                        "type": "STRING",
                        "properties": [
                            {"name": "HELPSTRING", "value": "Choose the type of build"},
                            {"name": "STRINGS", "value": "Debug;Release"},
                        ],
                    }
                ]
            }
        ),
        target_type=CacheV2,
    )
    entry = cache.entry("CMAKE_BUILD_TYPE")
    assert entry is not None
    assert entry.type_name == "STRING"
    assert entry.property_value("STRINGS") == "Debug;Release"
    assert entry.property_value("ADVANCED") is None
    assert cache.entry("MISSING") is None


def test_toolchains_for_language() -> None:
    """Ensure toolchains decode compiler and implicit information."""
    toolchains = loads_json(
        json.dumps(
            {
                "toolchains": [
                    {
                        "language": "C",
                        "compiler": {
                            "id": "Clang",
                            "target": "x86_64-pc-linux-gnu",
                            "implicit": {"linkDirectories": ["/usr/lib"],
                                         "linkFrameworkDirectories": []},
                        },
                        "sourceFileExtensions": ["c", "m"],
                    },
                    {"language": "CXX"},
                ]
            }
        ),
        target_type=ToolchainsV1,
    )
    c_toolchain = toolchains.for_language("C")
    assert c_toolchain is not None
    assert c_toolchain.compiler.id == "Clang"
    assert c_toolchain.compiler.implicit.link_directories == ("/usr/lib",)
    assert c_toolchain.source_file_extensions == ("c", "m")
    cxx = toolchains.for_language("CXX")
    assert cxx is not None
    assert cxx.compiler.path is None
    assert toolchains.for_language("Fortran") is None


def test_cmake_files_inputs_and_globs() -> None:
    """Ensure cmakeFiles decodes isCMake and optional globsDependent."""
    cmake_files = loads_json(
        json.dumps(
            {
                "inputs": [
                    {"path": "CMakeLists.txt"},
                    {"path": "/usr/share/cmake/Modules/X.cmake", "isCMake": True,
                     "isExternal": True},
                ],
                "globsDependent": [
                    {"expression": "src/*.c", "recurse": True, "listDirectories": True,
                     "followSymlinks": False, "relative": "src", "paths": ["src/a.c"]}
                ],
            }
        ),
        target_type=CMakeFilesV1,
    )
    assert cmake_files.inputs[1].is_cmake
    assert [item.path for item in cmake_files.project_inputs()] == ["CMakeLists.txt"]
    glob = cmake_files.globs_dependent[0]
    assert glob.recurse
    assert glob.list_directories
    assert glob.relative == "src"

    older = loads_json('{"inputs": []}', target_type=CMakeFilesV1)
    assert older.globs_dependent == ()


def test_configure_log() -> None:
    """Ensure configureLog decodes its path and event kinds."""
    log = loads_json(
        '{"path": "/b/CMakeFiles/CMakeConfigureLog.yaml", "eventKindNames": ["message-v1"]}',
        target_type=ConfigureLogV1,
    )
    assert log.path.endswith("CMakeConfigureLog.yaml")
    assert log.event_kind_names == ("message-v1",)
