"""Client for the CMake file-based API.

Write queries with :class:`Writer`, run CMake, then read typed replies with
:class:`Reader` or :func:`read_object`::

    from cmake_file_api import CodeModelV2, Writer, read_object

    Writer().request_object(CodeModelV2).write_stateless(build_dir)
    # ... cmake -S src -B build_dir ...
    codemodel = read_object(build_dir, CodeModelV2)
"""

from cmake_file_api.errors import (
    ClientNameNotSetError,
    ConfigError,
    FileApiError,
    MalformedIndexError,
    MalformedObjectError,
    QueryIoError,
    QueryWriteError,
    ReplyError,
    ReplyIoError,
    ReplyNotFoundError,
    UnsupportedVersionError,
)
from cmake_file_api.objects import (
    OBJECT_TYPES,
    CacheV2,
    CMakeFilesV1,
    CodeModelV2,
    ConfigureLogV1,
    MajorMinor,
    ObjectKind,
    ReplyObject,
    ToolchainsV1,
    object_type_for,
)
from cmake_file_api.paths import api_dir, query_dir, reply_dir
from cmake_file_api.query import Writer
from cmake_file_api.reply import (
    Index,
    Reader,
    ReplyFileReference,
    index_file,
    is_available,
    read_index,
    read_object,
)

__all__ = [
    "OBJECT_TYPES",
    "CMakeFilesV1",
    "CacheV2",
    "ClientNameNotSetError",
    "CodeModelV2",
    "ConfigError",
    "ConfigureLogV1",
    "FileApiError",
    "Index",
    "MajorMinor",
    "MalformedIndexError",
    "MalformedObjectError",
    "ObjectKind",
    "QueryIoError",
    "QueryWriteError",
    "Reader",
    "ReplyError",
    "ReplyFileReference",
    "ReplyIoError",
    "ReplyNotFoundError",
    "ReplyObject",
    "ToolchainsV1",
    "UnsupportedVersionError",
    "Writer",
    "api_dir",
    "index_file",
    "is_available",
    "object_type_for",
    "query_dir",
    "read_index",
    "read_object",
    "reply_dir",
]
