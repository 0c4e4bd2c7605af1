"""Reading the reply tree: locate, parse, resolve, materialize."""

from .index import (
    ClientReply,
    CMakeGenerator,
    CMakeInfo,
    CMakePaths,
    CMakeVersion,
    Index,
    QueryJsonReply,
    ReplyErrorMarker,
    ReplyFileReference,
    UnknownReply,
    load_index,
    parse_index,
)
from .locator import index_file, is_available, locate_index, reply_dir
from .reader import Reader, ReplyFileLoader, read_index, read_object
from .resolver import available_versions, find_entry, resolve, resolve_object

__all__ = [
    "CMakeGenerator",
    "CMakeInfo",
    "CMakePaths",
    "CMakeVersion",
    "ClientReply",
    "Index",
    "QueryJsonReply",
    "Reader",
    "ReplyErrorMarker",
    "ReplyFileLoader",
    "ReplyFileReference",
    "UnknownReply",
    "available_versions",
    "find_entry",
    "index_file",
    "is_available",
    "load_index",
    "locate_index",
    "parse_index",
    "read_index",
    "read_object",
    "reply_dir",
    "resolve",
    "resolve_object",
]
