"""Typed reply objects, one schema per (kind, major) pair."""

from __future__ import annotations

from .base import MajorMinor, ObjectKind, ReferenceLoader, ReplyObject, ReplyStruct
from .cache_v2 import Cache as CacheV2
from .cmake_files_v1 import CMakeFiles as CMakeFilesV1
from .codemodel_v2 import CodeModel as CodeModelV2
from .configure_log_v1 import ConfigureLog as ConfigureLogV1
from .toolchains_v1 import Toolchains as ToolchainsV1

OBJECT_TYPES: tuple[type[ReplyObject], ...] = (
    CodeModelV2,
    ConfigureLogV1,
    CacheV2,
    ToolchainsV1,
    CMakeFilesV1,
)


def object_type_for(name: str) -> type[ReplyObject]:
    """Return the object type for a kind name.

    Parameters
    ----------
    name
        Kind name (``codemodel``) or query name (``codemodel-v2``).

    Returns
    -------
    type[ReplyObject]
        Schema implemented by this library for that kind.

    Raises
    ------
    ValueError
        Raised when the kind or the requested major is not supported.
    """
    for object_type in OBJECT_TYPES:
        if name in {object_type.KIND.value, object_type.query_name()}:
            return object_type
    supported = ", ".join(object_type.query_name() for object_type in OBJECT_TYPES)
    msg = f"Unsupported object kind {name!r}; expected one of: {supported}."
    raise ValueError(msg)


__all__ = [
    "OBJECT_TYPES",
    "CMakeFilesV1",
    "CacheV2",
    "CodeModelV2",
    "ConfigureLogV1",
    "MajorMinor",
    "ObjectKind",
    "ReferenceLoader",
    "ReplyObject",
    "ReplyStruct",
    "ToolchainsV1",
    "object_type_for",
]
