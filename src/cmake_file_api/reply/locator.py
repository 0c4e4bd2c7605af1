"""Locate the active index file of a reply directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from cmake_file_api.errors import ReplyIoError, ReplyNotFoundError
from cmake_file_api.paths import reply_dir

logger = logging.getLogger(__name__)

INDEX_PREFIX = "index-"
INDEX_SUFFIX = ".json"


def is_index_name(name: str) -> bool:
    """Return True when ``name`` follows the ``index-*.json`` convention."""
    return name.startswith(INDEX_PREFIX) and name.lower().endswith(INDEX_SUFFIX)


def _index_candidates(directory: Path) -> list[Path]:
    with os.scandir(directory) as entries:
        return [
            Path(entry.path)
            for entry in entries
            if is_index_name(entry.name) and entry.is_file()
        ]


def index_file(build_dir: Path | str) -> Path | None:
    """Return the most recent index file of a build tree.

    CMake names index files with a sortable timestamp, and older index files
    may coexist with the current one. The lexicographically greatest file name
    wins.

    Parameters
    ----------
    build_dir
        CMake build directory.

    Returns
    -------
    Path | None
        Path to the active index, or None when no reply exists.
    """
    directory = reply_dir(build_dir)
    if not directory.is_dir():
        return None
    try:
        candidates = _index_candidates(directory)
    except FileNotFoundError:
        return None
    except OSError as exc:
        msg = f"Failed to list reply directory {directory}: {exc}"
        raise ReplyIoError(msg, path=directory) from exc
    if not candidates:
        return None
    return max(candidates, key=lambda path: path.name)


def locate_index(build_dir: Path | str) -> Path:
    """Return the active index file, failing when CMake has not written one.

    Raises
    ------
    ReplyNotFoundError
        Raised when the reply directory or an index file is missing.
    """
    path = index_file(build_dir)
    if path is None:
        directory = reply_dir(build_dir)
        msg = (
            f"cmake-file-api reply not generated for {build_dir}: "
            f"no {INDEX_PREFIX}*{INDEX_SUFFIX} in {directory}"
        )
        raise ReplyNotFoundError(msg, path=directory)
    logger.debug("Active index for %s: %s", build_dir, path.name)
    return path


def is_available(build_dir: Path | str) -> bool:
    """Return True when the build tree has a reply index."""
    return index_file(build_dir) is not None


__all__ = [
    "INDEX_PREFIX",
    "INDEX_SUFFIX",
    "index_file",
    "is_available",
    "is_index_name",
    "locate_index",
    "reply_dir",
]
