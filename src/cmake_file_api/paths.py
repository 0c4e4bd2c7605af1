"""Well-known locations of the file API inside a build tree."""

from __future__ import annotations

from pathlib import Path

API_SUBPATH = Path(".cmake", "api", "v1")
QUERY_DIRNAME = "query"
REPLY_DIRNAME = "reply"
CLIENT_PREFIX = "client-"


def api_dir(build_dir: Path | str) -> Path:
    """Return ``<build_dir>/.cmake/api/v1``."""
    return Path(build_dir) / API_SUBPATH


def query_dir(build_dir: Path | str) -> Path:
    """Return the query directory CMake reads requests from."""
    return api_dir(build_dir) / QUERY_DIRNAME


def reply_dir(build_dir: Path | str) -> Path:
    """Return the reply directory CMake writes the index and objects to."""
    return api_dir(build_dir) / REPLY_DIRNAME


def client_dirname(client_name: str) -> str:
    """Return the query subdirectory name for a stateful client.

    Parameters
    ----------
    client_name
        Client identifier, with or without the ``client-`` prefix.

    Returns
    -------
    str
        Directory name of the form ``client-<name>``.
    """
    if client_name.startswith(CLIENT_PREFIX):
        return client_name
    return f"{CLIENT_PREFIX}{client_name}"


__all__ = [
    "API_SUBPATH",
    "CLIENT_PREFIX",
    "api_dir",
    "client_dirname",
    "query_dir",
    "reply_dir",
]
