"""Error types for reading replies and writing queries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class FileApiError(Exception):
    """Base class for cmake-file-api errors."""


class ReplyError(FileApiError):
    """Base class for errors raised while reading a reply tree."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ReplyIoError(ReplyError, OSError):
    """Raised when a filesystem operation on the reply tree fails."""


class ReplyNotFoundError(ReplyError, FileNotFoundError):
    """Raised when the reply directory, index file, or an object file is absent."""


class MalformedIndexError(ReplyError, ValueError):
    """Raised when the index file does not parse into the index model."""


class MalformedObjectError(ReplyError, ValueError):
    """Raised when an object file does not parse into its typed schema."""


class UnsupportedVersionError(ReplyError, LookupError):
    """Raised when the index has no entry with the major version this library reads."""

    def __init__(
        self,
        kind: str,
        major: int,
        available: Sequence[tuple[int, int]] = (),
        *,
        path: Path | None = None,
    ) -> None:
        self.kind = kind
        self.major = major
        self.available = tuple(available)
        if self.available:
            advertised = ", ".join(f"{ma}.{mi}" for ma, mi in self.available)
        else:
            advertised = "none"
        msg = f"No '{kind}' object with major version {major} in index (advertised: {advertised})."
        super().__init__(msg, path=path)


class QueryWriteError(FileApiError):
    """Base class for errors raised while writing query files."""


class QueryIoError(QueryWriteError, OSError):
    """Raised when a query file or directory cannot be written."""


class ClientNameNotSetError(QueryWriteError, ValueError):
    """Raised when a stateful query is written without a client name."""


class ConfigError(FileApiError, ValueError):
    """Raised when a settings file cannot be loaded."""


__all__ = [
    "ClientNameNotSetError",
    "ConfigError",
    "FileApiError",
    "MalformedIndexError",
    "MalformedObjectError",
    "QueryIoError",
    "QueryWriteError",
    "ReplyError",
    "ReplyIoError",
    "ReplyNotFoundError",
    "UnsupportedVersionError",
]
