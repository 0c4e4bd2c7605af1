"""Tests for exit code classification."""

from __future__ import annotations

import pytest

from cmake_file_api.cli.exit_codes import ExitCode
from cmake_file_api.errors import (
    ClientNameNotSetError,
    ConfigError,
    MalformedIndexError,
    MalformedObjectError,
    QueryIoError,
    ReplyIoError,
    ReplyNotFoundError,
    UnsupportedVersionError,
)


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (ReplyNotFoundError("x"), ExitCode.REPLY_NOT_FOUND),
        (MalformedIndexError("x"), ExitCode.MALFORMED_INDEX),
        (MalformedObjectError("x"), ExitCode.MALFORMED_OBJECT),
        (UnsupportedVersionError("codemodel", 2), ExitCode.UNSUPPORTED_VERSION),
        (ReplyIoError("x"), ExitCode.REPLY_IO_ERROR),
        (ClientNameNotSetError("x"), ExitCode.CLIENT_NAME_NOT_SET),
        (QueryIoError("x"), ExitCode.QUERY_WRITE_ERROR),
        (ConfigError("x"), ExitCode.CONFIG_ERROR),
        (ValueError("x"), ExitCode.VALIDATION_ERROR),
        (PermissionError("x"), ExitCode.GENERAL_ERROR),
        (OSError("x"), ExitCode.GENERAL_ERROR),
        (RuntimeError("x"), ExitCode.GENERAL_ERROR),
    ],
)
def test_from_exception(exc: BaseException, expected: ExitCode) -> None:
    """Ensure domain errors map to their own exit codes before builtin bases."""
    assert ExitCode.from_exception(exc) is expected
