"""Exit code taxonomy for the cmake-file-api CLI."""

from __future__ import annotations

from enum import IntEnum

from cmake_file_api.errors import (
    ClientNameNotSetError,
    ConfigError,
    MalformedIndexError,
    MalformedObjectError,
    QueryWriteError,
    ReplyIoError,
    ReplyNotFoundError,
    UnsupportedVersionError,
)


class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Exit codes follow Unix conventions with domain-specific extensions:
    - 0: Success
    - 1-9: General errors (parse, validation, config)
    - 10-19: Reply reading errors
    - 20-29: Query writing errors
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    PARSE_ERROR = 2
    VALIDATION_ERROR = 3
    CONFIG_ERROR = 4

    # Reply errors (10-19)
    REPLY_NOT_FOUND = 10
    MALFORMED_INDEX = 11
    MALFORMED_OBJECT = 12
    UNSUPPORTED_VERSION = 13
    REPLY_IO_ERROR = 14

    # Query errors (20-29)
    QUERY_WRITE_ERROR = 20
    CLIENT_NAME_NOT_SET = 21

    @classmethod
    def from_exception(cls, exc: BaseException) -> ExitCode:
        """Map an exception to an appropriate exit code.

        Parameters
        ----------
        exc
            Exception to classify.

        Returns
        -------
        ExitCode
            Exit code appropriate for the exception type.
        """
        cyclopts_code = _exit_code_for_cyclopts(exc)
        if cyclopts_code is not None:
            return cyclopts_code

        domain_code = _exit_code_for_domain_error(exc)
        if domain_code is not None:
            return domain_code

        type_code = _exit_code_for_exception_type(exc)
        if type_code is not None:
            return type_code

        return cls.GENERAL_ERROR


def _exit_code_for_cyclopts(exc: BaseException) -> ExitCode | None:
    module = exc.__class__.__module__
    if not module.startswith("cyclopts"):
        return None
    if exc.__class__.__name__ == "ValidationError":
        return ExitCode.VALIDATION_ERROR
    return ExitCode.PARSE_ERROR


_DOMAIN_CODES: tuple[tuple[type[BaseException], ExitCode], ...] = (
    (ReplyNotFoundError, ExitCode.REPLY_NOT_FOUND),
    (MalformedIndexError, ExitCode.MALFORMED_INDEX),
    (MalformedObjectError, ExitCode.MALFORMED_OBJECT),
    (UnsupportedVersionError, ExitCode.UNSUPPORTED_VERSION),
    (ReplyIoError, ExitCode.REPLY_IO_ERROR),
    (ClientNameNotSetError, ExitCode.CLIENT_NAME_NOT_SET),
    (QueryWriteError, ExitCode.QUERY_WRITE_ERROR),
    (ConfigError, ExitCode.CONFIG_ERROR),
)


def _exit_code_for_domain_error(exc: BaseException) -> ExitCode | None:
    for error_type, exit_code in _DOMAIN_CODES:
        if isinstance(exc, error_type):
            return exit_code
    return None


def _exit_code_for_exception_type(exc: BaseException) -> ExitCode | None:
    if isinstance(exc, (ValueError, TypeError)):
        return ExitCode.VALIDATION_ERROR
    return None


__all__ = ["ExitCode"]
