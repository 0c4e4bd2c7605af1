"""Run context for CLI command injection."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from cmake_file_api.cli.exit_codes import ExitCode
from cmake_file_api.config import FileApiSettings


@dataclass(frozen=True)
class CliContext:
    """Injected context for CLI commands.

    Parameters
    ----------
    log_level
        Logging level applied to the invocation.
    settings
        Settings loaded from ``cmake-file-api.toml`` or ``pyproject.toml``.
    """

    log_level: str = "WARNING"
    settings: FileApiSettings = field(default_factory=FileApiSettings)


def resolve_build_dir(build_dir: Path | None, context: CliContext | None) -> Path | None:
    """Return the explicit build directory, else the configured one.

    Returns
    -------
    Path | None
        Build directory, or None when neither is set.
    """
    if build_dir is not None:
        return build_dir
    configured = context.settings.build_dir if context is not None else None
    return Path(configured) if configured else None


def missing_build_dir() -> int:
    """Report a missing build directory.

    Returns
    -------
    int
        Exit status code.
    """
    sys.stderr.write("Error: no build directory given and none configured (build_dir).\n")
    return ExitCode.VALIDATION_ERROR


def report_error(exc: BaseException) -> int:
    """Write ``exc`` to stderr and return its exit code.

    Returns
    -------
    int
        Exit status code.
    """
    sys.stderr.write(f"Error: {exc}\n")
    return ExitCode.from_exception(exc)


__all__ = ["CliContext", "missing_build_dir", "report_error", "resolve_build_dir"]
