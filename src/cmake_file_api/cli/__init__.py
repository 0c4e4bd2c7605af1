"""CLI entrypoints for cmake-file-api."""

from cmake_file_api.cli.app import main
from cmake_file_api.cli.exit_codes import ExitCode

__all__ = ["ExitCode", "main"]
