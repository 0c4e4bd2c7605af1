"""Print the active reply index."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from cmake_file_api.cli.context import CliContext, missing_build_dir, report_error, resolve_build_dir
from cmake_file_api.errors import FileApiError
from cmake_file_api.reply.reader import Reader
from cmake_file_api.serde_msgspec import dumps_json


def index_command(
    build_dir: Path | None = None,
    *,
    context: Annotated[CliContext | None, Parameter(parse=False)] = None,
) -> int:
    """Print the most recent reply index as JSON.

    Returns
    -------
    int
        Exit status code.
    """
    resolved = resolve_build_dir(build_dir, context)
    if resolved is None:
        return missing_build_dir()
    try:
        reader = Reader.from_build_dir(resolved)
        payload = reader.read_raw_index()
    except FileApiError as exc:
        return report_error(exc)
    sys.stdout.write(dumps_json(payload, pretty=True).decode() + "\n")
    return 0


__all__ = ["index_command"]
