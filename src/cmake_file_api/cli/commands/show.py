"""Print a fully materialized reply object."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from cmake_file_api.cli.context import CliContext, missing_build_dir, report_error, resolve_build_dir
from cmake_file_api.errors import FileApiError
from cmake_file_api.objects import object_type_for
from cmake_file_api.reply.reader import read_object
from cmake_file_api.serde_msgspec import dumps_json


def show_command(
    kind: str,
    build_dir: Path | None = None,
    *,
    context: Annotated[CliContext | None, Parameter(parse=False)] = None,
) -> int:
    """Print an object, with every reference resolved, as JSON.

    Parameters
    ----------
    kind
        Object kind, e.g. ``codemodel`` or ``cache-v2``.
    build_dir
        CMake build directory.

    Returns
    -------
    int
        Exit status code.
    """
    resolved = resolve_build_dir(build_dir, context)
    if resolved is None:
        return missing_build_dir()
    try:
        obj = read_object(resolved, object_type_for(kind))
    except (FileApiError, ValueError) as exc:
        return report_error(exc)
    sys.stdout.write(dumps_json(obj, pretty=True).decode() + "\n")
    return 0


__all__ = ["show_command"]
