"""Write query files into a build tree."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from cmake_file_api.cli.context import CliContext, missing_build_dir, report_error, resolve_build_dir
from cmake_file_api.errors import FileApiError
from cmake_file_api.objects import object_type_for
from cmake_file_api.query.writer import Writer


def query_command(
    build_dir: Path | None = None,
    *,
    kind: Annotated[
        list[str] | None,
        Parameter(help="Object to request, e.g. codemodel-v2. Repeatable; defaults to all."),
    ] = None,
    client: Annotated[
        str | None,
        Parameter(help="Write a stateful query for this client instead of stateless files."),
    ] = None,
    client_data: Annotated[
        str | None,
        Parameter(help="JSON value CMake echoes back in the reply index (stateful only)."),
    ] = None,
    context: Annotated[CliContext | None, Parameter(parse=False)] = None,
) -> int:
    """Write query files so the next CMake run generates replies.

    Returns
    -------
    int
        Exit status code.
    """
    resolved = resolve_build_dir(build_dir, context)
    if resolved is None:
        return missing_build_dir()
    settings = context.settings if context is not None else None
    kinds = kind or (settings.requests if settings is not None else None)
    client_name = client or (settings.client_name if settings is not None else None)

    writer = Writer()
    try:
        if kinds:
            for name in kinds:
                writer.request_object(object_type_for(name))
        else:
            writer.request_all_objects()
        if client_name:
            data = client_data.encode() if client_data is not None else None
            writer.set_client(client_name, data)
            written = [writer.write_stateful(resolved)]
        else:
            written = writer.write_stateless(resolved)
    except (FileApiError, ValueError) as exc:
        return report_error(exc)

    for path in written:
        sys.stdout.write(f"{path}\n")
    return 0


__all__ = ["query_command"]
