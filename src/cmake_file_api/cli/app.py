"""Main application setup for the cmake-file-api CLI."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Annotated, Literal

from cyclopts import App, CycloptsError, Group, Parameter

from cmake_file_api.cli.commands.index import index_command
from cmake_file_api.cli.commands.query import query_command
from cmake_file_api.cli.commands.show import show_command
from cmake_file_api.cli.commands.sources import sources_command
from cmake_file_api.cli.commands.version import get_version, version_command
from cmake_file_api.cli.context import CliContext, report_error
from cmake_file_api.cli.exit_codes import ExitCode
from cmake_file_api.config import load_settings
from cmake_file_api.errors import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "WARNING"

_HELP_EPILOGUE = """
Examples:
  cmake-file-api query ./build                     Request every object kind
  cmake-file-api query ./build --client ide        Write a stateful query
  cmake-file-api show codemodel ./build            Print the resolved codemodel
  cmake-file-api sources ./build --config Debug    List sources with flags

Environment Variables:
  CMAKE_FILE_API_LOG_LEVEL   Default log level (DEBUG, INFO, WARNING, ERROR)

Settings are read from cmake-file-api.toml or [tool.cmake-file-api] in
pyproject.toml, searched upward from the working directory.
"""

session_group = Group(
    "Session",
    help="Session options.",
    sort_key=0,
)

app = App(
    name="cmake-file-api",
    help="Read and request CMake file API replies.",
    help_format="rich",
    help_epilogue=_HELP_EPILOGUE,
    version=get_version(),
    version_flags=["--version", "-V"],
    default_parameter=Parameter(
        show_default=True,
        show_env_var=True,
    ),
)

app.meta.group_parameters = session_group


@dataclass(frozen=True)
class SessionOptions:
    """Session-level configuration parameters."""

    config_file: Annotated[
        str | None,
        Parameter(
            name="--config-file",
            help="Path to a settings file (overrides default search).",
            group=session_group,
        ),
    ] = None
    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None,
        Parameter(
            name="--log-level",
            help="Logging verbosity level.",
            env_var="CMAKE_FILE_API_LOG_LEVEL",
            group=session_group,
        ),
    ] = None


_DEFAULT_SESSION_OPTIONS = SessionOptions()


@app.meta.default
def meta_launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    session: Annotated[SessionOptions, Parameter(name="*")] = _DEFAULT_SESSION_OPTIONS,
) -> int:
    """Meta launcher for settings loading and context injection.

    Returns
    -------
    int
        Exit status code from command execution.
    """
    try:
        settings = load_settings(session.config_file)
    except ConfigError as exc:
        return report_error(exc)

    log_level = (session.log_level or settings.log_level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=log_level)
    context = CliContext(log_level=log_level, settings=settings)
    return invoke(list(tokens), context=context)


def invoke(tokens: Sequence[str], *, context: CliContext) -> int:
    """Parse ``tokens``, inject ``context``, and run the selected command.

    Returns
    -------
    int
        Exit status code.
    """
    try:
        command, bound, ignored = app.parse_args(
            list(tokens),
            exit_on_error=False,
            print_error=True,
        )
    except CycloptsError as exc:
        return ExitCode.from_exception(exc)

    for name in ignored:
        if name == "context":
            bound.arguments[name] = context

    logger.debug("Running %s", getattr(command, "__qualname__", repr(command)))
    result = command(*bound.args, **bound.kwargs)
    if result is None:
        return ExitCode.SUCCESS
    return int(result)


app.command(query_command, name="query", alias="q")
app.command(index_command, name="index")
app.command(show_command, name="show")
app.command(sources_command, name="sources")
app.command(version_command, name="version", alias="v")


def main() -> None:
    """Run the cmake-file-api CLI."""
    app.meta()


__all__ = ["app", "invoke", "main", "meta_launcher"]
