"""List each target's sources with their compile settings."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from rich.console import Console
from rich.markup import escape

from cmake_file_api.cli.context import CliContext, missing_build_dir, report_error, resolve_build_dir
from cmake_file_api.errors import FileApiError
from cmake_file_api.objects import CodeModelV2
from cmake_file_api.objects.codemodel_v2 import Configuration, Source, Target
from cmake_file_api.reply.reader import read_object


def sources_command(
    build_dir: Path | None = None,
    *,
    config: Annotated[
        str | None,
        Parameter(help="Only list this build configuration (e.g. Debug)."),
    ] = None,
    context: Annotated[CliContext | None, Parameter(parse=False)] = None,
) -> int:
    """List target sources with their include paths, defines and flags.

    Returns
    -------
    int
        Exit status code.
    """
    resolved = resolve_build_dir(build_dir, context)
    if resolved is None:
        return missing_build_dir()
    try:
        codemodel = read_object(resolved, CodeModelV2)
    except FileApiError as exc:
        return report_error(exc)

    configurations = codemodel.configurations
    if config is not None:
        configurations = tuple(item for item in configurations if item.name == config)
        if not configurations:
            return report_error(ValueError(f"No configuration named {config!r} in codemodel."))

    console = Console(highlight=False, soft_wrap=True)
    for configuration in configurations:
        _print_configuration(console, configuration)
    return 0


def _print_configuration(console: Console, configuration: Configuration) -> None:
    label = configuration.name or "<default>"
    console.print(f"[bold]Configuration {escape(label)}[/bold]")
    for target in configuration.targets:
        _print_target(console, target)


def _print_target(console: Console, target: Target) -> None:
    suffix = f" ({escape(target.type_name)})" if target.type_name else ""
    console.print(f"  [bold]{escape(target.name)}[/bold]{suffix}")
    for source in target.sources:
        if isinstance(source, Source):
            _print_source(console, target, source)
        else:
            console.print(f"    {escape(source)}")


def _print_source(console: Console, target: Target, source: Source) -> None:
    console.print(f"    {escape(source.path)}")
    group = target.compile_group_for(source)
    if group is None:
        return
    details = (
        ("includes", [include.path for include in group.includes]),
        ("defines", group.define_values()),
        ("flags", group.flags()),
    )
    for name, values in details:
        if values:
            console.print(f"      {name}: {escape(' '.join(values))}")


__all__ = ["sources_command"]
