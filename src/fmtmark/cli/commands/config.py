# fmtmark:header:start
#
#   project      : FmtMark
#   file         : config.py
#   file_relpath : src/fmtmark/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""FmtMark `config` command.

Prints the effective configuration (after merging defaults, discovered project
files and ``--config`` files) as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fmtmark.cli.cmd_common import get_effective_verbosity
from fmtmark.cli.config_resolver import resolve_config_from_click
from fmtmark.cli.options import common_config_options
from fmtmark.config.io import nest_under_tool_section, to_toml
from fmtmark.config.model import resolve_rustfmt_path
from fmtmark.constants import PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from fmtmark.cli.console import ClickConsole
    from fmtmark.config.io import TomlTable
    from fmtmark.config.model import Config


@click.command(
    name="config",
    help="Show the effective FmtMark configuration as TOML.",
)
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--pyproject",
    is_flag=True,
    help="Nest the output under [tool.fmtmark] for pyproject.toml.",
)
@common_config_options
@click.pass_context
def config_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    pyproject: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Show the effective configuration.

    Discovery is anchored to the first path given, or the current directory.
    """
    console: ClickConsole = ctx.obj["console"]
    config: Config = resolve_config_from_click(
        paths=paths,
        no_config=no_config,
        config_paths=config_paths,
    ).freeze()

    if get_effective_verbosity(ctx) > 0:
        console.print(f"# rustfmt executable: {resolve_rustfmt_path(config)}")
        for path in config.config_files:
            console.print(f"# merged: {path}")

    table: TomlTable = config.to_toml_dict()
    if pyproject:
        table = nest_under_tool_section(table, PYPROJECT_TOOL_SECTION)
    console.print(to_toml(table), nl=False)
