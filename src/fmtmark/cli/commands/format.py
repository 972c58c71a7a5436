# fmtmark:header:start
#
#   project      : FmtMark
#   file         : format.py
#   file_relpath : src/fmtmark/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""FmtMark `format` command.

Runs rustfmt on each input and post processes the result according to the
merged configuration (defaults, project files, ``--config`` files, flags).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fmtmark.cli.cli_types import EnumChoiceParam, KeyValueParam
from fmtmark.cli.cmd_common import (
    expand_inputs,
    exit_with,
    get_effective_verbosity,
    run_on_inputs,
)
from fmtmark.cli.config_resolver import resolve_config_from_click
from fmtmark.cli.options import common_config_options
from fmtmark.config.logging import get_logger
from fmtmark.config.model import Edition, PostProcess, resolve_rustfmt_path
from fmtmark.formatting.rustfmt import RustFmt

if TYPE_CHECKING:
    from fmtmark.cli.console import ClickConsole
    from fmtmark.cli.exit_codes import ExitCode
    from fmtmark.config.logging import FmtmarkLogger
    from fmtmark.config.model import Config

logger: FmtmarkLogger = get_logger(__name__)


@click.command(
    name="format",
    help="Format Rust source files with rustfmt, then post process them.",
)
@click.argument("paths", nargs=-1, type=click.Path(allow_dash=True))
@click.option("--edition", type=EnumChoiceParam(Edition), default=None, help="Rust edition.")
@click.option(
    "--post-process",
    "post_process",
    type=EnumChoiceParam(PostProcess),
    default=None,
    help="Post processing applied after formatting.",
)
@click.option(
    "--rustfmt",
    "rustfmt_path",
    metavar="PATH",
    default=None,
    help="rustfmt executable (overrides config and the RUSTFMT environment variable).",
)
@click.option(
    "--option",
    "options",
    type=KeyValueParam(),
    multiple=True,
    help="rustfmt configuration option KEY=VALUE (repeatable).",
)
@click.option(
    "--check",
    is_flag=True,
    help="Do not write; exit with code 2 if any input would be reformatted.",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the result instead of rewriting files in place.",
)
@click.option("--diff", "show_diff", is_flag=True, help="Print a unified diff of the changes.")
@common_config_options
@click.pass_context
def format_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    edition: Edition | None,
    post_process: PostProcess | None,
    rustfmt_path: str | None,
    options: tuple[tuple[str, str], ...],
    check: bool,
    to_stdout: bool,
    show_diff: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Format the given Rust source files."""
    console: ClickConsole = ctx.obj["console"]
    config: Config = resolve_config_from_click(
        paths=paths,
        no_config=no_config,
        config_paths=config_paths,
        edition=edition,
        post_process=post_process,
        rustfmt_path=rustfmt_path,
        options=options,
    ).freeze()
    formatter = RustFmt(config, rustfmt_path=resolve_rustfmt_path(config))

    code: ExitCode = run_on_inputs(
        console,
        expand_inputs(paths),
        formatter.format_str,
        check=check,
        to_stdout=to_stdout,
        show_diff=show_diff,
        verbosity=get_effective_verbosity(ctx),
    )
    exit_with(code)
