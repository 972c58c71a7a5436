# fmtmark:header:start
#
#   project      : FmtMark
#   file         : replace.py
#   file_relpath : src/fmtmark/cli/commands/replace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""FmtMark `replace` command.

Expands ``_blank_!``/``_comment_!`` markers (and optionally ``#[doc = "..."]``
attributes) in already formatted Rust source, without running a formatter.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

import click

from fmtmark.cli.cmd_common import (
    expand_inputs,
    exit_with,
    get_effective_verbosity,
    run_on_inputs,
)
from fmtmark.markers.scanner import replace_markers

if TYPE_CHECKING:
    from fmtmark.cli.console import ClickConsole
    from fmtmark.cli.exit_codes import ExitCode


def _replace_text(source: str, *, doc_blocks: bool) -> str:
    return replace_markers(source, doc_blocks).text


@click.command(
    name="replace",
    help="Replace _blank_!/_comment_! markers in Rust source files (or STDIN with '-').",
)
@click.argument("paths", nargs=-1, type=click.Path(allow_dash=True))
@click.option(
    "--doc-blocks",
    is_flag=True,
    help='Also turn #[doc = "..."] attributes into /// comments.',
)
@click.option(
    "--check",
    is_flag=True,
    help="Do not write; exit with code 2 if any input would be rewritten.",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the result instead of rewriting files in place.",
)
@click.option("--diff", "show_diff", is_flag=True, help="Print a unified diff of the changes.")
@click.pass_context
def replace_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    doc_blocks: bool,
    check: bool,
    to_stdout: bool,
    show_diff: bool,
) -> None:
    """Replace markers in the given Rust source files."""
    console: ClickConsole = ctx.obj["console"]
    code: ExitCode = run_on_inputs(
        console,
        expand_inputs(paths),
        functools.partial(_replace_text, doc_blocks=doc_blocks),
        check=check,
        to_stdout=to_stdout,
        show_diff=show_diff,
        verbosity=get_effective_verbosity(ctx),
    )
    exit_with(code)
