# fmtmark:header:start
#
#   project      : FmtMark
#   file         : version.py
#   file_relpath : src/fmtmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""FmtMark `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fmtmark.constants import FMTMARK_VERSION

if TYPE_CHECKING:
    from fmtmark.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of FmtMark.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Print the FmtMark version installed in the current Python environment."""
    console: ClickConsole = ctx.obj["console"]
    console.print(FMTMARK_VERSION)
