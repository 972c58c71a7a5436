# fmtmark:header:start
#
#   project      : FmtMark
#   file         : __main__.py
#   file_relpath : src/fmtmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Allow ``python -m fmtmark`` to run the CLI."""

from __future__ import annotations

from fmtmark.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
