# fmtmark:header:start
#
#   project      : FmtMark
#   file         : __init__.py
#   file_relpath : src/fmtmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""FmtMark CLI subcommands."""
