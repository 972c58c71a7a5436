# fmtmark:header:start
#
#   project      : FmtMark
#   file         : __init__.py
#   file_relpath : src/fmtmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Click command line interface for FmtMark (``fmtmark``)."""
