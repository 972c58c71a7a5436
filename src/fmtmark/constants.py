# fmtmark:header:start
#
#   project      : FmtMark
#   file         : constants.py
#   file_relpath : src/fmtmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""FmtMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

FMTMARK_VERSION: str = get_version("fmtmark")

# Name of the environment variable selecting the rustfmt executable
RUSTFMT_ENV_KEY: str = "RUSTFMT"
# Executable looked up on PATH when neither config nor environment name one
RUSTFMT_DEFAULT_EXECUTABLE: str = "rustfmt"

# Environment variable controlling internal log verbosity
LOG_LEVEL_ENV_KEY: str = "FMTMARK_LOG_LEVEL"

# Config file names, in same-directory precedence order (later wins)
PYPROJECT_TOML_NAME: str = "pyproject.toml"
FMTMARK_TOML_NAME: str = "fmtmark.toml"
PYPROJECT_TOOL_SECTION: str = "fmtmark"
