# fmtmark:header:start
#
#   project      : FmtMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""CLI test helpers for running FmtMark in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so relative input paths and configuration
discovery are resolved against the temporary test directory.

Program output goes to stdout and per-file errors to stderr; tests that need
the exact bytes written (CRLF line endings) use ``result.stdout_bytes`` since
Click normalizes line endings in ``result.stdout``.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from fmtmark.cli.exit_codes import ExitCode
from fmtmark.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str] | None): CLI argument vector, e.g. ``["replace", "lib.rs"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input for ``-``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on files (``--help``,
    ``version``) or when every path passed is absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    # WOULD_CHANGE is a *normal* outcome; do not assert on exception.
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output


class FakeRustfmt:
    """Stand-in for ``subprocess.run`` that mimics ``rustfmt`` on stdin.

    Collapses runs of spaces ("formatting") and records every command line.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    def __call__(self, args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[bytes]:
        self.calls.append(list(args))
        source: str = (kwargs.get("input") or b"").decode("utf-8")
        if "syntax error" in source:
            return subprocess.CompletedProcess(args, 1, b"", b"error: expected item\n")
        formatted: str = "\n".join(" ".join(line.split()) for line in source.split("\n"))
        return subprocess.CompletedProcess(args, 0, formatted.encode("utf-8"), b"")


@pytest.fixture
def fake_rustfmt(monkeypatch: pytest.MonkeyPatch) -> FakeRustfmt:
    """Patch the formatter's ``subprocess.run`` with a `FakeRustfmt`."""
    fake = FakeRustfmt()
    monkeypatch.setattr("fmtmark.formatting.rustfmt.subprocess.run", fake)
    return fake
