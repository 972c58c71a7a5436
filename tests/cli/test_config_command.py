# fmtmark:header:start
#
#   project      : FmtMark
#   file         : test_config_command.py
#   file_relpath : tests/cli/test_config_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""CLI tests for the `config` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from fmtmark.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, write_text

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_config_prints_defaults(tmp_path: Path) -> None:
    write_text(tmp_path / "fmtmark.toml", "root = true\n")

    result = run_cli_in(tmp_path, ["config"])

    assert_SUCCESS(result)
    assert tomlkit.parse(result.stdout).unwrap() == {
        "rustfmt": {"edition": "2021", "options": {}},
        "post_process": {"mode": "none"},
    }


@mark_cli
def test_config_reflects_discovered_file(tmp_path: Path) -> None:
    write_text(
        tmp_path / "pyproject.toml",
        """
        [tool.fmtmark]
        root = true

        [tool.fmtmark.rustfmt]
        edition = 2018

        [tool.fmtmark.rustfmt.options]
        reorder_imports = false
        """,
    )

    result = run_cli_in(tmp_path, ["config", "--pyproject"])

    assert_SUCCESS(result)
    data = tomlkit.parse(result.stdout).unwrap()
    assert data["tool"]["fmtmark"]["rustfmt"] == {
        "edition": "2018",
        "options": {"reorder_imports": "false"},
    }


@mark_cli
def test_config_verbose_lists_sources(tmp_path: Path) -> None:
    cfg: Path = write_text(tmp_path / "fmtmark.toml", "root = true\n")

    result = run_cli_in(tmp_path, ["-v", "config"])

    assert_SUCCESS(result)
    assert "# rustfmt executable: rustfmt" in result.stdout
    assert f"# merged: {cfg.resolve()}" in result.stdout


@mark_cli
def test_config_no_config_ignores_project_files(tmp_path: Path) -> None:
    write_text(tmp_path / "fmtmark.toml", 'root = true\n[rustfmt]\nedition = "2015"\n')

    result = run_cli_in(tmp_path, ["config", "--no-config"])

    assert_SUCCESS(result)
    assert 'edition = "2021"' in result.stdout


@mark_cli
def test_config_invalid_value_exits_with_config_error(tmp_path: Path) -> None:
    write_text(tmp_path / "fmtmark.toml", 'root = true\n[post_process]\nmode = "sometimes"\n')

    result = run_cli_in(tmp_path, ["config"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "sometimes" in result.stderr


@mark_cli
def test_config_explicit_file_without_section(tmp_path: Path) -> None:
    write_text(tmp_path / "fmtmark.toml", "root = true\n")
    other: Path = write_text(tmp_path / "other" / "pyproject.toml", '[project]\nname = "x"\n')

    result = run_cli_in(tmp_path, ["config", "--config", str(other)])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
