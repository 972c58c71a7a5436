# fmtmark:header:start
#
#   project      : FmtMark
#   file         : test_format.py
#   file_relpath : tests/cli/test_format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""CLI tests for the `format` command (rustfmt is faked)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtmark.cli.exit_codes import ExitCode
from tests.cli.conftest import FakeRustfmt, assert_SUCCESS, assert_WOULD_CHANGE, run_cli_in
from tests.conftest import mark_cli, read_text, write_text

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


@mark_cli
def test_format_runs_rustfmt_with_defaults(tmp_path: Path, fake_rustfmt: FakeRustfmt) -> None:
    write_text(tmp_path / "lib.rs", "fn  main()  {}\n")

    result = run_cli_in(tmp_path, ["format", "lib.rs"])

    assert_SUCCESS(result)
    assert read_text(tmp_path / "lib.rs") == "fn main() {}\n"
    assert fake_rustfmt.calls == [["rustfmt", "--edition", "2021"]]


@mark_cli
def test_format_post_processes_markers(tmp_path: Path, fake_rustfmt: FakeRustfmt) -> None:
    write_text(tmp_path / "lib.rs", '_comment_!("hi");\nfn  f() {}\n')

    result = run_cli_in(tmp_path, ["format", "--post-process", "replace-markers", "lib.rs"])

    assert_SUCCESS(result)
    assert read_text(tmp_path / "lib.rs") == "// hi\nfn f() {}\n"


@mark_cli
def test_format_flags_reach_rustfmt(tmp_path: Path, fake_rustfmt: FakeRustfmt) -> None:
    write_text(tmp_path / "lib.rs", "fn f() {}\n")

    result = run_cli_in(
        tmp_path,
        [
            "format",
            "--edition",
            "2018",
            "--option",
            "max_width=80",
            "--option",
            "hard_tabs=true",
            "--rustfmt",
            "/opt/rustfmt",
            "lib.rs",
        ],
    )

    assert_SUCCESS(result)
    assert fake_rustfmt.calls == [
        ["/opt/rustfmt", "--edition", "2018", "--config", "max_width=80,hard_tabs=true"]
    ]


@mark_cli
def test_format_reads_config_file(tmp_path: Path, fake_rustfmt: FakeRustfmt) -> None:
    """Discovered configuration applies; CLI flags override it."""
    write_text(
        tmp_path / "fmtmark.toml",
        """
        root = true

        [rustfmt]
        edition = "2015"

        [rustfmt.options]
        tab_spaces = 2

        [post_process]
        mode = "all"
        """,
    )
    write_text(tmp_path / "lib.rs", '#[doc = " Docs"]\nfn f() {}\n')

    result = run_cli_in(tmp_path, ["format", "--edition", "2024", "lib.rs"])

    assert_SUCCESS(result)
    assert fake_rustfmt.calls == [["rustfmt", "--edition", "2024", "--config", "tab_spaces=2"]]
    assert read_text(tmp_path / "lib.rs") == "/// Docs\nfn f() {}\n"


@mark_cli
def test_format_honors_rustfmt_environment(
    tmp_path: Path, fake_rustfmt: FakeRustfmt, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("RUSTFMT", "/env/rustfmt")

    result = run_cli_in(tmp_path, ["format", "-"], input_text="fn f() {}\n")

    assert_SUCCESS(result)
    assert fake_rustfmt.calls[0][0] == "/env/rustfmt"


@mark_cli
def test_format_check(tmp_path: Path, fake_rustfmt: FakeRustfmt) -> None:
    write_text(tmp_path / "lib.rs", "fn  f() {}\n")

    result = run_cli_in(tmp_path, ["format", "--check", "lib.rs"])

    assert_WOULD_CHANGE(result)
    assert "lib.rs: would be rewritten" in result.stdout
    assert read_text(tmp_path / "lib.rs") == "fn  f() {}\n"


@mark_cli
def test_format_stdin_to_stdout(tmp_path: Path, fake_rustfmt: FakeRustfmt) -> None:
    result = run_cli_in(tmp_path, ["format"], input_text="let  x = 1;\n")

    assert_SUCCESS(result)
    assert result.stdout == "let x = 1;\n"


@mark_cli
def test_format_rustfmt_failure_is_reported(tmp_path: Path, fake_rustfmt: FakeRustfmt) -> None:
    write_text(tmp_path / "lib.rs", "syntax error\n")

    result = run_cli_in(tmp_path, ["format", "lib.rs"])

    assert result.exit_code == ExitCode.SOFTWARE_ERROR, result.output
    assert "rustfmt exited with status 1" in result.stderr
    assert read_text(tmp_path / "lib.rs") == "syntax error\n"


@mark_cli
def test_format_missing_rustfmt_is_unavailable(tmp_path: Path) -> None:
    missing: Path = tmp_path / "no-such-rustfmt"

    result = run_cli_in(tmp_path, ["format", "--rustfmt", str(missing), "-"], input_text="\n")

    assert result.exit_code == ExitCode.UNAVAILABLE, result.output
    assert "no-such-rustfmt" in result.stderr


@mark_cli
def test_format_rejects_bad_option_syntax(tmp_path: Path, fake_rustfmt: FakeRustfmt) -> None:
    result = run_cli_in(tmp_path, ["format", "--option", "max_width", "-"], input_text="")

    assert result.exit_code == 2, result.output
    assert "KEY=VALUE" in result.output
    assert fake_rustfmt.calls == []


@mark_cli
def test_format_rejects_unknown_edition(tmp_path: Path, fake_rustfmt: FakeRustfmt) -> None:
    result = run_cli_in(tmp_path, ["format", "--edition", "2019", "-"], input_text="")

    assert result.exit_code == 2, result.output
    assert fake_rustfmt.calls == []
