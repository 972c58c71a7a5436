# fmtmark:header:start
#
#   project      : FmtMark
#   file         : test_diff.py
#   file_relpath : tests/utils/test_diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Tests for the unified diff helpers."""

from __future__ import annotations

from fmtmark.utils.diff import compute_diff, render_patch


def test_compute_diff_headers_and_hunks() -> None:
    diff = compute_diff("a\nb\n", "a\nc\n", "lib.rs")

    assert diff[0] == "--- lib.rs (original)\n"
    assert diff[1] == "+++ lib.rs (rewritten)\n"
    assert "-b\n" in diff
    assert "+c\n" in diff


def test_compute_diff_no_changes_is_empty() -> None:
    assert compute_diff("same\n", "same\n", "x") == []


def test_render_patch_makes_line_endings_visible() -> None:
    """A CRLF to LF change would otherwise render as two identical lines."""
    diff = compute_diff("a\r\n", "a\n", "x")

    rendered: str = render_patch(diff, color=False)

    assert "-a\\r\\n\n" in rendered
    assert "+a\\n\n" in rendered


def test_render_patch_accepts_a_string() -> None:
    assert render_patch("-x\n+y", color=False) == "-x\n+y\n"
