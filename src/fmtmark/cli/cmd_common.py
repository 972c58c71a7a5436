# fmtmark:header:start
#
#   project      : FmtMark
#   file         : cmd_common.py
#   file_relpath : src/fmtmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Common command utilities for Click-based commands.

`run_on_inputs` is the per-file loop shared by ``replace`` and ``format``: it
reads each input, applies a text transform and then writes, prints or only
reports the result. Errors are reported per file and processing continues; the
first error decides the exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from fmtmark.cli.errors import FmtmarkUsageError, exit_code_for
from fmtmark.cli.exit_codes import ExitCode
from fmtmark.config.logging import get_logger
from fmtmark.core.errors import FmtmarkError
from fmtmark.markers.result import ReplaceStatus
from fmtmark.utils.diff import compute_diff, render_patch
from fmtmark.utils.file import read_source_text, write_source_text

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from fmtmark.cli.console import ClickConsole
    from fmtmark.config.logging import FmtmarkLogger

logger: FmtmarkLogger = get_logger(__name__)

STDIN_SENTINEL: str = "-"
RUST_SOURCE_GLOB: str = "*.rs"


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 when unset)."""
    return int((ctx.obj or {}).get("verbosity_level", 0))


def expand_inputs(paths: Sequence[str]) -> list[str]:
    """Return the inputs to process.

    No paths means STDIN. Directories expand to the ``*.rs`` files below them,
    sorted. Other paths are kept as given, so missing files are reported by the
    per-file loop rather than silently dropped.

    Raises:
        FmtmarkUsageError: If ``-`` is combined with other paths.
    """
    if not paths:
        return [STDIN_SENTINEL]
    if STDIN_SENTINEL in paths and len(paths) > 1:
        raise FmtmarkUsageError("'-' (STDIN) cannot be combined with other paths.")
    expanded: list[str] = []
    for raw in paths:
        p = Path(raw)
        if raw != STDIN_SENTINEL and p.is_dir():
            found: list[str] = sorted(str(f) for f in p.rglob(RUST_SOURCE_GLOB) if f.is_file())
            logger.debug("Expanded directory %s to %d file(s)", p, len(found))
            expanded.extend(found)
        else:
            expanded.append(raw)
    return expanded


def _read_stdin() -> str:
    # Binary read keeps CRLF line endings intact
    data: bytes = click.get_binary_stream("stdin").read()
    return data.decode("utf-8")


def _report(console: ClickConsole, status: ReplaceStatus, label: str, *, check: bool) -> None:
    text: str = f"would be {status.value}" if check else status.value
    if console.enable_color:
        text = status.color(text)
    console.print(f"{label}: {text}")


def run_on_inputs(
    console: ClickConsole,
    inputs: Sequence[str],
    transform: Callable[[str], str],
    *,
    check: bool = False,
    to_stdout: bool = False,
    show_diff: bool = False,
    verbosity: int = 0,
) -> ExitCode:
    """Apply ``transform`` to every input and write, print or report the result.

    Args:
        console (ClickConsole): Program-output console.
        inputs (Sequence[str]): File paths, or ``["-"]`` for STDIN.
        transform (Callable[[str], str]): Source to new source.
        check (bool): Report only; never write.
        to_stdout (bool): Print results instead of writing files back.
        show_diff (bool): Print a unified diff for inputs that change.
        verbosity (int): Program-output verbosity (see `resolve_verbosity`).

    Returns:
        ExitCode: The first error's code, else ``WOULD_CHANGE`` if ``check`` found
        changes, else ``SUCCESS``.
    """
    first_error: ExitCode | None = None
    would_change: bool = False

    for raw in inputs:
        from_stdin: bool = raw == STDIN_SENTINEL
        label: str = "<stdin>" if from_stdin else raw
        try:
            source: str = _read_stdin() if from_stdin else read_source_text(Path(raw))
            result: str = transform(source)
            changed: bool = result != source
            status: ReplaceStatus = (
                ReplaceStatus.REWRITTEN if changed else ReplaceStatus.UNCHANGED
            )
            logger.info("%s: %s", label, status.value)

            if show_diff and changed:
                console.print(
                    render_patch(compute_diff(source, result, label), color=console.enable_color),
                    nl=False,
                )
            if check:
                would_change = would_change or changed
                if verbosity >= 0 and (changed or verbosity >= 1):
                    _report(console, status, label, check=True)
            elif from_stdin or to_stdout:
                if not show_diff:
                    console.write_raw(result)
            else:
                if changed:
                    write_source_text(Path(raw), result)
                if verbosity >= 0 and (changed or verbosity >= 1):
                    _report(console, status, label, check=False)
        except (FmtmarkError, OSError, UnicodeDecodeError) as exc:
            code: ExitCode = exit_code_for(exc)
            logger.error("Error processing %s: %s", label, exc)
            console.error(f"{label}: {exc}")
            if verbosity >= 2 and getattr(exc, "stderr", ""):
                console.error(str(getattr(exc, "stderr")))
            first_error = first_error or code

    if first_error is not None:
        return first_error
    return ExitCode.WOULD_CHANGE if would_change else ExitCode.SUCCESS


def exit_with(code: ExitCode) -> None:
    """Exit the current Click context with ``code`` unless it is ``SUCCESS``."""
    if code != ExitCode.SUCCESS:
        click.get_current_context().exit(int(code))
