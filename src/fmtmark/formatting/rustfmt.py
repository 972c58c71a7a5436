# fmtmark:header:start
#
#   project      : FmtMark
#   file         : rustfmt.py
#   file_relpath : src/fmtmark/formatting/rustfmt.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Formatter backed by the external ``rustfmt`` executable."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from fmtmark.config.logging import get_logger
from fmtmark.config.model import Config
from fmtmark.constants import RUSTFMT_DEFAULT_EXECUTABLE
from fmtmark.core.errors import FormatterError, FormatterNotFoundError
from fmtmark.formatting.base import Formatter, post_process_text

if TYPE_CHECKING:
    from fmtmark.config.logging import FmtmarkLogger
    from fmtmark.config.model import Edition

logger: FmtmarkLogger = get_logger(__name__)


class RustFmt(Formatter):
    """Run ``rustfmt`` on source text or files.

    Source text is fed through stdin and the formatted result read back from
    stdout, so rustfmt never touches the filesystem for `format_str`.

    The executable is ``rustfmt_path`` if given, else ``config.rustfmt_path``, else
    ``rustfmt`` on ``PATH``. Callers wanting the ``RUSTFMT`` environment variable
    honored resolve it first with `fmtmark.config.resolve_rustfmt_path`.

    Attributes:
        rustfmt_path (str): Executable to run.
        edition (Edition): Value passed as ``--edition``.
        config_arg (str | None): Value passed as ``--config``, if any options are set.
    """

    rustfmt_path: str
    edition: Edition
    config_arg: str | None

    def __init__(
        self,
        config: Config | None = None,
        *,
        rustfmt_path: str | None = None,
    ) -> None:
        config = config or Config()
        super().__init__(config.post_process)
        self.rustfmt_path = rustfmt_path or config.rustfmt_path or RUSTFMT_DEFAULT_EXECUTABLE
        self.edition = config.edition
        self.config_arg = config.rustfmt_config_arg()
        logger.debug(
            "RustFmt: path=%s edition=%s config=%s post_process=%s",
            self.rustfmt_path,
            self.edition.key,
            self.config_arg,
            self.post_process.key,
        )

    def build_args(self, path: Path | None = None) -> list[str]:
        """Return the full rustfmt command line, optionally targeting ``path``."""
        args: list[str] = [self.rustfmt_path]
        if path is not None:
            args.append(str(path))
        args += ["--edition", self.edition.key]
        if self.config_arg is not None:
            args += ["--config", self.config_arg]
        return args

    def _run(self, args: list[str], source: str | None = None) -> str:
        logger.trace("Running: %s", args)
        try:
            proc: subprocess.CompletedProcess[bytes] = subprocess.run(
                args,
                input=None if source is None else source.encode("utf-8"),
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            raise FormatterNotFoundError(
                f"Unable to run {self.rustfmt_path!r}: {exc.strerror or exc}"
            ) from exc

        stderr: str = proc.stderr.decode("utf-8", errors="replace")
        if proc.returncode != 0:
            raise FormatterError(
                f"rustfmt exited with status {proc.returncode}: {stderr.strip()}",
                stderr=stderr,
            )
        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FormatterError(f"rustfmt produced invalid UTF-8 output: {exc}") from exc

    def format_str(self, source: str) -> str:
        formatted: str = self._run(self.build_args(), source)
        return post_process_text(self.post_process, formatted)

    def format_file(self, path: Path) -> None:
        if self.post_process.replace_markers:
            # Read, format and post process so the file is written exactly once
            super().format_file(path)
            return
        self._run(self.build_args(Path(path)))
        logger.debug("rustfmt formatted %s in place", path)
