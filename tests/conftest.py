# fmtmark:header:start
#
#   project      : FmtMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Pytest configuration for the FmtMark test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:
    - Build configs using `fmtmark.config.MutableConfig` (mutable), then
      `freeze()` into a `fmtmark.config.Config` for formatter calls.
    - Do **not** mutate a frozen `Config`. If you need to tweak one,
      call `Config.thaw()`, edit the returned `MutableConfig`,
      then `freeze()` again.
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from fmtmark.config import logging

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def write_text(path: Path, content: str, *, dedent: bool = True) -> Path:
    """Write ``content`` to ``path`` byte-for-byte, creating parents.

    Args:
        path (Path): Destination file.
        content (str): Text to write; dedented (and a leading newline dropped)
            unless ``dedent`` is False.
        dedent (bool): Whether to dedent ``content`` first.

    Returns:
        Path: ``path``, for chaining.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    text: str = textwrap.dedent(content).lstrip("\n") if dedent else content
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)
    return path


def read_text(path: Path) -> str:
    """Read ``path`` without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables from leaking into tests.

    ``FMTMARK_LOG_LEVEL`` would add log noise, ``RUSTFMT`` would change which
    executable the formatter resolves, and ``FORCE_COLOR``/``NO_COLOR`` would
    change CLI output.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for key in ("FMTMARK_LOG_LEVEL", "RUSTFMT", "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(key, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so replacement traces are exercised."""
    logging.setup_logging(level=logging.TRACE_LEVEL)
