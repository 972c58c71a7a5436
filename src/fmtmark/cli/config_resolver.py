# fmtmark:header:start
#
#   project      : FmtMark
#   file         : config_resolver.py
#   file_relpath : src/fmtmark/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Resolve FmtMark configuration from Click parameters.

Resolution order (lowest → highest precedence):
  1. Built-in defaults.
  2. Discovered project configs (root → nearest), unless ``--no-config``. In each
     directory ``pyproject.toml`` (``[tool.fmtmark]``) is merged before
     ``fmtmark.toml``; a file setting ``root = true`` stops the upward walk.
  3. Explicit config files passed via ``--config``, in order.
  4. CLI overrides (``--edition``, ``--post-process``, ``--rustfmt``, ``--option``).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from fmtmark.cli.errors import FmtmarkConfigError
from fmtmark.config.logging import get_logger
from fmtmark.config.model import MutableConfig
from fmtmark.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from fmtmark.config.logging import FmtmarkLogger
    from fmtmark.config.model import Edition, PostProcess

logger: FmtmarkLogger = get_logger(__name__)


def discovery_anchor(paths: Sequence[str]) -> Path:
    """Return the directory config discovery starts from.

    That is the first real input path (its parent if it is a file), or the
    current working directory when only STDIN (``-``) or nothing was given.
    """
    for raw in paths:
        if raw and raw != "-":
            p = Path(raw)
            return (p.parent if p.is_file() else p).resolve()
    return Path.cwd().resolve()


def resolve_config_from_click(
    *,
    paths: Sequence[str] = (),
    no_config: bool = False,
    config_paths: Iterable[str] = (),
    edition: Edition | None = None,
    post_process: PostProcess | None = None,
    rustfmt_path: str | None = None,
    options: Iterable[tuple[str, str]] = (),
) -> MutableConfig:
    """Build a merged `MutableConfig` from Click parameters.

    Args:
        paths (Sequence[str]): Input paths, used to anchor discovery.
        no_config (bool): If True, skip discovered project config files.
        config_paths (Iterable[str]): Extra config TOML files to merge, in order.
        edition (Edition | None): ``--edition`` override.
        post_process (PostProcess | None): ``--post-process`` override.
        rustfmt_path (str | None): ``--rustfmt`` override.
        options (Iterable[tuple[str, str]]): ``--option KEY=VALUE`` overrides.

    Returns:
        MutableConfig: The merged draft; call ``.freeze()`` for the runtime `Config`.

    Raises:
        FmtmarkConfigError: If a configuration file holds an invalid value.
    """
    anchor: Path = discovery_anchor(paths)
    logger.debug("Config discovery anchor: %s", anchor)
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            anchor=anchor,
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except ConfigError as exc:
        raise FmtmarkConfigError(str(exc)) from exc

    # CLI overrides last
    if edition is not None:
        draft.with_edition(edition)
    if post_process is not None:
        draft.with_post_process(post_process)
    if rustfmt_path:
        draft.with_rustfmt_path(rustfmt_path)
    for key, value in options:
        draft.with_option(key, value)

    logger.trace("Resolved config draft: %s", draft)
    return draft
