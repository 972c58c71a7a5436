# fmtmark:header:start
#
#   project      : FmtMark
#   file         : model.py
#   file_relpath : src/fmtmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# fmtmark:header:end

"""Configuration model for FmtMark.

Two shapes, as elsewhere in the project:

- `MutableConfig`: a builder used while discovering and merging layers
  (defaults, project files, explicit ``--config`` files, CLI overrides). Unset
  values are ``None`` so later layers only override what they actually set.
- `Config`: the frozen runtime snapshot produced by `MutableConfig.freeze`.

Environment lookups (``RUSTFMT``) happen in `resolve_rustfmt_path`, called by
the CLI; the formatter itself only ever receives an explicit path.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from fmtmark.config.io import (
    coerce_option_value,
    extract_tool_table,
    get_bool_value,
    get_enum_value_or_none,
    get_options_table,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from fmtmark.config.keys import Toml
from fmtmark.config.logging import get_logger
from fmtmark.constants import (
    FMTMARK_TOML_NAME,
    PYPROJECT_TOML_NAME,
    RUSTFMT_DEFAULT_EXECUTABLE,
    RUSTFMT_ENV_KEY,
)
from fmtmark.core.enum_mixins import KeyedStrEnum
from fmtmark.core.errors import ConfigError

if TYPE_CHECKING:
    from fmtmark.config.io import TomlTable
    from fmtmark.config.logging import FmtmarkLogger

logger: FmtmarkLogger = get_logger(__name__)


class Edition(KeyedStrEnum):
    """The Rust edition passed to rustfmt (``--edition``)."""

    RUST_2015 = ("2015", "Rust 2015 edition", ("rust2015",))
    RUST_2018 = ("2018", "Rust 2018 edition", ("rust2018",))
    RUST_2021 = ("2021", "Rust 2021 edition", ("rust2021",))
    RUST_2024 = ("2024", "Rust 2024 edition", ("rust2024",))


class PostProcess(KeyedStrEnum):
    """What to rewrite after formatting."""

    NONE = ("none", "No post processing", ("off",))
    REPLACE_MARKERS = (
        "replace-markers",
        "Replace _blank_!/_comment_! markers",
        ("markers",),
    )
    REPLACE_MARKERS_AND_DOC_BLOCKS = (
        "replace-markers-and-doc-blocks",
        "Replace markers and #[doc = \"...\"] attributes",
        ("all", "markers-and-doc-blocks"),
    )

    @property
    def replace_markers(self) -> bool:
        """True if blank and comment markers should be replaced."""
        return self is not PostProcess.NONE

    @property
    def replace_doc_blocks(self) -> bool:
        """True if ``#[doc = "..."]`` attributes should become ``///`` comments."""
        return self is PostProcess.REPLACE_MARKERS_AND_DOC_BLOCKS


DEFAULT_EDITION: Edition = Edition.RUST_2021
DEFAULT_POST_PROCESS: PostProcess = PostProcess.NONE


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for FmtMark.

    Attributes:
        rustfmt_path (str | None): Explicit rustfmt executable; None defers to
            the environment / PATH (see `resolve_rustfmt_path`).
        edition (Edition): Rust edition passed to rustfmt.
        post_process (PostProcess): What to rewrite after formatting.
        options (Mapping[str, str]): rustfmt ``--config`` options, in declaration order.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    rustfmt_path: str | None = None
    edition: Edition = DEFAULT_EDITION
    post_process: PostProcess = DEFAULT_POST_PROCESS
    options: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    config_files: tuple[Path, ...] = ()

    def rustfmt_config_arg(self) -> str | None:
        """Return the ``--config`` argument value (``k=v,k2=v2``), or None without options."""
        if not self.options:
            return None
        return ",".join(f"{k}={v}" for k, v in self.options.items())

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict."""
        rustfmt_tbl: TomlTable = {
            Toml.KEY_PATH: self.rustfmt_path,
            Toml.KEY_EDITION: self.edition.key,
            Toml.SECTION_OPTIONS: dict(self.options),
        }
        return {
            Toml.SECTION_RUSTFMT: rustfmt_tbl,
            Toml.SECTION_POST_PROCESS: {Toml.KEY_MODE: self.post_process.key},
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this Config."""
        return MutableConfig(
            rustfmt_path=self.rustfmt_path,
            edition=self.edition,
            post_process=self.post_process,
            options=dict(self.options),
            config_files=list(self.config_files),
        )


def resolve_rustfmt_path(config: Config, environ: Mapping[str, str] | None = None) -> str:
    """Return the rustfmt executable to run.

    Precedence: the configured path, then the ``RUSTFMT`` environment variable,
    then ``rustfmt`` looked up on ``PATH``.

    Args:
        config (Config): The runtime configuration.
        environ (Mapping[str, str] | None): Environment to consult; defaults to
            ``os.environ``.

    Returns:
        str: Path or command name of the rustfmt executable.
    """
    if config.rustfmt_path:
        return config.rustfmt_path
    env: Mapping[str, str] = os.environ if environ is None else environ
    return env.get(RUSTFMT_ENV_KEY) or RUSTFMT_DEFAULT_EXECUTABLE


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        rustfmt_path (str | None): Explicit rustfmt executable.
        edition (Edition | None): Rust edition, None = inherit.
        post_process (PostProcess | None): Post-processing mode, None = inherit.
        options (dict[str, str]): rustfmt ``--config`` options.
        config_files (list[Path]): Config files merged into this draft.
    """

    rustfmt_path: str | None = None
    edition: Edition | None = None
    post_process: PostProcess | None = None
    options: dict[str, str] = field(default_factory=lambda: {})
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Builder API ----------------------------
    def with_rustfmt_path(self, path: str | os.PathLike[str]) -> MutableConfig:
        """Set the rustfmt executable (takes precedence over ``RUSTFMT``)."""
        self.rustfmt_path = os.fspath(path)
        return self

    def with_edition(self, edition: Edition) -> MutableConfig:
        """Set the Rust edition of the source input."""
        self.edition = edition
        return self

    def with_post_process(self, post_process: PostProcess) -> MutableConfig:
        """Set the post-processing mode applied after formatting."""
        self.post_process = post_process
        return self

    def with_option(self, key: str, value: object) -> MutableConfig:
        """Set a rustfmt ``--config`` option (see rustfmt's configuration docs)."""
        self.options[key] = coerce_option_value(key, value)
        return self

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, applying defaults."""
        return Config(
            rustfmt_path=self.rustfmt_path,
            edition=self.edition or DEFAULT_EDITION,
            post_process=self.post_process or DEFAULT_POST_PROCESS,
            options=MappingProxyType(dict(self.options)),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed FmtMark TOML table.

        A relative ``rustfmt.path`` containing a path separator is resolved
        against the config file's directory; a bare command name is kept as-is
        so it is looked up on ``PATH``.

        Args:
            data (TomlTable): The FmtMark table (top level of ``fmtmark.toml``
                or ``[tool.fmtmark]``).
            config_file (Path | None): File the table came from, if any.

        Returns:
            MutableConfig: The resulting draft.

        Raises:
            ConfigError: If a value has the wrong type or is not recognized.
        """
        rustfmt_tbl: TomlTable = get_table_value(data, Toml.SECTION_RUSTFMT)
        logger.trace("TOML [rustfmt]: %s", rustfmt_tbl)
        post_tbl: TomlTable = get_table_value(data, Toml.SECTION_POST_PROCESS)
        logger.trace("TOML [post_process]: %s", post_tbl)

        source: str = str(config_file) if config_file else "defaults"
        try:
            path: str | None = get_string_value_or_none(rustfmt_tbl, Toml.KEY_PATH)
            edition: Edition | None = get_enum_value_or_none(
                rustfmt_tbl, Toml.KEY_EDITION, Edition
            )
            post_process: PostProcess | None = get_enum_value_or_none(
                post_tbl, Toml.KEY_MODE, PostProcess
            )
            options: dict[str, str] = get_options_table(rustfmt_tbl, Toml.SECTION_OPTIONS)
        except ConfigError as exc:
            raise ConfigError(f"{source}: {exc}") from exc

        if path and config_file is not None and (os.sep in path or "/" in path):
            candidate = Path(path)
            if not candidate.is_absolute():
                path = str((config_file.parent / candidate).resolve())

        return cls(
            rustfmt_path=path,
            edition=edition,
            post_process=post_process,
            options=options,
            config_files=[config_file] if config_file else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``fmtmark.toml`` and ``pyproject.toml`` (``[tool.fmtmark]``).

        Returns:
            MutableConfig | None: The draft, or None if ``pyproject.toml`` has no
            ``[tool.fmtmark]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_tool_table(path, load_toml_dict(path))
        if table is None:
            logger.debug("No [tool.fmtmark] section in %s", path)
            return None
        draft: MutableConfig = cls.from_toml_dict(table, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found by walking upward from ``start``.

        Files are returned root-most first, nearest last; within one directory
        ``pyproject.toml`` comes before ``fmtmark.toml`` so the latter wins when
        merged. A config declaring ``root = true`` stops the walk.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []

            for name in (PYPROJECT_TOML_NAME, FMTMARK_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                table: TomlTable | None = extract_tool_table(p, load_toml_dict(p))
                if table is None:
                    continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if get_bool_value(table, Toml.KEY_ROOT):
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Merge order (lowest → highest precedence):
            1) Built-in defaults
            2) Project configs discovered upward from ``anchor`` (root → nearest)
            3) Extra config files passed explicitly (in the order provided)

        Args:
            anchor (Path | None): Discovery start (file or directory); CWD if None.
            extra_config_files (Iterable[Path] | None): Explicit config files.
            no_config (bool): If True, skip discovery.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            path = Path(extra)
            mc = cls.from_toml_file(path)
            if mc is None:
                raise ConfigError(f"{path}: no FmtMark configuration found")
            draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Options are merged key by key; config file provenance is concatenated.
        """
        return replace(
            self,
            rustfmt_path=other.rustfmt_path or self.rustfmt_path,
            edition=other.edition or self.edition,
            post_process=other.post_process or self.post_process,
            options={**self.options, **other.options},
            config_files=[*self.config_files, *other.config_files],
        )
