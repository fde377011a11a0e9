# topmark:header:start
#
#   project      : SeqJoin
#   file         : model.py
#   file_relpath : src/seqjoin/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the CLI.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (last wins for every value a layer sets):
    defaults → local ``seqjoin.toml`` / ``[tool.seqjoin]`` → explicit
    ``--config`` files (in order) → CLI flags.

Immutability:
    - `Config` is ``frozen=True``. Use `Config.thaw` → edit →
      `MutableConfig.freeze` for safe updates.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from seqjoin.config.keys import Toml
from seqjoin.config.loaders import (
    ConfigError,
    discover_local_config,
    extract_tool_table,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from seqjoin.config.logging import get_logger
from seqjoin.config.types import ItemType
from seqjoin.constants import DEFAULT_DELIMITER, DEFAULT_TERMINATOR
from seqjoin.core.errors import InvalidArgumentError
from seqjoin.core.strategies import JoinStrategy, coerce_strategy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from seqjoin.config.loaders import TomlTable
    from seqjoin.config.logging import SeqjoinLogger

# ArgsLike: generic mapping accepted by `MutableConfig.apply_cli_args`.
ArgsLike = Mapping[str, Any]

logger: SeqjoinLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        delimiter (str): Separator between adjacent elements.
        strategy (JoinStrategy): Join algorithm.
        terminator (str): Text written after a non-empty sequence.
        element_format (str | None): Element formatter spec (``None`` = ``str``).
        item_type (ItemType): Coercion applied to textual CLI items.
        config_files (tuple[str, ...]): Config files that contributed, in load order.
    """

    delimiter: str = DEFAULT_DELIMITER
    strategy: JoinStrategy = JoinStrategy.PEEL_FIRST
    terminator: str = DEFAULT_TERMINATOR
    element_format: str | None = None
    item_type: ItemType = ItemType.STR
    config_files: tuple[str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return this config in the TOML shape (see `seqjoin.config.keys.Toml`)."""
        return {
            Toml.SECTION_JOIN: {
                Toml.KEY_DELIMITER: self.delimiter,
                Toml.KEY_STRATEGY: self.strategy.value,
                Toml.KEY_TERMINATOR: self.terminator,
            },
            Toml.SECTION_FORMAT: {
                Toml.KEY_ELEMENT_FORMAT: self.element_format or "",
                Toml.KEY_ITEM_TYPE: self.item_type.value,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            delimiter=self.delimiter,
            strategy=self.strategy,
            terminator=self.terminator,
            element_format=self.element_format,
            item_type=self.item_type,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``None`` means "not set by this layer"; `merge_with` only lets set values
    override, and `freeze` falls back to the built-in defaults.
    """

    delimiter: str | None = None
    strategy: JoinStrategy | None = None
    terminator: str | None = None
    element_format: str | None = None
    item_type: ItemType | None = None
    config_files: list[str] = field(default_factory=list)

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            delimiter=self.delimiter if self.delimiter is not None else DEFAULT_DELIMITER,
            strategy=self.strategy or JoinStrategy.PEEL_FIRST,
            terminator=self.terminator if self.terminator is not None else DEFAULT_TERMINATOR,
            # An empty element format means "type default".
            element_format=self.element_format or None,
            item_type=self.item_type or ItemType.STR,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated from the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a builder from a parsed SeqJoin TOML table.

        Args:
            data (TomlTable): The SeqJoin table (already extracted from ``pyproject.toml``).
            config_file (Path | None): Source file, recorded in ``config_files``.

        Returns:
            MutableConfig: The resulting builder.

        Raises:
            ConfigError: If a value has the wrong type or names an unknown choice.
        """
        source: str = str(config_file) if config_file else "<defaults>"

        join_tbl: TomlTable = get_table_value(data, Toml.SECTION_JOIN)
        logger.trace("TOML [join] from %s: %s", source, join_tbl)
        format_tbl: TomlTable = get_table_value(data, Toml.SECTION_FORMAT)
        logger.trace("TOML [format] from %s: %s", source, format_tbl)

        draft = cls(config_files=[str(config_file)] if config_file else [])

        draft.delimiter = get_string_value_or_none(join_tbl, Toml.KEY_DELIMITER)
        draft.terminator = get_string_value_or_none(join_tbl, Toml.KEY_TERMINATOR)

        strategy_name: str | None = get_string_value_or_none(join_tbl, Toml.KEY_STRATEGY)
        if strategy_name is not None:
            try:
                draft.strategy = coerce_strategy(strategy_name)
            except InvalidArgumentError as e:
                raise ConfigError(f"{source}: {e}") from e

        draft.element_format = get_string_value_or_none(format_tbl, Toml.KEY_ELEMENT_FORMAT)

        item_type_name: str | None = get_string_value_or_none(format_tbl, Toml.KEY_ITEM_TYPE)
        if item_type_name is not None:
            item_type: ItemType | None = ItemType.from_name(item_type_name)
            if item_type is None:
                choices: str = ", ".join(t.value for t in ItemType)
                raise ConfigError(
                    f"{source}: unknown item type {item_type_name!r} (expected one of: {choices})"
                )
            draft.item_type = item_type

        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a builder from ``seqjoin.toml`` or ``pyproject.toml``.

        Raises:
            ConfigError: If the file cannot be read, parsed or validated.
        """
        data: TomlTable = load_toml_dict(path)
        return cls.from_toml_dict(extract_tool_table(data, path), config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        config_paths: Iterable[Path | str] = (),
        no_config: bool = False,
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Build the layered configuration (defaults, local file, explicit files).

        Args:
            config_paths (Iterable[Path | str]): Explicit config files, applied in order.
            no_config (bool): Skip discovery of the local config file.
            cwd (Path | None): Directory used for discovery (defaults to the CWD).

        Returns:
            MutableConfig: The merged builder (CLI overrides not yet applied).
        """
        merged: MutableConfig = cls.from_defaults()
        if not no_config:
            local: Path | None = discover_local_config(cwd or Path.cwd())
            if local is not None:
                merged = merged.merge_with(cls.from_toml_file(local))
        for raw in config_paths:
            path = Path(raw)
            logger.debug("Applying explicit config file %s", path)
            merged = merged.merge_with(cls.from_toml_file(path))
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one."""
        return MutableConfig(
            delimiter=other.delimiter if other.delimiter is not None else self.delimiter,
            strategy=other.strategy or self.strategy,
            terminator=other.terminator if other.terminator is not None else self.terminator,
            element_format=(
                other.element_format if other.element_format is not None else self.element_format
            ),
            item_type=other.item_type or self.item_type,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides in place and return ``self``.

        Recognized keys: ``delimiter``, ``strategy``, ``terminator``,
        ``element_format``, ``item_type``. Missing or ``None`` values are ignored.

        Raises:
            InvalidArgumentError: If ``strategy`` or ``item_type`` names no known choice.
        """
        if args.get("delimiter") is not None:
            self.delimiter = args["delimiter"]
        if args.get("strategy") is not None:
            self.strategy = coerce_strategy(args["strategy"])
        if args.get("terminator") is not None:
            self.terminator = args["terminator"]
        if args.get("element_format") is not None:
            self.element_format = args["element_format"]
        if args.get("item_type") is not None:
            raw: ItemType | str = args["item_type"]
            item_type: ItemType | None = (
                raw if isinstance(raw, ItemType) else ItemType.from_name(raw)
            )
            if item_type is None:
                raise InvalidArgumentError(f"Unknown item type {raw!r}")
            self.item_type = item_type
        return self
