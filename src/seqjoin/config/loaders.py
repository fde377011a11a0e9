# topmark:header:start
#
#   project      : SeqJoin
#   file         : loaders.py
#   file_relpath : src/seqjoin/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading SeqJoin configuration from:
- the runtime defaults defined in code, and
- on-disk TOML files (``seqjoin.toml`` / ``[tool.seqjoin]`` in ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from seqjoin.config.keys import Toml
from seqjoin.config.logging import get_logger
from seqjoin.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_TERMINATOR,
    LOCAL_CONFIG_NAME,
    PYPROJECT_NAME,
    PYPROJECT_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from seqjoin.config.logging import SeqjoinLogger

TomlTable = dict[str, Any]

logger: SeqjoinLogger = get_logger(__name__)


class ConfigError(Exception):
    """Missing, unreadable, malformed or invalid configuration."""


def load_defaults_dict() -> TomlTable:
    """Return SeqJoin's **runtime defaults** as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_JOIN: {
            Toml.KEY_DELIMITER: DEFAULT_DELIMITER,
            Toml.KEY_STRATEGY: "peel-first",
            Toml.KEY_TERMINATOR: DEFAULT_TERMINATOR,
        },
        Toml.SECTION_FORMAT: {
            Toml.KEY_ELEMENT_FORMAT: "",
            Toml.KEY_ITEM_TYPE: "str",
        },
    }


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings and lists."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string, omitting ``None`` values.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cleaned))


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        ConfigError: If ``text`` is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Error decoding TOML from {source}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``seqjoin.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    return parse_toml_text(text, source=str(path))


def extract_tool_table(data: TomlTable, path: Path) -> TomlTable:
    """Return the SeqJoin table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.seqjoin]`` (empty if absent); any
    other file is a dedicated SeqJoin config and used as a whole.
    """
    if path.name != PYPROJECT_NAME:
        return data
    table: Any = data
    for key in PYPROJECT_SECTION:
        table = table.get(key, {}) if isinstance(table, dict) else {}
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def discover_local_config(start: Path) -> Path | None:
    """Return the local config file for the directory ``start``, if any.

    ``seqjoin.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
    counts when it carries a ``[tool.seqjoin]`` table.
    """
    candidate: Path = start / LOCAL_CONFIG_NAME
    if candidate.is_file():
        logger.debug("Found local config: %s", candidate)
        return candidate
    pyproject: Path = start / PYPROJECT_NAME
    if pyproject.is_file():
        try:
            data: TomlTable = load_toml_dict(pyproject)
        except ConfigError:
            logger.debug("Ignoring unreadable %s during discovery", pyproject)
            return None
        if extract_tool_table(data, pyproject):
            logger.debug("Found [tool.seqjoin] in %s", pyproject)
            return pyproject
    return None


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table`` (empty dict when absent).

    Raises:
        ConfigError: If ``key`` exists but is not a table.
    """
    value: Any = table.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}")
    return cast("TomlTable", value)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return the string value of ``key``, or None when absent.

    Raises:
        ConfigError: If ``key`` is present but not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}: {value!r}")
