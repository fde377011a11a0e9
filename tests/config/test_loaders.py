# topmark:header:start
#
#   project      : SeqJoin
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML loading, rendering and local config discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import tomlkit

from seqjoin.config.loaders import (
    ConfigError,
    discover_local_config,
    extract_tool_table,
    load_defaults_dict,
    load_toml_dict,
    parse_toml_text,
    to_toml,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_dict_is_a_fresh_copy() -> None:
    """Callers may mutate the defaults dict without affecting later calls."""
    first = load_defaults_dict()
    first["join"]["delimiter"] = "X"
    assert load_defaults_dict()["join"]["delimiter"] == " , "


def test_to_toml_renders_parseable_document() -> None:
    """Rendered TOML parses back to the same table."""
    data = load_defaults_dict()
    text: str = to_toml(data)
    assert "[join]" in text
    assert "[format]" in text
    assert tomlkit.parse(text).unwrap() == data


def test_to_toml_omits_none() -> None:
    """``None`` has no TOML representation and is dropped."""
    text: str = to_toml({"join": {"delimiter": ",", "terminator": None}})
    assert "terminator" not in text


def test_parse_toml_text_reports_source() -> None:
    """Malformed TOML is a configuration error naming its source."""
    with pytest.raises(ConfigError, match="my.toml"):
        parse_toml_text("[join\n", source="my.toml")


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    """Unreadable files are configuration errors."""
    with pytest.raises(ConfigError, match="Cannot read"):
        load_toml_dict(tmp_path / "nope.toml")


def test_extract_tool_table(tmp_path: Path) -> None:
    """Only ``pyproject.toml`` is narrowed to ``[tool.seqjoin]``."""
    data = {"tool": {"seqjoin": {"join": {"delimiter": "-"}}, "other": {}}}
    assert extract_tool_table(data, tmp_path / "pyproject.toml") == {
        "join": {"delimiter": "-"}
    }
    assert extract_tool_table(data, tmp_path / "custom.toml") is data
    assert extract_tool_table({"project": {}}, tmp_path / "pyproject.toml") == {}


def test_discover_prefers_seqjoin_toml(tmp_path: Path) -> None:
    """``seqjoin.toml`` wins over ``pyproject.toml``."""
    (tmp_path / "pyproject.toml").write_text("[tool.seqjoin.join]\ndelimiter = '-'\n")
    (tmp_path / "seqjoin.toml").write_text("[join]\n")
    assert discover_local_config(tmp_path) == tmp_path / "seqjoin.toml"


def test_discover_requires_tool_table_in_pyproject(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.seqjoin]`` is not a config source."""
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n")
    assert discover_local_config(tmp_path) is None
    (tmp_path / "pyproject.toml").write_text("[tool.seqjoin.join]\ndelimiter = '-'\n")
    assert discover_local_config(tmp_path) == tmp_path / "pyproject.toml"


def test_discover_nothing(tmp_path: Path) -> None:
    """No candidate files means no local config."""
    assert discover_local_config(tmp_path) is None
