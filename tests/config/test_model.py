# topmark:header:start
#
#   project      : SeqJoin
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model: defaults, freeze/thaw, merge policy and CLI overrides."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import pytest

from seqjoin.config import Config, ConfigError, ItemType, MutableConfig
from seqjoin.core.errors import InvalidArgumentError
from seqjoin.core.strategies import JoinStrategy
from tests.conftest import make_config

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    """Built-in defaults: ' , ' delimiter, peel-first, newline terminator, str items."""
    cfg: Config = MutableConfig.from_defaults().freeze()
    assert cfg.delimiter == " , "
    assert cfg.strategy is JoinStrategy.PEEL_FIRST
    assert cfg.terminator == "\n"
    assert cfg.element_format is None
    assert cfg.item_type is ItemType.STR
    assert cfg.config_files == ()


def test_empty_builder_freezes_to_defaults() -> None:
    """Unset values fall back to the built-in defaults on freeze."""
    assert MutableConfig().freeze() == Config()


def test_config_is_frozen() -> None:
    """`Config` must not be mutated in place."""
    cfg: Config = make_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.delimiter = "x"  # type: ignore[misc]


def test_thaw_freeze_roundtrip_preserves_values() -> None:
    """Thaw, edit, freeze is the supported update path."""
    cfg: Config = make_config(delimiter="|", strategy=JoinStrategy.BOUNDARY_FLAG)
    draft: MutableConfig = cfg.thaw()
    draft.terminator = ""
    updated: Config = draft.freeze()
    assert updated.delimiter == "|"
    assert updated.strategy is JoinStrategy.BOUNDARY_FLAG
    assert updated.terminator == ""
    assert cfg.terminator == "\n"


def test_empty_delimiter_is_kept() -> None:
    """An empty delimiter is a value, not 'unset'."""
    assert make_config(delimiter="").delimiter == ""


def test_merge_last_wins_for_set_values() -> None:
    """Values set by a later layer override; unset ones keep the earlier value."""
    base = MutableConfig(delimiter=", ", terminator="\n", config_files=["a.toml"])
    top = MutableConfig(delimiter="; ", item_type=ItemType.INT, config_files=["b.toml"])
    merged: Config = base.merge_with(top).freeze()
    assert merged.delimiter == "; "
    assert merged.terminator == "\n"
    assert merged.item_type is ItemType.INT
    assert merged.config_files == ("a.toml", "b.toml")


def test_from_toml_dict_reads_both_sections() -> None:
    """Both ``[join]`` and ``[format]`` keys are honored."""
    draft: MutableConfig = MutableConfig.from_toml_dict(
        {
            "join": {"delimiter": "/", "strategy": "boundary-flag", "terminator": "!"},
            "format": {"element_format": ".1f", "item_type": "float"},
        }
    )
    cfg: Config = draft.freeze()
    assert (cfg.delimiter, cfg.terminator) == ("/", "!")
    assert cfg.strategy is JoinStrategy.BOUNDARY_FLAG
    assert cfg.element_format == ".1f"
    assert cfg.item_type is ItemType.FLOAT


@pytest.mark.parametrize(
    "data, match",
    [
        ({"join": {"strategy": "zigzag"}}, "zigzag"),
        ({"format": {"item_type": "complex"}}, "unknown item type"),
        ({"join": {"delimiter": 3}}, "must be a string"),
        ({"join": "oops"}, "must be a table"),
    ],
)
def test_from_toml_dict_rejects_invalid_values(data: dict[str, object], match: str) -> None:
    """Invalid values are configuration errors."""
    with pytest.raises(ConfigError, match=match):
        MutableConfig.from_toml_dict(data)


def test_to_toml_dict_shape() -> None:
    """The TOML shape mirrors the documented sections."""
    assert make_config().to_toml_dict() == {
        "join": {"delimiter": " , ", "strategy": "peel-first", "terminator": "\n"},
        "format": {"element_format": "", "item_type": "str"},
    }


def test_apply_cli_args_overrides_and_ignores_none() -> None:
    """CLI overrides win; ``None`` means the flag was not given."""
    draft = MutableConfig.from_defaults()
    draft.apply_cli_args(
        {"delimiter": "-", "strategy": "boundary_flag", "terminator": None, "item_type": "int"}
    )
    cfg: Config = draft.freeze()
    assert cfg.delimiter == "-"
    assert cfg.strategy is JoinStrategy.BOUNDARY_FLAG
    assert cfg.terminator == "\n"
    assert cfg.item_type is ItemType.INT


@pytest.mark.parametrize("args", [{"strategy": "nope"}, {"item_type": "nope"}])
def test_apply_cli_args_rejects_unknown_choices(args: dict[str, str]) -> None:
    """Unknown strategy or item type names are invalid arguments."""
    with pytest.raises(InvalidArgumentError):
        MutableConfig().apply_cli_args(args)


def test_load_merged_layers_local_then_explicit(isolation: Path) -> None:
    """Local ``seqjoin.toml`` applies first, explicit files after it."""
    (isolation / "seqjoin.toml").write_text(
        '[join]\ndelimiter = ";"\nterminator = ""\n', encoding="utf-8"
    )
    extra: Path = isolation / "extra.toml"
    extra.write_text('[join]\ndelimiter = "|"\n', encoding="utf-8")

    cfg: Config = MutableConfig.load_merged(config_paths=[extra], cwd=isolation).freeze()
    assert cfg.delimiter == "|"
    assert cfg.terminator == ""
    assert cfg.config_files == (str(isolation / "seqjoin.toml"), str(extra))


def test_load_merged_no_config_skips_discovery(isolation: Path) -> None:
    """``no_config`` ignores the local file but still honors explicit ones."""
    (isolation / "seqjoin.toml").write_text('[join]\ndelimiter = ";"\n', encoding="utf-8")
    cfg: Config = MutableConfig.load_merged(no_config=True, cwd=isolation).freeze()
    assert cfg.delimiter == " , "
    assert cfg.config_files == ()


def test_load_merged_reads_pyproject_tool_table(isolation: Path) -> None:
    """``[tool.seqjoin]`` in ``pyproject.toml`` is a local config source."""
    (isolation / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.seqjoin.format]\nitem_type = "int"\n',
        encoding="utf-8",
    )
    cfg: Config = MutableConfig.load_merged(cwd=isolation).freeze()
    assert cfg.item_type is ItemType.INT


def test_missing_explicit_config_file_raises(isolation: Path) -> None:
    """An explicit config file that cannot be read is an error."""
    with pytest.raises(ConfigError, match="Cannot read config file"):
        MutableConfig.load_merged(config_paths=[isolation / "absent.toml"])
