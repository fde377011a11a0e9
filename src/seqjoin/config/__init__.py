# topmark:header:start
#
#   project      : SeqJoin
#   file         : __init__.py
#   file_relpath : src/seqjoin/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for SeqJoin.

Re-exports the immutable `Config` snapshot and the `MutableConfig` builder.
TOML I/O lives in `seqjoin.config.loaders`.
"""

from __future__ import annotations

from seqjoin.config.loaders import ConfigError
from seqjoin.config.model import Config, MutableConfig
from seqjoin.config.types import ItemType

__all__: list[str] = [
    "Config",
    "ConfigError",
    "ItemType",
    "MutableConfig",
]
