# topmark:header:start
#
#   project      : SeqJoin
#   file         : keys.py
#   file_relpath : src/seqjoin/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for SeqJoin configuration.

These are the user-facing keys of ``seqjoin.toml`` and of ``[tool.seqjoin]``
in ``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SeqJoin configuration.

    The ordering mirrors the rendered defaults (`seqjoin config defaults`).
    """

    # [join]
    SECTION_JOIN: Final[str] = "join"

    KEY_DELIMITER: Final[str] = "delimiter"
    KEY_STRATEGY: Final[str] = "strategy"
    KEY_TERMINATOR: Final[str] = "terminator"

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_ELEMENT_FORMAT: Final[str] = "element_format"
    KEY_ITEM_TYPE: Final[str] = "item_type"
