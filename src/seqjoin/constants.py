# topmark:header:start
#
#   project      : SeqJoin
#   file         : constants.py
#   file_relpath : src/seqjoin/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SeqJoin Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SEQJOIN_VERSION: str = get_version("seqjoin")

DEFAULT_DELIMITER: str = " , "
DEFAULT_TERMINATOR: str = "\n"

# Local config discovery (first match wins):
LOCAL_CONFIG_NAME: str = "seqjoin.toml"
PYPROJECT_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: tuple[str, str] = ("tool", "seqjoin")

LOG_LEVEL_ENV: str = "SEQJOIN_LOG_LEVEL"
