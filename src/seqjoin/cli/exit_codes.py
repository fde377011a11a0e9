# topmark:header:start
#
#   project      : SeqJoin
#   file         : exit_codes.py
#   file_relpath : src/seqjoin/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the SeqJoin CLI.

SeqJoin aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SeqJoin CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags/arguments. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: An element could not be formatted. Mirrors ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: An input file does not exist. Mirrors ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
