# topmark:header:start
#
#   project      : SeqJoin
#   file         : config_resolver.py
#   file_relpath : src/seqjoin/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective configuration for a CLI command.

Applies the layering documented in `seqjoin.config.model` and converts
configuration failures into CLI errors with the proper exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from seqjoin.cli.errors import SeqjoinConfigError, SeqjoinUsageError
from seqjoin.config import ConfigError, MutableConfig
from seqjoin.config.logging import get_logger
from seqjoin.core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from seqjoin.config import Config

logger = get_logger(__name__)


def resolve_config_from_click(
    *,
    config_paths: Sequence[str],
    no_config: bool,
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Return the frozen configuration for a command invocation.

    Args:
        config_paths (Sequence[str]): Explicit ``--config`` files, in order.
        no_config (bool): Whether ``--no-config`` was passed.
        overrides (Mapping[str, Any] | None): CLI flag values (``None`` = not given).

    Returns:
        Config: The effective configuration.

    Raises:
        SeqjoinConfigError: If a config file is missing, malformed or invalid.
        SeqjoinUsageError: If a CLI override is invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            config_paths=config_paths,
            no_config=no_config,
        )
    except ConfigError as e:
        raise SeqjoinConfigError(str(e)) from e

    if overrides:
        try:
            draft.apply_cli_args(overrides)
        except InvalidArgumentError as e:
            raise SeqjoinUsageError(str(e)) from e

    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config
