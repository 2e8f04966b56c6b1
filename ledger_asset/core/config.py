"""
Runtime configuration for the ledger asset package.

Record handling is not configurable: the unknown-key policy is chosen per
call and defaults to `reject`. The only setting read from the environment
is the log level of the package loggers.

Environment variables:
    - LEDGER_ASSET_LOG_LEVEL: Level for the `ledger_asset` loggers
      (default: WARNING). Read from the process environment, falling back
      to a `.env` file in the working directory. The `.env` file is parsed
      without being loaded into `os.environ`.
"""

import logging
import os
from dotenv import dotenv_values, find_dotenv

# ------------------------------------------------------------------------------
# Unknown field policy
# ------------------------------------------------------------------------------

REJECT = "reject"
IGNORE = "ignore"
UNKNOWN_FIELD_POLICIES = (REJECT, IGNORE)

# ------------------------------------------------------------------------------
# Logging
# ------------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> str:
    """
    Returns the configured level name for the package loggers.

    Raises:
        ValueError: If `LEDGER_ASSET_LOG_LEVEL` is not a known level name.

    Returns:
        str: Upper-case level name such as `"DEBUG"` or `"WARNING"`.
    """

    level = os.getenv("LEDGER_ASSET_LOG_LEVEL")
    if level is None:
        level = dotenv_values(find_dotenv(usecwd=True)).get("LEDGER_ASSET_LOG_LEVEL")
    level = (level or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid LEDGER_ASSET_LOG_LEVEL value {level!r}")
    return level


def get_logger(name: str) -> logging.Logger:
    """Return a module logger with the configured level applied."""
    logger = logging.getLogger(name)
    logger.setLevel(get_log_level())
    return logger
