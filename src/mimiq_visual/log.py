"""Logging setup for the command line.

Library modules get their logger with ``logging.getLogger(__name__)`` and
never configure handlers themselves.
"""

from __future__ import annotations

import logging
from enum import Enum

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class LogLevel(str, Enum):
    """Log levels accepted by ``--log-level``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def numeric(self) -> int:
        """Numeric ``logging`` level."""
        return logging.getLevelNamesMapping()[self.value]


def setup_default_logging(level: LogLevel | str | int = LogLevel.WARNING) -> bool:
    """Configure root logging unless the host application already did.

    Args:
        level: LogLevel, level name (any case) or numeric level.

    Returns:
        True if a handler was installed, False if logging was already set up.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    if isinstance(level, int):
        lvl = level
    else:
        lvl = _parse_level(level).numeric

    if logging.getLogger().handlers:
        return False
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    return True


def _parse_level(level: LogLevel | str) -> LogLevel:
    if isinstance(level, LogLevel):
        return level
    try:
        return LogLevel(level.upper())
    except ValueError:
        valid = [lvl.value for lvl in LogLevel]
        raise ValueError(f"Unknown log level: '{level}'. Valid: {valid}") from None


__all__ = ["LOG_FORMAT", "LogLevel", "setup_default_logging"]
