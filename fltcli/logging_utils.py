"""Mini README: Application-wide logging helpers for Fltcli.

Structure:
    * resolve_level - validates a level name or number.
    * configure_root_logger - installs the shared stream handler once.
    * get_logger - module logger factory.

Usage:
    Modules import ``get_logger`` and keep a module level ``LOGGER``. The
    entry point calls ``configure_root_logger`` with the configured level so
    the interactive prompt stays quiet unless something goes wrong. The root
    level is never set above ERROR, so storage failures always reach stderr.
    Repeated calls only adjust the level, preventing duplicate handlers when
    the command loop is started several times in one process.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def resolve_level(level: Union[int, str]) -> int:
    """Return the numeric level for a standard name in any casing."""

    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unsupported log level: {level}")
    return numeric


def configure_root_logger(level: Union[int, str] = logging.WARNING) -> None:
    """Configure the root logger with a readable, timestamped formatter."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(min(resolve_level(level), logging.ERROR))
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)
