"""Logger configuration for the package."""

from __future__ import annotations

import logging
import sys
from typing import Union

_PACKAGE_LOGGER_NAME = "rank_snapshots"
_FORMATTER = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
_HANDLER = logging.StreamHandler(sys.stderr)
_HANDLER.setFormatter(_FORMATTER)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a stderr handler to the package logger and set its level.

    Safe to call repeatedly: the handler is only added once, later calls
    just change the level.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
    logger.setLevel(_resolve_level(level))
    if _HANDLER not in logger.handlers:
        logger.addHandler(_HANDLER)
    return logger
