"""Logging setup for nanodisc, built on loguru.

Usage:
    from nanodisc.core.log import logger
    logger.debug("Resolved {}", value)

Environment Variables:
    NANODISC_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    NANODISC_LOG_FILE: path to log file (optional)
"""

from __future__ import annotations

import os
import sys

from loguru import logger

logger.remove()

_log_level = os.environ.get("NANODISC_LOG_LEVEL", "WARNING").upper()
_log_file = os.environ.get("NANODISC_LOG_FILE")

_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.add(sys.stderr, level=_log_level, format=_human_format, colorize=None)

if _log_file:
    logger.add(_log_file, level=_log_level, format=_human_format, colorize=False, encoding="utf-8")

__all__ = ["logger"]
