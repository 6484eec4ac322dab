"""Logging setup for modbox.

Version: 0.2.0

Everything in modbox logs through loggers below ``modbox``. This module
adjusts that subtree only; the root logger belongs to the host application.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "modbox"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_log_level(level: str | int | None) -> int:
    """Turn a level name or number into a logging level.

    Names are case-insensitive and ``WARN`` is accepted. Empty or unknown
    names resolve to INFO.
    """
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    name = level.strip().upper()
    if name == "WARN":
        name = "WARNING"
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(
    level: str | int | None,
    log_file: Optional[str | Path] = None,
) -> logging.Logger:
    """Set the modbox log level and optionally mirror records to a file.

    Calling this again with the same file does not add a second handler.

    Args:
        level: Level name or number for the ``modbox`` logger
        log_file: Path of a log file to append to (optional)

    Returns:
        The ``modbox`` logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolve_log_level(level))

    if log_file:
        log_path = Path(log_file).resolve()
        has_handler = any(
            isinstance(handler, logging.FileHandler) and handler.baseFilename == str(log_path)
            for handler in package_logger.handlers
        )
        if not has_handler:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_path, encoding="utf-8")
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            package_logger.addHandler(handler)

    return package_logger
