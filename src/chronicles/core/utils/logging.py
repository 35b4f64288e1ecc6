"""
Logging setup for chronicles, built on loguru.

Library modules import ``logger`` from loguru and log directly; only the CLI
entry point configures sinks, from the ``logging.*`` config section.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from chronicles.core.config import Config

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> <level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Replace loguru's default sink with a stderr sink and an optional file.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to a log file. Empty or None logs to stderr only.
        rotation: Size at which the log file rotates.
        retention: How long rotated files are kept.
    """
    level = level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if log_file:
        logger.add(log_file, level=level, format=FILE_FORMAT, rotation=rotation, retention=retention)


def configure_from(config: Config, level: str | None = None) -> None:
    """Apply the ``logging.level`` / ``logging.file`` settings; *level* overrides."""
    setup_logging(
        level=level or str(config.get("logging.level", "INFO")),
        log_file=config.get("logging.file") or None,
    )
