"""Logging configuration for skillshelf."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from skillshelf.utils.config import Config

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(config: Config, verbose: bool = False) -> None:
    """
    Set up the skillshelf logger for one CLI run.

    Everything goes to the rotating log file in the workspace. With verbose,
    the same records are echoed to stderr so they don't mix with command
    output on stdout.

    Args:
        config: Application configuration
        verbose: Also log to stderr
    """
    logger = logging.getLogger("skillshelf")
    logger.setLevel(logging.DEBUG)

    # Each run replaces the handlers from a previous run in the same process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    config.log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        config.log_file,
        maxBytes=config.logging.max_bytes,
        backupCount=config.logging.backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)

    if verbose:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)
