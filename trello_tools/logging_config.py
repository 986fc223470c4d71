"""Centralized logging configuration for trello_tools.

Every tool reports its progress through the ``trello_tools`` logger. INFO lines
are the user-facing report and are printed as-is on stdout; warnings and
errors carry their level name so they stand out in the same stream.
"""

from __future__ import annotations

import logging
import sys

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class ConsoleFormatter(logging.Formatter):
    """Plain messages for INFO and below, ``LEVEL: message`` above."""

    def __init__(self) -> None:
        super().__init__("%(message)s")
        self._prefixed = logging.Formatter("%(levelname)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno > logging.INFO:
            return self._prefixed.format(record)
        return super().format(record)


def resolve_level(verbose: bool = False, quiet: bool = False, level: str | None = None) -> str:
    """Pick the level name from the common CLI flags.

    ``--verbose`` wins over ``--quiet``, which wins over ``--log-level``.
    """
    if verbose:
        return "DEBUG"
    if quiet:
        return "ERROR"
    if level and level.upper() in LOG_LEVELS:
        return level.upper()
    return "INFO"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for trello_tools.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR). Default: INFO.
        log_file: Optional path to log file. If provided, every record is also
                  written there with a timestamp.

    Example:
        >>> setup_logging("DEBUG")  # Show request details
        >>> setup_logging("INFO", "reset.log")  # Report + file logging
    """
    logger = logging.getLogger("trello_tools")
    logger.setLevel(LOG_LEVELS.get(level.upper(), logging.INFO))

    # Remove any existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
        logger.addHandler(file_handler)

    logger.propagate = False
