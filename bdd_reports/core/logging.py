"""
Logging configuration for BDD Reports.

Console output is colored by level; an optional log file receives the same
records uncolored and at DEBUG level.
"""

import logging
import sys
from typing import Optional
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

RESET = '\033[0m'
BOLD = '\033[1m'


class ColoredFormatter(logging.Formatter):
    """Console formatter that tints the level name and bolds errors."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[94m',
        logging.WARNING: '\033[93m',
        logging.ERROR: '\033[91m',
        logging.CRITICAL: '\033[95m',
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        levelname, msg = record.levelname, record.msg
        record.levelname = f"{color}{levelname}{RESET}"
        if record.levelno >= logging.ERROR:
            record.msg = f"{BOLD}{msg}{RESET}"
        # The same record reaches the file handler afterwards
        try:
            return super().format(record)
        finally:
            record.levelname, record.msg = levelname, msg


VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.INFO,
    3: logging.DEBUG,
}


def setup_logger(
    name: str = "bdd_reports",
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    verbosity: int = 0
) -> logging.Logger:
    """
    Set up logger for BDD Reports.

    Args:
        name: Logger name
        level: Logging level (overrides verbosity if provided)
        log_file: Optional log file path, parent directories are created
        verbosity: 0=warnings only, 1=progress, 2=details, 3=debug

    Returns:
        Configured logger
    """
    if level is None:
        level = VERBOSITY_LEVELS.get(verbosity, logging.DEBUG if verbosity > 3 else logging.WARNING)

    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "bdd_reports") -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
