"""Logging for Tally.

CLI output goes through the ``tally`` logger. Plain reports (INFO and below)
print to stdout as-is, warnings and errors go to stderr with a level prefix,
and everything is also kept in a dated log file.
"""

import logging
import sys
from datetime import date
from config import Config

LOGGER_NAME = "tally"


class ConsoleFormatter(logging.Formatter):
    """Print report lines bare and prefix problems with their level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.WARNING:
            return f"{record.levelname}: {message}"
        return message


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def log_file_path(config: Config, day: date = None):
    """Path of the log file for a given day (default: today)."""
    day = day or date.today()
    return config.log_dir / f"{LOGGER_NAME}-{day.isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    logger.propagate = False

    # Safe to call more than once
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_handler = logging.FileHandler(log_file_path(config), encoding="utf-8")
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    report_handler = logging.StreamHandler(sys.stdout)
    report_handler.setLevel(config.log_level)
    report_handler.addFilter(_BelowWarning())
    report_handler.setFormatter(ConsoleFormatter("%(message)s"))

    problem_handler = logging.StreamHandler(sys.stderr)
    problem_handler.setLevel(logging.WARNING)
    problem_handler.setFormatter(ConsoleFormatter("%(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(report_handler)
    logger.addHandler(problem_handler)

    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
