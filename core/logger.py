# core/logger.py

"""
Logging setup for the Attendance Tracker.

Stdout belongs to the console menu, so log records only ever go to a file.
Without a configured log file the tracker's loggers are silenced.
"""

import logging
import os
from enum import Enum

LOGGER_NAME = "attendance_tracker"


class LogLevel(Enum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        if not isinstance(name, str):
            return cls.WARNING

        try:
            return cls[name.strip().upper()]
        except KeyError:
            return cls.WARNING


def configure_logging(
    log_file: str | None = None, log_level: LogLevel = LogLevel.WARNING
) -> logging.Logger:
    """
    Configures the root tracker logger and returns it.

    Args:
        log_file (str | None): Path of the log file. If None, records are discarded.
        log_level (LogLevel): Minimum level written to the log file.

    Returns:
        The configured `logging.Logger`.

    Notes:
        - Safe to call more than once; existing handlers are replaced.
        - The parent directory of `log_file` is created if needed.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level.value)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(log_level.value)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
