"""Logging setup for the linkaudit package logger."""

import logging
import sys
from typing import Optional

LOGGER_NAME = "linkaudit"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Configure the ``linkaudit`` logger.

    Messages go to stderr so reports printed on stdout stay clean. Calling
    again without ``force`` only changes the level of the existing
    handlers; with ``force`` the handlers are rebuilt (use it to add or
    change the log file).

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file that receives the same messages
        format_string: Optional custom format for log records
        force: Rebuild handlers even if some already exist

    Returns:
        The package logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    if force or not logger.handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(format_string or DEFAULT_FORMAT)
        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
        if log_file:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    logger.propagate = False

    return logger
