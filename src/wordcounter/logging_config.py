"""
Logging Configuration
Console (and optionally file) logging for the 'wordcounter' package.

Counting failures are shown in the window; the log keeps the underlying
library message and the file path for diagnosis.
"""
import logging
import sys
from typing import Optional

from wordcounter import config

PACKAGE_LOGGER = "wordcounter"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attaches handlers to the package logger and quiets noisy libraries.

    Safe to call again (e.g. from tests): previous handlers are replaced.

    Args:
        level: Level for the package logger and its handlers.
        log_file: Optional path; the file is overwritten on each start.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for name, library_level in config.LIBRARY_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(library_level)

    logger.debug(f"Logging initialized (level={logging.getLevelName(level)}, file={log_file}).")
    return logger
