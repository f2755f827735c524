"""
Logging helpers shared by the loader and the web server.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from src.config import LOG_FILE, LOG_LEVEL, VALID_LOG_LEVELS


def setup_logger(name: str, log_file: str = None, level: str = None) -> logging.Logger:
    """
    Configure and return a named logger.

    Args:
        name: Logger name (usually __name__).
        log_file: Path of a rotating log file. Defaults to config.LOG_FILE;
            an empty value logs to the console only.
        level: Level name. Defaults to config.LOG_LEVEL. Unknown names fall
            back to INFO; validate_config reports them.

    Returns:
        The configured Logger.
    """
    level = (level or LOG_LEVEL).upper()
    if level not in VALID_LOG_LEVELS:
        level = "INFO"

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Handlers already installed: repeated calls must not duplicate output
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = LOG_FILE if log_file is None else log_file
    if log_file:
        # 10MB per file, 5 backups
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
