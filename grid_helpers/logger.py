"""
Logging for the grid helpers.

Importing the package only creates the ``grid_helpers`` logger; handlers
are attached by an explicit ``configure_logging()`` call from the host
application.
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .error_handler import ConfigurationError

LOGGER_NAME = 'grid_helpers'
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(message)s'

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def _resolve_level(level: str) -> int:
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ConfigurationError(f"Unknown log level: {level!r}")
    return value


def configure_logging(level: Optional[str] = None, log_dir: Optional[str] = None,
                      load_env: bool = True) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the package logger.

    Args:
        level: Level name; defaults to LOG_LEVEL, then INFO
        log_dir: Directory for grid_helpers.log; defaults to GRID_HELPERS_LOG_DIR.
            No file handler when neither is set.
        load_env: Read a .env file from the working directory first

    Returns:
        The configured logger

    Raises:
        ConfigurationError: If the level name is unknown
    """
    if load_env:
        load_dotenv(find_dotenv(usecwd=True))

    level = level or os.getenv('LOG_LEVEL') or 'INFO'
    log_dir = log_dir or os.getenv('GRID_HELPERS_LOG_DIR')

    logger.setLevel(_resolve_level(level))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    logger.addHandler(console_handler)

    if not log_dir:
        return logger

    try:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path / 'grid_helpers.log',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"Could not create file handler in {log_dir}: {e}")

    return logger
