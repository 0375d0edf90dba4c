"""
Logging configuration for the digitlist package.

Library modules call get_logger(__name__). Handlers are installed only when the
host program calls LoggerManager.setup_logging(); until then records go to a
NullHandler.
"""

import logging
import os
import sys
from pathlib import Path

from digitlist.constants import DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL_ENV

ROOT_LOGGER_NAME = "digitlist"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class LoggerManager:
    """Manages logging configuration for the package."""

    _initialized = False
    _log_file: Path | None = None

    @classmethod
    def setup_logging(cls, log_file: str | os.PathLike | None = None, level: str | None = None) -> None:
        """
        Setup logging configuration.

        Args:
            log_file: Path to log file. If None, logs to console only.
            level: Logging level name. Defaults to $DIGITLIST_LOG_LEVEL, then WARNING.
        """
        if cls._initialized:
            return

        level = level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
        numeric_level = getattr(logging, level.upper(), logging.WARNING)
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(numeric_level)
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if log_file:
            cls._log_file = Path(log_file)
            cls._log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(cls._log_file, encoding="utf-8")
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        cls._initialized = True

    @classmethod
    def reset(cls) -> None:
        """Drop installed handlers so setup_logging() can run again."""
        logging.getLogger(ROOT_LOGGER_NAME).handlers.clear()
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.NOTSET)
        logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
        cls._log_file = None
        cls._initialized = False

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        # Module names already carry the package prefix
        if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
            return logging.getLogger(name)
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def get_logger(name: str) -> logging.Logger:
    """Convenience wrapper around LoggerManager.get_logger."""
    return LoggerManager.get_logger(name)
