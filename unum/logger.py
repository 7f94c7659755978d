"""
Logger setup for unum.

Logs to:
- stderr: warnings and errors (DEBUG with UNUM_DEBUG=1)
- {cache_root}/.logs/unum.log: rotating, 1MB max, 2 backups

The log directory starts with '.', which persona names cannot, so it never
lands inside a persona's session tree.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from unum.paths import cache_root

LOG_DIR = ".logs"
LOG_FILE = "unum.log"


def get_log_dir() -> Path:
    """Get log directory under the cache root, creating it if needed."""
    log_dir = cache_root() / LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_logger(name: str = "unum", debug: bool = False) -> logging.Logger:
    """
    Get or create a logger with console and rotating file handlers.

    Handlers are attached once; later calls only adjust the console level.
    Module loggers (unum.config, unum.launcher, ...) propagate here.

    Args:
        name: Logger name
        debug: Show DEBUG messages on stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    console_level = logging.DEBUG if debug else logging.WARNING

    if logger.handlers:
        for handler in logger.handlers:
            if getattr(handler, "_unum_console", False):
                handler.setLevel(console_level)
        return logger

    text_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(text_formatter)
    console_handler._unum_console = True
    logger.addHandler(console_handler)

    try:
        file_handler = RotatingFileHandler(
            get_log_dir() / LOG_FILE,
            maxBytes=1024 * 1024,
            backupCount=2,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(text_formatter)
        logger.addHandler(file_handler)
    except OSError:
        pass  # File logging is optional

    return logger


def close_handlers(name: str = "unum") -> None:
    """Flush, close and detach all handlers of a logger."""
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
