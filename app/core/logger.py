"""
Logging configuration module.

This module provides centralized logging setup for applications that
consume the formatting helpers, configuring console and optional file
output with a shared format.
"""

import logging
from pathlib import Path
from typing import Optional, Union
from config.settings import Settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Union[str, Path]] = None
) -> None:
    """
    Configure and initialize the root logger.

    Sets up console logging and, when requested, file logging with the
    same formatter. The helpers in ``utils`` only emit records; calling
    this function is left to the embedding application.

    Args:
        level: Logging level name or number. Defaults to Settings.LOG_LEVEL.
        log_file: Path of the log file. Defaults to Settings.LOG_FILE when
            Settings.LOG_TO_FILE is enabled, otherwise no file handler.

    Returns:
        None

    Raises:
        OSError: If the log directory cannot be created

    Example:
        >>> setup_logger("DEBUG")
        >>> logging.getLogger("utils.formatters").debug("ready")
        2026-10-18 14:30:00 - utils.formatters - DEBUG - ready

    Note:
        - Existing handlers are cleared before setup to avoid duplicates
        - Unknown level names fall back to INFO
    """
    if level is None:
        level = Settings.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if log_file is None and Settings.LOG_TO_FILE:
        log_file = Settings.LOG_FILE

    # Clear any existing handlers to prevent duplicates on re-initialization
    logging.root.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Handler for console output
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # Handler for file output (UTF-8 encoding for international characters)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)
