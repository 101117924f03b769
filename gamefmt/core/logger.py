"""
Logging configuration module.

This module provides centralized logging setup for programs embedding
the library, configuring optional file and console output with a shared
formatter. The library itself only creates module loggers and never
configures handlers on import.
"""

import logging
from pathlib import Path
from typing import Optional, Union
from gamefmt.config.settings import Settings


def setup_logger(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Path] = None
) -> None:
    """
    Configure and initialize the root logger.

    Sets up console output (unless disabled in settings) and an optional
    UTF-8 log file, both using the same formatter and level.

    The function configures:
        - Root logger level from the argument or Settings.LOG_LEVEL
        - File logging when a path is given or Settings.LOG_FILE is set
        - Console logging to stderr when Settings.LOG_TO_CONSOLE is true
        - Custom formatter with timestamp, logger name, level, and message

    Args:
        level: Logging level name or number (default: Settings.LOG_LEVEL)
        log_file: Path of the log file (default: Settings.LOG_FILE)

    Returns:
        None

    Raises:
        OSError: If the log file directory cannot be created
        ValueError: If level is an unknown level name

    Example:
        >>> setup_logger("DEBUG")
        >>> logging.getLogger("gamefmt").debug("Overlay ready")
        2025-11-11 14:30:00 - gamefmt - DEBUG - Overlay ready

    Note:
        - Existing root handlers are cleared before setup to avoid duplicates
        - Parent directories of the log file are created if missing
    """
    level = level if level is not None else Settings.LOG_LEVEL
    log_file = log_file if log_file is not None else Settings.LOG_FILE

    # Clear any existing handlers to prevent duplicates on re-initialization
    logging.root.handlers.clear()

    # Create formatter with timestamp, logger name, level, and message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # Handler for file output (UTF-8 encoding for international characters)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    if Settings.LOG_TO_CONSOLE:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)
