"""
Logging Configuration
Sets up the package logger for scripts and the command line.
"""
import logging
import sys
from typing import Optional, Union

from .config import get_log_level


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the logger for the 'e8_visualizer' namespace.

    Parameters
    ----------
    level : int or str, optional
        Logging level (e.g. logging.DEBUG or "DEBUG"). Defaults to the
        E8_VISUALIZER_LOG_LEVEL environment variable, or INFO.
    log_file : str, optional
        Path to also write logs to.

    Returns
    -------
    logging.Logger
        The configured package logger
    """
    if level is None:
        level = get_log_level()
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    logger = logging.getLogger("e8_visualizer")
    logger.setLevel(level)

    # Avoid duplicate handlers when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
