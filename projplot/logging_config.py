"""
Logging configuration for projplot package.

The ``projplot`` logger gets its own console handler so package messages
show up without configuring the root logger. Rendering pulls in matplotlib,
its font manager and pyproj, which log freely at INFO/DEBUG; those loggers
are held at WARNING unless verbosity is raised past DEBUG.
"""

import logging
import os
import sys
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"

PACKAGE_LOGGER = "projplot"
LOG_LEVEL_ENV = "PROJPLOT_LOG_LEVEL"

# Loggers that get chatty while a figure is rendered or a projection is built
THIRD_PARTY_LOGGERS = ("matplotlib", "matplotlib.font_manager", "fontTools", "PIL", "pyproj")

_VERBOSITY_LEVELS = {
    -2: logging.ERROR,
    -1: logging.WARNING,
    0: logging.INFO,
    1: logging.DEBUG,
}


def _level_for(verbosity: int) -> int:
    clamped = max(min(verbosity, 1), -2)
    level = _VERBOSITY_LEVELS[clamped]

    env_level = os.environ.get(LOG_LEVEL_ENV, "").upper()
    if env_level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        level = getattr(logging, env_level)
    return level


def setup_logging(
    verbosity: int = 0,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Configure the ``projplot`` logger and quiet third-party rendering loggers.

    Args:
        verbosity: -2=ERROR, -1=WARNING, 0=INFO, 1=DEBUG; 2 or more also
            lets matplotlib and pyproj log at INFO
        log_file: Optional path to a log file (always written at DEBUG)
        format_string: Optional custom format string for console messages

    Returns:
        The configured package logger

    Environment Variables:
        PROJPLOT_LOG_LEVEL: Override the package log level

    Example:
        >>> setup_logging(verbosity=1)  # projection training and gridline debug output
        >>> setup_logging(verbosity=-1, log_file="projplot.log")
    """
    level = _level_for(verbosity)

    if format_string is None:
        format_string = DEFAULT_FORMAT if verbosity >= 0 else SIMPLE_FORMAT

    third_party_level = logging.INFO if verbosity >= 2 else logging.WARNING
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a')
        except OSError as e:
            logger.warning(f"Failed to create log file {log_file}: {e}")
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            logger.addHandler(file_handler)
            # The file wants everything even when the console is quieter
            logger.setLevel(logging.DEBUG)
            logger.info(f"Logging to file: {log_file}")

    logger.debug(
        f"Logging configured: level={logging.getLevelName(level)}, "
        f"third-party={logging.getLevelName(third_party_level)}"
    )
    return logger
