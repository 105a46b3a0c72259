"""
Central logging configuration for eventplanner_recurrence.

Keeps the package's own loggers at INFO (or DEBUG when troubleshooting) and
the console output colorized with colorlog.
"""

import logging
import os
import sys
from typing import Optional

from colorlog import ColoredFormatter

LOG_FORMAT = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

PACKAGE_LOGGERS = [
    "eventplanner_recurrence",
    "eventplanner_recurrence.recurrence",
    "eventplanner_recurrence.domain",
    "eventplanner_recurrence.core",
]


def build_console_handler(level: int) -> logging.Handler:
    """Stream handler writing colorized records to stderr."""
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S", log_colors=LOG_COLORS))
    return handler


def configure_logging(debug_mode: bool = False, level_name: Optional[str] = None) -> int:
    """
    Configure logging for eventplanner_recurrence.

    Args:
        debug_mode: Whether to enable debug logging for package modules
        level_name: Explicit level name (DEBUG, INFO, WARNING, ERROR)

    Environment Variables:
        EVENTPLANNER_DEBUG: Set to '1', 'true', 'yes' to force debug logging
        EVENTPLANNER_LOG_LEVEL: Override root log level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        The root log level that was applied
    """
    env_debug = os.getenv("EVENTPLANNER_DEBUG", "").lower() in ("1", "true", "yes", "on")
    env_log_level = os.getenv("EVENTPLANNER_LOG_LEVEL", "").upper()

    final_debug = debug_mode or env_debug

    root_level = logging.DEBUG if final_debug else logging.INFO
    if level_name and level_name.upper() in ("DEBUG", "INFO", "WARNING", "ERROR"):
        root_level = getattr(logging, level_name.upper())
    if env_log_level in ("DEBUG", "INFO", "WARNING", "ERROR"):
        root_level = getattr(logging, env_log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)

    # Only add a handler if none exist to avoid duplicate output
    if not root_logger.handlers:
        root_logger.addHandler(build_console_handler(root_level))

    package_level = logging.DEBUG if final_debug else root_level
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(package_level)

    logging.getLogger(__name__).debug(
        "Logging initialized at level %s", logging.getLevelName(root_level)
    )
    return root_level


def get_logging_status() -> dict[str, str]:
    """
    Get current logging configuration status.

    Returns:
        Dictionary mapping logger names to their current levels
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}
    for logger_name in PACKAGE_LOGGERS:
        status[logger_name] = logging.getLevelName(logging.getLogger(logger_name).level)
    return status
