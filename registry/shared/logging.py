"""Logging configuration for the registry."""

import logging
import sys

from registry.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(debug: bool | None = None) -> None:
    """Configure process-wide logging.

    Level is DEBUG when debug (or settings.debug when not given) is True,
    otherwise INFO. Output goes to stdout. SQLAlchemy engine logging is
    left to database_echo.

    Args:
        debug: Optional override of settings.debug.
    """
    if debug is None:
        debug = get_settings().debug
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
