"""Logging configuration for the application."""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If None, logs go to stderr so
                  they never interleave with results printed on stdout.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    config = {
        "level": numeric_level,
        "format": LOG_FORMAT,
    }

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        config["filename"] = log_file
    else:
        config["stream"] = sys.stderr

    logging.basicConfig(**config)

    logging.getLogger(__name__).debug("Logging initialized at %s level", level.upper())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name, typically __name__ from the calling module

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
