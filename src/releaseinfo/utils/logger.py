"""
Logger utility for releaseinfo.

This module provides centralized logging for the package.
"""

import logging
import os


def get_logger(name):
    """Get a logger with the given name."""
    # Configuration is left to the application (see setup_logging)
    return logging.getLogger(name)


def setup_logging(log_level=None, log_file=None):
    """Set up logging configuration.

    Args:
        log_level: Level name such as 'DEBUG' or 'INFO'. Defaults to INFO.
        log_file: Optional path of a log file written next to the console output.
    """
    level = getattr(logging, log_level.upper(), logging.INFO) if log_level else logging.INFO
    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='w'))
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('requests').setLevel(logging.WARNING)
