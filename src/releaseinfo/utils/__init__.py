"""
Utilities module for releaseinfo.

This module contains utility functions used throughout the package.
"""

from .logger import get_logger, setup_logging
from .text import normalize_punctuation
