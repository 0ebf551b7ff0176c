"""Shared utility functions.

This subpackage provides common utility functions used across
the application with no dependencies on other subpackages.

Key modules:
    - logging: Logging configuration
"""

from .logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
