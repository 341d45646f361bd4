"""Utility functions for batch progress tracking."""

from .logging import setup_logger, get_logger, LoggerSetup
from .helpers import format_duration, merge_configs

__all__ = [
    "setup_logger",
    "get_logger",
    "LoggerSetup",
    "format_duration",
    "merge_configs",
]
