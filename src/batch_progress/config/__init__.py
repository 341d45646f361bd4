"""Configuration module for batch progress tracking."""

from .schemas import (
    Config,
    TrackerConfig,
    LoggingConfig,
)
from .parser import ConfigParser

__all__ = [
    "Config",
    "TrackerConfig",
    "LoggingConfig",
    "ConfigParser",
]
