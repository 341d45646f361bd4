"""Batch Progress - iteration timing and completion estimates for batch jobs."""

__version__ = "0.1.0"

from loguru import logger

from .tracking import ProgressTracker, SubTaskTimer, SubTaskStats, Stopwatch
from .config import Config, TrackerConfig, LoggingConfig, ConfigParser
from .exceptions import BatchProgressError, ConfigurationError
from .utils import setup_logger, get_logger

# Silent until the application calls setup_logger or logger.enable
logger.disable(__name__)

__all__ = [
    "ProgressTracker",
    "SubTaskTimer",
    "SubTaskStats",
    "Stopwatch",
    "Config",
    "TrackerConfig",
    "LoggingConfig",
    "ConfigParser",
    "BatchProgressError",
    "ConfigurationError",
    "setup_logger",
    "get_logger",
    "__version__",
]
