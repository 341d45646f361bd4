"""Tracking module for batch progress and sub-task timing."""

from .metrics import DurationStats, summarize_durations
from .stopwatch import Stopwatch
from .subtask import SubTaskStats, SubTaskTimer
from .tracker import ProgressTracker

__all__ = [
    "DurationStats",
    "summarize_durations",
    "Stopwatch",
    "SubTaskStats",
    "SubTaskTimer",
    "ProgressTracker",
]
