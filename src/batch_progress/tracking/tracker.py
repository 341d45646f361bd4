"""Progress tracking for a batch of iterations of known size."""

import operator
import time
from collections import deque
from datetime import datetime, timedelta
from typing import Callable, Deque, Dict, Optional, Tuple, Any

from pydantic import ValidationError

from .metrics import summarize_durations
from .stopwatch import Clock, Stopwatch
from .subtask import SubTaskStats, SubTaskTimer
from ..config.schemas import TrackerConfig
from ..exceptions import ConfigurationError
from ..utils import get_logger, format_duration


def _as_count(value: Any, field: str) -> int:
    # Accepts any integer type, numpy counts included, but not bools or floats
    if isinstance(value, bool):
        raise ConfigurationError(f"{field} must be an integer, got bool", field=field)
    try:
        return operator.index(value)
    except TypeError as e:
        raise ConfigurationError(
            f"{field} must be an integer, got {type(value).__name__}",
            field=field,
            original_error=e
        ) from e


def _validate(total_items: Any, window_size: Any) -> TrackerConfig:
    try:
        return TrackerConfig(
            total_items=_as_count(total_items, "total_items"),
            window_size=_as_count(window_size, "window_size")
        )
    except ValidationError as e:
        raise ConfigurationError.from_validation_error("Invalid tracker configuration", e) from e


class ProgressTracker:
    """Track progress of a batch and estimate when it will finish.

    Iteration durations are kept in a sliding window of the most recent
    ``window_size`` iterations; the window average drives the end time
    estimate. Named sub-tasks are timed with ``begin_sub_task`` and
    averaged over their whole lifetime.

    Durations are measured on a monotonic clock. Only the estimated end
    time is expressed in wall-clock time.
    """

    def __init__(
        self,
        total_items: int,
        window_size: int = 10,
        *,
        clock: Optional[Clock] = None,
        wall_clock: Optional[Callable[[], datetime]] = None
    ):
        """Initialize and start the tracker clock.

        Args:
            total_items: Number of iterations in the batch
            window_size: Number of recent iterations used for the sliding average
            clock: Monotonic time source in seconds, defaults to time.perf_counter
            wall_clock: Source of the current time, defaults to datetime.now

        Raises:
            ConfigurationError: If total_items or window_size is not a positive integer
        """
        config = _validate(total_items, window_size)
        self.logger = get_logger("ProgressTracker")

        self._total_items = config.total_items
        self._window_size = config.window_size
        self._processed_items = 0

        self._clock = clock or time.perf_counter
        self._wall_clock = wall_clock or datetime.now
        self._stopwatch = Stopwatch.start_new(self._clock)
        self._last_iteration = self._stopwatch.elapsed_seconds
        self._window: Deque[float] = deque(maxlen=self._window_size)
        self._sub_tasks: Dict[str, SubTaskStats] = {}

        self.logger.debug(
            f"Tracking {self._total_items} items with a window of {self._window_size}"
        )

    @classmethod
    def from_config(cls, config: TrackerConfig, **kwargs) -> "ProgressTracker":
        """Create a tracker from a validated TrackerConfig."""
        return cls(config.total_items, config.window_size, **kwargs)

    @property
    def total_items(self) -> int:
        return self._total_items

    @property
    def processed_items(self) -> int:
        return self._processed_items

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def is_running(self) -> bool:
        return self._stopwatch.is_running

    @property
    def items_left(self) -> int:
        """Number of remaining iterations. Negative if over-reported."""
        return self._total_items - self._processed_items

    @property
    def percent_complete(self) -> float:
        if self._total_items <= 0:
            return 0.0
        return self._processed_items / self._total_items * 100

    @property
    def elapsed(self) -> timedelta:
        """Time since construction, frozen once closed."""
        return self._stopwatch.elapsed

    @property
    def window(self) -> Tuple[timedelta, ...]:
        """Durations currently in the sliding window, oldest first."""
        return tuple(timedelta(seconds=s) for s in self._window)

    @property
    def overall_average_item_time(self) -> timedelta:
        """Elapsed time divided by processed items, including untimed overhead."""
        if self._processed_items == 0:
            return timedelta(0)
        return timedelta(seconds=self._stopwatch.elapsed_seconds / self._processed_items)

    @property
    def sliding_average_item_time(self) -> timedelta:
        """Mean of the sliding window, or the overall average if it is empty."""
        if not self._window:
            return self.overall_average_item_time
        return timedelta(seconds=sum(self._window) / len(self._window))

    @property
    def effective_average_item_time(self) -> timedelta:
        """Average used for estimation: windowed when data exists."""
        if self._window:
            return self.sliding_average_item_time
        return self.overall_average_item_time

    @property
    def remaining_time(self) -> Optional[timedelta]:
        """Projected time left, or None before the first iteration completes."""
        if self._processed_items == 0:
            return None
        average = self.effective_average_item_time.total_seconds()
        estimated_total = average * self._total_items
        return timedelta(seconds=estimated_total - self._stopwatch.elapsed_seconds)

    @property
    def estimated_end_time(self) -> Optional[datetime]:
        """Projected wall-clock completion time.

        None until at least one iteration has completed, since an estimate
        from a zero average would point at the start of the batch.

        The projection is ``now + window_average * total_items - elapsed``.
        When recent iterations run faster than older ones that have left
        the window, it can fall in the past while items are still left.
        """
        remaining = self.remaining_time
        if remaining is None:
            return None
        return self._wall_clock() + remaining

    def record_iteration_complete(self) -> None:
        """Mark the end of one iteration and push its duration into the window."""
        if not self.is_running:
            self.logger.warning(
                "Iteration recorded after the tracker was closed; duration counts as zero"
            )

        now = self._stopwatch.elapsed_seconds
        self._window.append(now - self._last_iteration)
        self._last_iteration = now
        self._processed_items += 1

    update = record_iteration_complete

    def begin_sub_task(self, name: str) -> SubTaskTimer:
        """Start timing a named unit of work.

        Use the returned handle as a context manager, or call ``close()``
        on it, to record the elapsed time under ``name``.
        """
        return SubTaskTimer(name, self._add_sub_task_time, self._clock)

    def _add_sub_task_time(self, name: str, elapsed: timedelta) -> None:
        stats = self._sub_tasks.get(name)
        if stats is None:
            stats = self._sub_tasks[name] = SubTaskStats()
        stats.add(elapsed)

    def get_task_time(self, name: str) -> timedelta:
        """Average duration of a sub-task, zero if it was never recorded."""
        stats = self._sub_tasks.get(name)
        if stats is None:
            return timedelta(0)
        return stats.average

    def get_task_stats(self, name: str) -> Optional[SubTaskStats]:
        stats = self._sub_tasks.get(name)
        if stats is None:
            return None
        return SubTaskStats(total=stats.total, count=stats.count)

    @property
    def task_names(self) -> Tuple[str, ...]:
        return tuple(self._sub_tasks)

    def close(self) -> None:
        """Stop the clock. Safe to call more than once."""
        if not self.is_running:
            return
        self._stopwatch.stop()
        self.logger.debug(
            f"Stopped after {self._processed_items}/{self._total_items} items "
            f"in {format_duration(self._stopwatch.elapsed_seconds)}"
        )

    stop = close

    def __enter__(self) -> "ProgressTracker":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def summary(self) -> Dict[str, Any]:
        """Snapshot of progress, averages and sub-task timings."""
        end_time = self.estimated_end_time
        return {
            "total_items": self._total_items,
            "processed_items": self._processed_items,
            "items_left": self.items_left,
            "percent_complete": self.percent_complete,
            "elapsed": self._stopwatch.elapsed_seconds,
            "overall_average": self.overall_average_item_time.total_seconds(),
            "sliding_average": self.sliding_average_item_time.total_seconds(),
            "effective_average": self.effective_average_item_time.total_seconds(),
            "estimated_end_time": end_time.isoformat() if end_time else None,
            "window": summarize_durations(self._window).to_dict(),
            "sub_tasks": {
                name: {
                    "count": stats.count,
                    "total": stats.total.total_seconds(),
                    "average": stats.average.total_seconds(),
                }
                for name, stats in self._sub_tasks.items()
            },
        }

    def log_summary(self) -> None:
        """Log summary metrics."""
        summary = self.summary()

        end_time = summary["estimated_end_time"] or "unknown"
        self.logger.info(
            f"Progress: {summary['processed_items']}/{summary['total_items']} "
            f"({summary['percent_complete']:.1f}%), "
            f"{format_duration(summary['elapsed'])} elapsed, "
            f"{format_duration(summary['effective_average'])} per item, "
            f"ETA {end_time}"
        )

        for name, stats in summary["sub_tasks"].items():
            self.logger.info(
                f"Sub-task {name}: {stats['count']} runs, "
                f"{format_duration(stats['average'])} avg"
            )

    def __repr__(self) -> str:
        state = "running" if self.is_running else "stopped"
        return (
            f"ProgressTracker({self._processed_items}/{self._total_items}, "
            f"window_size={self._window_size}, {state})"
        )
