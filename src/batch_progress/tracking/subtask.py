"""Timing of named sub-tasks inside an iteration."""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, Optional

from .stopwatch import Clock, Stopwatch


@dataclass
class SubTaskStats:
    """Cumulative timing for one sub-task name."""
    
    total: timedelta = field(default_factory=timedelta)
    count: int = 0
    
    @property
    def average(self) -> timedelta:
        """All-time average duration."""
        if self.count == 0:
            return timedelta(0)
        return self.total / self.count
    
    def add(self, elapsed: timedelta) -> None:
        self.total += elapsed
        self.count += 1


class SubTaskTimer:
    """Scope handle returned by ``ProgressTracker.begin_sub_task``.
    
    The elapsed time is reported exactly once, on the first ``close()``
    or when leaving the ``with`` block, even if the block raised.
    """
    
    def __init__(
        self,
        name: str,
        on_close: Callable[[str, timedelta], None],
        clock: Optional[Clock] = None
    ):
        self.name = name
        self._on_close = on_close
        self._stopwatch = Stopwatch.start_new(clock)
        self._closed = False
    
    @property
    def closed(self) -> bool:
        return self._closed
    
    @property
    def elapsed(self) -> timedelta:
        return self._stopwatch.elapsed
    
    def close(self) -> None:
        """Stop timing and record the duration under this task name."""
        if self._closed:
            return
        self._closed = True
        self._stopwatch.stop()
        self._on_close(self.name, self._stopwatch.elapsed)
    
    def __enter__(self) -> "SubTaskTimer":
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
    
    def __repr__(self) -> str:
        state = "closed" if self._closed else "running"
        return f"SubTaskTimer(name={self.name!r}, {state})"
