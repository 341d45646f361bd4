"""Monotonic stopwatch."""

import time
from datetime import timedelta
from typing import Callable, Optional

Clock = Callable[[], float]


class Stopwatch:
    """Measures elapsed time on a monotonic clock.
    
    Once stopped, the elapsed time stays frozen at the stop reading.
    """
    
    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or time.perf_counter
        self._start: Optional[float] = None
        self._stop: Optional[float] = None
    
    @classmethod
    def start_new(cls, clock: Optional[Clock] = None) -> "Stopwatch":
        """Create a stopwatch that is already running."""
        stopwatch = cls(clock)
        stopwatch.start()
        return stopwatch
    
    def start(self) -> None:
        """Start measuring. A stopwatch only runs once."""
        if self._start is None:
            self._start = self._clock()
    
    def stop(self) -> None:
        """Stop measuring. Calling it again does nothing."""
        if self.is_running:
            self._stop = self._clock()
    
    @property
    def is_running(self) -> bool:
        return self._start is not None and self._stop is None
    
    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        if self._start is None:
            return 0.0
        end = self._stop if self._stop is not None else self._clock()
        return end - self._start
    
    @property
    def elapsed(self) -> timedelta:
        return timedelta(seconds=self.elapsed_seconds)
