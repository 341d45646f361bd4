"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path
from datetime import datetime
import shutil


class FakeClock:
    """Monotonic clock that only moves when told to."""
    
    def __init__(self, start: float = 100.0):
        self.now = start
    
    def advance(self, seconds: float) -> None:
        self.now += seconds
    
    def __call__(self) -> float:
        return self.now


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def make_tracker(fake_clock, fixed_now):
    """Build trackers driven by the fake clock and a fixed wall clock."""
    from batch_progress import ProgressTracker
    
    def _make(total_items: int = 10, window_size: int = 10):
        return ProgressTracker(
            total_items,
            window_size,
            clock=fake_clock,
            wall_clock=lambda: fixed_now
        )
    
    return _make


@pytest.fixture
def sample_config_dict():
    """Create a sample configuration dictionary."""
    return {
        "tracker": {
            "total_items": 50,
            "window_size": 5
        },
        "logging": {
            "level": "DEBUG"
        }
    }


@pytest.fixture
def log_messages():
    """Collect messages emitted by the package while it is enabled."""
    from loguru import logger
    
    messages = []
    logger.enable("batch_progress")
    handler_id = logger.add(messages.append, format="{message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("batch_progress")
