from dataclasses import dataclass, asdict
from typing import Dict, Iterable
import numpy as np


@dataclass
class DurationStats:
    """Summary statistics for a set of durations, in seconds"""
    
    count: int = 0
    total: float = 0.0
    mean: float = 0.0
    std: float = 0.0
    min: float = 0.0
    max: float = 0.0
    median: float = 0.0
    
    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def summarize_durations(values: Iterable[float]) -> DurationStats:
    """Compute summary statistics, all zeros for no values"""
    data = np.asarray(list(values), dtype=float)
    if data.size == 0:
        return DurationStats()
    
    return DurationStats(
        count=int(data.size),
        total=float(data.sum()),
        mean=float(np.mean(data)),
        std=float(np.std(data)) if data.size > 1 else 0.0,
        min=float(data.min()),
        max=float(data.max()),
        median=float(np.median(data))
    )
