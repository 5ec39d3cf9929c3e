"""Runtime components for aggregating observations."""

from .store import AccumulatorStore, RegionAccumulator

__all__ = [
    "AccumulatorStore",
    "RegionAccumulator",
]
