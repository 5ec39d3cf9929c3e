"""Per-region summaries of NOAA tab-delimited climate observations."""

from .config import AnalyzerConfig, load_config
from .errors import (
    CapacityExceededError,
    ClimateSumError,
    FileOpenError,
    ParseError,
)
from .pipeline import RunSummary, analyze_files
from .report.render import render
from .runtime import AccumulatorStore, RegionAccumulator

__all__ = [
    "AnalyzerConfig",
    "load_config",
    "ClimateSumError",
    "ParseError",
    "FileOpenError",
    "CapacityExceededError",
    "RunSummary",
    "analyze_files",
    "render",
    "AccumulatorStore",
    "RegionAccumulator",
]
