"""
TCX Stats - descriptive statistics for Garmin TCX activity files.

This package provides tools for:
- Extracting trackpoint readings (heart rate, cadence, power, speed,
  time, distance, altitude) from TCX files
- Calculating mean and population standard deviation per field
- Deriving average speed, segment speeds and total elevation change
"""

from .metrics import (
    SampleStats,
    average_speed,
    mean_and_stddev,
    segment_speeds,
    total_elevation_change,
)
from .parser import (
    Trackpoint,
    TrackpointSeries,
    extract_series,
    parse_tcx,
    read_trackpoints,
)
from .report import AnalysisConfig, build_report

__version__ = "0.1.0"
__author__ = "TCX Stats Contributors"

__all__ = [
    "parse_tcx",
    "extract_series",
    "read_trackpoints",
    "Trackpoint",
    "TrackpointSeries",
    "mean_and_stddev",
    "average_speed",
    "segment_speeds",
    "total_elevation_change",
    "SampleStats",
    "AnalysisConfig",
    "build_report",
]
