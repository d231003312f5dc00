"""
Statistics calculations for TCX trackpoint data.

This module provides pure functions over the sample sequences produced by
:mod:`tcxstats.parser`: mean and population standard deviation, average
speed, per-segment speeds and total elevation change. Unit conversion from
meters and meters/second happens here, never in the parser.
"""

from datetime import datetime
from typing import List, NamedTuple, Sequence

import numpy as np
import pandas as pd

from tcxstats.constants import (
    DEFAULT_MIN_SEGMENT_SPEED,
    ELEVATION_CONVERSIONS,
    SPEED_CONVERSIONS,
)
from tcxstats.exceptions import ConfigurationError, ValidationError

__all__ = [
    "SampleStats",
    "convert_speed",
    "convert_elevation",
    "mean_and_stddev",
    "average_speed",
    "segment_speeds",
    "total_elevation_change",
]


class SampleStats(NamedTuple):
    """Mean, population standard deviation and sample count.

    A count of 0 means there was no data; mean and stddev are then 0.0
    and must not be reported as real values.
    """

    mean: float
    stddev: float
    count: int


def convert_speed(mps: float, unit: str = "mph") -> float:
    """Convert a speed in meters/second to ``unit`` (mph, km/h or m/s)."""
    try:
        factor = SPEED_CONVERSIONS[unit]
    except KeyError as e:
        raise ConfigurationError(f"Unknown speed unit: {unit}") from e
    return mps * factor


def convert_elevation(meters: float, unit: str = "feet") -> float:
    """Convert a height in meters to ``unit`` (feet or meters)."""
    try:
        factor = ELEVATION_CONVERSIONS[unit]
    except KeyError as e:
        raise ConfigurationError(f"Unknown elevation unit: {unit}") from e
    return meters * factor


def mean_and_stddev(values: Sequence[float]) -> SampleStats:
    """Calculate population mean and standard deviation.

    The standard deviation divides by N, not N-1, so a single sample has a
    standard deviation of 0.

    Args:
        values: Numeric samples. May be empty.

    Returns:
        SampleStats(mean, stddev, count). For an empty sequence this is
        SampleStats(0.0, 0.0, 0).

    Example:
        >>> stats = mean_and_stddev([60, 70, 80])
        >>> stats.mean, round(stats.stddev, 2), stats.count
        (70.0, 8.16, 3)
    """
    s = pd.Series(values, dtype=float)
    if s.empty:
        return SampleStats(0.0, 0.0, 0)

    mean = float(s.mean())
    # Identical samples must give exactly 0, without rounding noise from the mean
    if (s == s.iloc[0]).all():
        return SampleStats(mean, 0.0, len(s))
    return SampleStats(mean, float(s.std(ddof=0)), len(s))


def average_speed(
    times: Sequence[datetime], distances: Sequence[float], unit: str = "mph"
) -> float:
    """Calculate average speed from the first and last samples.

    Speed is (last distance - first distance) / (last time - first time).
    The first and last entries of each sequence are used independently, so
    callers should pass aligned sequences taken from the same trackpoints.

    Args:
        times: Timestamps in document order.
        distances: Cumulative distances in meters.
        unit: Output speed unit.

    Returns:
        Average speed in ``unit``, or 0.0 if either sequence has fewer than
        two samples, or elapsed time or net distance is not positive.
    """
    if len(times) < 2 or len(distances) < 2:
        return 0.0

    total_seconds = (times[-1] - times[0]).total_seconds()
    total_meters = distances[-1] - distances[0]
    if total_seconds <= 0 or total_meters <= 0:
        return 0.0

    return convert_speed(total_meters / total_seconds, unit)


def segment_speeds(
    times: Sequence[datetime],
    distances: Sequence[float],
    min_speed: float = DEFAULT_MIN_SEGMENT_SPEED,
    unit: str = "mph",
) -> List[float]:
    """Calculate speeds between consecutive trackpoints.

    Segments with non-positive duration or negative distance are skipped,
    as are segments slower than ``min_speed``.

    Args:
        times: Timestamps, aligned by index with ``distances``.
        distances: Cumulative distances in meters.
        min_speed: Inclusive lower bound in ``unit``.
        unit: Output speed unit.

    Returns:
        List of segment speeds in ``unit``, in document order.

    Raises:
        ValidationError: If the sequences have different lengths.
    """
    if len(times) != len(distances):
        raise ValidationError(
            f"Time and distance samples are not aligned ({len(times)} vs {len(distances)})"
        )
    if len(times) < 2:
        return []

    seconds = np.array([(b - a).total_seconds() for a, b in zip(times[:-1], times[1:])])
    meters = np.diff(np.asarray(distances, dtype=float))

    valid = (seconds > 0) & (meters >= 0)
    speeds = [convert_speed(m / s, unit) for m, s in zip(meters[valid], seconds[valid])]
    return [float(v) for v in speeds if v >= min_speed]


def total_elevation_change(altitudes: Sequence[float], unit: str = "feet") -> float:
    """Sum absolute altitude changes between consecutive samples.

    Climbs and descents both count, so [100, 105, 95] meters gives 15 meters.

    Returns:
        Total change in ``unit``, or 0.0 with fewer than two samples.
    """
    if len(altitudes) < 2:
        return 0.0
    total_meters = float(np.abs(np.diff(np.asarray(altitudes, dtype=float))).sum())
    return convert_elevation(total_meters, unit)
