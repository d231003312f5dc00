"""
Console report for TCX activity statistics.

Reads a TCX file path (from the command line or standard input), extracts
the trackpoint sequences and prints one line per metric.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from tcxstats.constants import (
    AVAILABLE_METRICS,
    DEFAULT_METRICS,
    DEFAULT_MIN_SEGMENT_SPEED,
    DEFAULT_UNITS,
    UNIT_SYSTEMS,
)
from tcxstats.exceptions import ConfigurationError
from tcxstats.metrics import (
    SampleStats,
    average_speed,
    convert_speed,
    mean_and_stddev,
    segment_speeds,
    total_elevation_change,
)
from tcxstats.parser import TrackpointSeries, parse_tcx

__all__ = [
    "AnalysisConfig",
    "build_config",
    "format_stats",
    "build_report",
    "parse_arguments",
    "main_with_args",
    "main",
]

PROMPT = "Enter path to TCX file:"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a report run."""

    units: str = DEFAULT_UNITS
    min_segment_speed: float = DEFAULT_MIN_SEGMENT_SPEED
    metrics: Tuple[str, ...] = DEFAULT_METRICS

    @property
    def speed_unit(self) -> str:
        return UNIT_SYSTEMS[self.units]["speed"]

    @property
    def elevation_unit(self) -> str:
        return UNIT_SYSTEMS[self.units]["elevation"]


def build_config(
    units: str = DEFAULT_UNITS,
    min_segment_speed: float = DEFAULT_MIN_SEGMENT_SPEED,
    metrics: Optional[str] = None,
) -> AnalysisConfig:
    """Create a validated AnalysisConfig.

    Args:
        units: Unit system name, "imperial" or "metric".
        min_segment_speed: Slowest segment speed kept, in the system's speed unit.
        metrics: Comma-separated metric names, or None for the defaults.

    Raises:
        ConfigurationError: On an unknown unit system or metric name.
    """
    if units not in UNIT_SYSTEMS:
        raise ConfigurationError(f"Unknown unit system: {units}")

    if metrics is None:
        selected = DEFAULT_METRICS
    else:
        selected = tuple(name.strip() for name in metrics.split(",") if name.strip())
        unknown = [name for name in selected if name not in AVAILABLE_METRICS]
        if unknown:
            raise ConfigurationError(f"Unknown metric(s): {', '.join(unknown)}")

    return AnalysisConfig(units=units, min_segment_speed=min_segment_speed, metrics=selected)


def format_stats(label: str, stats: SampleStats, unit: str) -> str:
    """Format one statistics line, or a 'No data' line when count is 0."""
    if stats.count == 0:
        return f"{label}: No data"
    return (
        f"{label}: Avg = {stats.mean:.2f} {unit}, "
        f"StdDev = {stats.stddev:.2f} {unit} (n={stats.count})"
    )


def _speed_lines(
    series: TrackpointSeries, config: AnalysisConfig, segments: List[float]
) -> List[str]:
    unit = config.speed_unit
    avg = average_speed(series.track_times, series.track_distances, unit)
    if avg > 0 and segments:
        spread = mean_and_stddev(segments).stddev
        return [
            f"Speed: Avg = {avg:.2f} {unit}, StdDev = {spread:.2f} {unit} (n={len(segments)})"
        ]
    return ["Speed: No data"]


def _segment_lines(config: AnalysisConfig, segments: List[float]) -> List[str]:
    unit = config.speed_unit
    if not segments:
        return [f"No segment speeds >= {config.min_segment_speed:g} {unit} could be calculated."]
    stats = mean_and_stddev(segments)
    return [
        "",
        f"Segment Speed Stats: Avg = {stats.mean:.2f} {unit}, "
        f"StdDev = {stats.stddev:.2f} {unit}, "
        f"Min = {min(segments):.2f} {unit}, Max = {max(segments):.2f} {unit}",
    ]


def build_report(series: TrackpointSeries, config: Optional[AnalysisConfig] = None) -> List[str]:
    """Build the report lines for the enabled metrics.

    Speed metrics use the paired time/distance track, so elapsed time and
    distance always come from the same trackpoints.
    """
    config = config or AnalysisConfig()
    speed_unit = config.speed_unit
    lines: List[str] = []

    segments: List[float] = []
    if "speed" in config.metrics or "segments" in config.metrics:
        segments = segment_speeds(
            series.track_times,
            series.track_distances,
            min_speed=config.min_segment_speed,
            unit=speed_unit,
        )

    for metric in config.metrics:
        if metric == "heart_rate":
            lines.append(format_stats("Heart Rate", mean_and_stddev(series.heart_rates), "bpm"))
        elif metric == "cadence":
            lines.append(format_stats("Cadence", mean_and_stddev(series.cadences), "rpm"))
        elif metric == "power":
            lines.append(format_stats("Power", mean_and_stddev(series.powers), "watts"))
        elif metric == "raw_speed":
            converted = [convert_speed(v, speed_unit) for v in series.speeds]
            lines.append(format_stats("Sensor Speed", mean_and_stddev(converted), speed_unit))
        elif metric == "speed":
            lines.extend(_speed_lines(series, config, segments))
        elif metric == "segments":
            lines.extend(_segment_lines(config, segments))
        elif metric == "elevation":
            change = total_elevation_change(series.altitudes, config.elevation_unit)
            lines.extend(["", f"Total Elevation Change: {change:.2f} {config.elevation_unit}"])

    return lines


def _describe_series(series: TrackpointSeries) -> List[str]:
    return [
        f"Trackpoints: {series.trackpoint_count}",
        f"  heart rate: {len(series.heart_rates)}, cadence: {len(series.cadences)}, "
        f"power: {len(series.powers)}, speed: {len(series.speeds)}",
        f"  time: {len(series.times)}, distance: {len(series.distances)}, "
        f"altitude: {len(series.altitudes)}, track: {len(series.track_times)}",
        "",
    ]


def _read_path(path: Optional[str]) -> str:
    """Return the given path, or prompt for one on standard input."""
    if path is None:
        print(PROMPT)
        try:
            path = input()
        except EOFError:
            path = ""
    return path.strip().strip('"').strip("'")


def parse_arguments(args: Optional[Sequence[str]] = None):
    """Parse command line arguments"""
    ap = argparse.ArgumentParser(description="Print heart rate, cadence, power and speed stats")
    ap.add_argument("tcx_file", nargs="?", help="TCX file to analyze (prompted if omitted)")
    ap.add_argument("--units", choices=sorted(UNIT_SYSTEMS), default=DEFAULT_UNITS)
    ap.add_argument(
        "--min-speed",
        type=float,
        default=DEFAULT_MIN_SEGMENT_SPEED,
        help="Ignore segments slower than this, in the selected speed unit",
    )
    ap.add_argument(
        "--metrics",
        type=str,
        default=None,
        help=f"Comma-separated report sections: {','.join(AVAILABLE_METRICS)}",
    )
    ap.add_argument("--verbose", action="store_true", help="Print sample counts per field")
    return ap.parse_args(args)


def main_with_args(args) -> int:
    """Main function that takes parsed arguments"""
    path = _read_path(args.tcx_file)

    if not path or not Path(path).is_file():
        print("File not found.")
        return 0

    try:
        config = build_config(args.units, args.min_speed, args.metrics)
        series = parse_tcx(path)
        lines = build_report(series, config)
        if args.verbose:
            lines = _describe_series(series) + lines
    except Exception as e:  # pylint: disable=broad-except
        print(f"Error: {e}")
        return 0

    for line in lines:
        print(line)
    return 0


def main():
    """Main entry point for command line"""
    args = parse_arguments()
    return main_with_args(args)


if __name__ == "__main__":
    main()
