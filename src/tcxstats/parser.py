"""
TCX file parser for Garmin Training Center activity files.

This module walks a TCX document and extracts per-trackpoint readings
(heart rate, cadence, power, speed, time, distance, altitude) into
parallel sample sequences for the statistics functions in
:mod:`tcxstats.metrics`.
"""

import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Union

from dateutil import parser as date_parser
from dateutil import tz

from tcxstats.constants import NAMESPACES, TCX_NAMESPACE
from tcxstats.exceptions import TcxFileCorruptedError, TcxFileNotFoundError

__all__ = [
    "Trackpoint",
    "TrackpointSeries",
    "read_trackpoints",
    "collect_series",
    "extract_series",
    "parse_tcx",
]

TRACKPOINT_TAG = f"{{{TCX_NAMESPACE}}}Trackpoint"

# Paths relative to a Trackpoint element
HEART_RATE_PATH = "tcx:HeartRateBpm/tcx:Value"
CADENCE_PATH = "tcx:Cadence"
POWER_PATH = "tcx:Extensions/ax:TPX/ax:Watts"
SPEED_PATH = "tcx:Extensions/ax:TPX/ax:Speed"
TIME_PATH = "tcx:Time"
DISTANCE_PATH = "tcx:DistanceMeters"
ALTITUDE_PATH = "tcx:AltitudeMeters"


@dataclass(frozen=True)
class Trackpoint:
    """One sample of an activity recording. Every field is optional."""

    heart_rate: Optional[float] = None
    cadence: Optional[float] = None
    power: Optional[float] = None
    speed: Optional[float] = None
    time: Optional[datetime] = None
    distance: Optional[float] = None
    altitude: Optional[float] = None


@dataclass
class TrackpointSeries:
    """Sample sequences collected from a TCX document.

    Each list holds the values of one field in document order, skipping
    trackpoints where that field is absent. The lists may therefore have
    different lengths. ``track_times`` and ``track_distances`` are aligned
    by index and only contain trackpoints carrying both a time and a
    distance.
    """

    heart_rates: List[float] = field(default_factory=list)
    cadences: List[float] = field(default_factory=list)
    powers: List[float] = field(default_factory=list)
    speeds: List[float] = field(default_factory=list)
    times: List[datetime] = field(default_factory=list)
    distances: List[float] = field(default_factory=list)
    altitudes: List[float] = field(default_factory=list)
    track_times: List[datetime] = field(default_factory=list)
    track_distances: List[float] = field(default_factory=list)
    trackpoint_count: int = 0


def _parse_float(text: Optional[str]) -> Optional[float]:
    """Parse a decimal number using '.' as separator, or None if invalid."""
    if text is None:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    # nan/inf would leak into the statistics
    return value if math.isfinite(value) else None


def _parse_time(text: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp and convert it to UTC.

    Timestamps without an offset are taken to be UTC already.
    """
    if text is None or not text.strip():
        return None
    try:
        value = date_parser.isoparse(text.strip())
    except (ValueError, OverflowError):
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=tz.UTC)
    return value.astimezone(tz.UTC)


def _find_text(element: ET.Element, path: str) -> Optional[str]:
    child = element.find(path, NAMESPACES)
    return child.text if child is not None else None


def _read_trackpoint(element: ET.Element) -> Trackpoint:
    return Trackpoint(
        heart_rate=_parse_float(_find_text(element, HEART_RATE_PATH)),
        cadence=_parse_float(_find_text(element, CADENCE_PATH)),
        power=_parse_float(_find_text(element, POWER_PATH)),
        speed=_parse_float(_find_text(element, SPEED_PATH)),
        time=_parse_time(_find_text(element, TIME_PATH)),
        distance=_parse_float(_find_text(element, DISTANCE_PATH)),
        altitude=_parse_float(_find_text(element, ALTITUDE_PATH)),
    )


def read_trackpoints(document: Union[ET.ElementTree, ET.Element]) -> List[Trackpoint]:
    """Read every Trackpoint element of a parsed TCX document.

    Trackpoints are found anywhere in the document, regardless of their
    parent (Activity/Lap/Track or Course/Track), and returned in document
    order.

    Args:
        document: Parsed document, either an ElementTree or its root element.

    Returns:
        List of Trackpoint objects. Fields that are missing or cannot be
        parsed are left as None.
    """
    root = document.getroot() if isinstance(document, ET.ElementTree) else document
    return [_read_trackpoint(tp) for tp in root.iter(TRACKPOINT_TAG)]


def collect_series(trackpoints: Iterable[Trackpoint]) -> TrackpointSeries:
    """Split trackpoints into per-field sample sequences."""
    series = TrackpointSeries()
    for tp in trackpoints:
        series.trackpoint_count += 1
        if tp.heart_rate is not None:
            series.heart_rates.append(tp.heart_rate)
        if tp.cadence is not None:
            series.cadences.append(tp.cadence)
        if tp.power is not None:
            series.powers.append(tp.power)
        if tp.speed is not None:
            series.speeds.append(tp.speed)
        if tp.time is not None:
            series.times.append(tp.time)
        if tp.distance is not None:
            series.distances.append(tp.distance)
        if tp.altitude is not None:
            series.altitudes.append(tp.altitude)
        if tp.time is not None and tp.distance is not None:
            series.track_times.append(tp.time)
            series.track_distances.append(tp.distance)
    return series


def extract_series(document: Union[ET.ElementTree, ET.Element]) -> TrackpointSeries:
    """Extract all sample sequences from a parsed TCX document."""
    return collect_series(read_trackpoints(document))


def parse_tcx(path: Union[str, Path]) -> TrackpointSeries:
    """Load a TCX file and extract its sample sequences.

    Args:
        path: Path to the TCX file.

    Returns:
        TrackpointSeries with one sequence per field.

    Raises:
        TcxFileNotFoundError: If the file does not exist.
        TcxFileCorruptedError: If the file is not well-formed XML.
    """
    path = Path(path)
    if not path.is_file():
        raise TcxFileNotFoundError(f"File not found: {path}")

    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise TcxFileCorruptedError(str(e)) from e

    return extract_series(tree)
