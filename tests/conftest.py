"""Shared fixtures for tcxstats tests."""

import pytest

TCX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<TrainingCenterDatabase '
    'xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2" '
    'xmlns:ns3="http://www.garmin.com/xmlschemas/ActivityExtension/v2">\n'
    "<Activities><Activity Sport=\"Biking\"><Id>2025-08-05T10:00:00Z</Id>"
    '<Lap StartTime="2025-08-05T10:00:00Z"><Track>\n'
)
TCX_FOOTER = "</Track></Lap></Activity></Activities>\n</TrainingCenterDatabase>\n"


def trackpoint_xml(
    time=None, hr=None, cadence=None, watts=None, speed=None, distance=None, altitude=None
):
    """Build one Trackpoint element; None fields are left out."""
    parts = ["<Trackpoint>"]
    if time is not None:
        parts.append(f"<Time>{time}</Time>")
    if altitude is not None:
        parts.append(f"<AltitudeMeters>{altitude}</AltitudeMeters>")
    if distance is not None:
        parts.append(f"<DistanceMeters>{distance}</DistanceMeters>")
    if hr is not None:
        parts.append(f"<HeartRateBpm><Value>{hr}</Value></HeartRateBpm>")
    if cadence is not None:
        parts.append(f"<Cadence>{cadence}</Cadence>")
    if watts is not None or speed is not None:
        parts.append("<Extensions><ns3:TPX>")
        if speed is not None:
            parts.append(f"<ns3:Speed>{speed}</ns3:Speed>")
        if watts is not None:
            parts.append(f"<ns3:Watts>{watts}</ns3:Watts>")
        parts.append("</ns3:TPX></Extensions>")
    parts.append("</Trackpoint>\n")
    return "".join(parts)


def tcx_document(*trackpoints):
    """Wrap Trackpoint elements in a minimal TCX document."""
    return TCX_HEADER + "".join(trackpoints) + TCX_FOOTER


@pytest.fixture
def ride_tcx():
    """Three-sample ride with every field present."""
    return tcx_document(
        trackpoint_xml("2025-08-05T10:00:00Z", 60, 80, 150, 4.0, 0.0, 100.0),
        trackpoint_xml("2025-08-05T10:00:10Z", 70, 85, 200, 5.0, 50.0, 105.0),
        trackpoint_xml("2025-08-05T10:00:20Z", 80, 90, 250, 6.0, 110.0, 95.0),
    )


@pytest.fixture
def write_tcx(tmp_path):
    """Write TCX text to a temporary file and return its path."""

    def _write(content, name="activity.tcx"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
