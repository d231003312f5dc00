"""
Constants for TCX parsing and unit conversion.
"""

# XML namespaces used by Garmin Training Center files
TCX_NAMESPACE = "http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2"
ACTIVITY_EXTENSION_NAMESPACE = "http://www.garmin.com/xmlschemas/ActivityExtension/v2"

NAMESPACES = {
    "tcx": TCX_NAMESPACE,
    "ax": ACTIVITY_EXTENSION_NAMESPACE,
}

# Conversion factors from SI units
MPS_TO_MPH = 2.2369362920544
MPS_TO_KPH = 3.6
METERS_TO_FEET = 3.28084

SPEED_CONVERSIONS = {
    "mph": MPS_TO_MPH,
    "km/h": MPS_TO_KPH,
    "m/s": 1.0,
}

ELEVATION_CONVERSIONS = {
    "feet": METERS_TO_FEET,
    "meters": 1.0,
}

# Speed and elevation units for each unit system
UNIT_SYSTEMS = {
    "imperial": {"speed": "mph", "elevation": "feet"},
    "metric": {"speed": "km/h", "elevation": "meters"},
}

# Report sections, in output order
AVAILABLE_METRICS = (
    "heart_rate",
    "cadence",
    "power",
    "raw_speed",
    "speed",
    "segments",
    "elevation",
)

# Analysis defaults
DEFAULT_UNITS = "imperial"
DEFAULT_MIN_SEGMENT_SPEED = 5.0
DEFAULT_METRICS = ("heart_rate", "cadence", "power", "speed", "segments", "elevation")
