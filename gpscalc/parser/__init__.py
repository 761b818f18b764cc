"""Coordinate text parsing and notation detection.

Typical Usage:
    >>> from gpscalc.parser import parse_multiple_coordinates, detect_format
    >>> text = '''
    ... 44.4734245277 -70.88862750833 120.5
    ... N44° 28' 30" W70° 53' 10"
    ... '''
    >>> [round(c.lat, 4) for c in parse_multiple_coordinates(text)]
    [44.4734, 44.475]
    >>> detect_format("41 48 15.79259 112 50 1.04150")
    <CoordinateFormat.DMS: 'dms'>
"""

from .batch import parse_coordinate_with_elevation, parse_elevation, parse_multiple_coordinates
from .formats import (
    FORMAT_VARIANTS,
    CoordinateFormat,
    FormatVariant,
    detect_format,
    match_variant,
    parse_coordinate,
)

__all__ = [
    "CoordinateFormat",
    "FormatVariant",
    "FORMAT_VARIANTS",
    "match_variant",
    "parse_coordinate",
    "detect_format",
    "parse_elevation",
    "parse_coordinate_with_elevation",
    "parse_multiple_coordinates",
]
