"""Geographic value types and validation predicates.

Components:
    Coordinate: Immutable point with optional elevation and name.
    LatLon: Bare (lat, lon) pair returned by normalization.
    Latitude / Longitude: Axis-tagged degree units, stored in radians.
    Validators: range and finiteness predicates and elevation sanitizing.
        The batch filter built on them is
        ``gpscalc.converter.validate_coordinates``.

Typical Usage:
    >>> from gpscalc.geo import Coordinate, is_valid_coordinate
    >>> is_valid_coordinate(44.47, -70.88)
    True
    >>> Coordinate(44.47, -70.88, 120.0).label(0)
    'Point 1'
"""

from .coordinate import Coordinate, LatLon, Latitude, Longitude
from .validation import (
    is_finite_number,
    is_valid_coordinate,
    is_valid_elevation,
    is_valid_latitude,
    is_valid_longitude,
    sanitize_elevation,
)

__all__ = [
    "Coordinate",
    "LatLon",
    "Latitude",
    "Longitude",
    "is_finite_number",
    "is_valid_latitude",
    "is_valid_longitude",
    "is_valid_coordinate",
    "is_valid_elevation",
    "sanitize_elevation",
]
