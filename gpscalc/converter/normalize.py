"""Coordinate range validation with longitude wraparound.

``validate_coordinates`` is the batch gate between the lenient parser and the
distance engine.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from ..config import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from ..geo.coordinate import Coordinate, LatLon
from ..geo.validation import is_finite_number, sanitize_elevation

logger = logging.getLogger(__name__)

_FULL_TURN = 360.0


def normalize_longitude(lon: float) -> float:
    """Wrap ``lon`` into [-180, 180] by whole turns.

    Equivalent to repeatedly adding or subtracting 360 until in range, so
    180 stays 180 and 540 becomes 180 rather than -180.
    """
    if lon > MAX_LONGITUDE:
        lon -= _FULL_TURN * math.ceil((lon - MAX_LONGITUDE) / _FULL_TURN)
    elif lon < MIN_LONGITUDE:
        lon += _FULL_TURN * math.ceil((MIN_LONGITUDE - lon) / _FULL_TURN)
    return lon


def validate_and_normalize(lat: float, lon: float) -> Optional[LatLon]:
    """Validate a pair and wrap its longitude.

    Latitudes are never wrapped: past the poles there is no meaningful
    continuation.

    Args:
        lat: Latitude in decimal degrees.
        lon: Longitude in decimal degrees, any magnitude.

    Returns:
        Optional[LatLon]: The pair with longitude in [-180, 180], or None if
        either value is non-finite or the latitude is outside [-90, 90].

    Example:
        >>> validate_and_normalize(10.0, 200.0)
        LatLon(lat=10.0, lon=-160.0)
        >>> validate_and_normalize(91.0, 0.0) is None
        True
    """
    if not (is_finite_number(lat) and is_finite_number(lon)):
        return None
    if lat < MIN_LATITUDE or lat > MAX_LATITUDE:
        return None
    return LatLon(float(lat), float(normalize_longitude(float(lon))))


def validate_coordinates(coordinates: Iterable[Coordinate]) -> List[Coordinate]:
    """Filter parsed coordinates down to the ones safe to measure.

    Each coordinate goes through ``validate_and_normalize``: non-finite or
    out-of-range latitudes reject the point, longitudes are wrapped into
    [-180, 180]. Invalid elevations are replaced by None.

    Args:
        coordinates: Coordinates in input order.

    Returns:
        List[Coordinate]: New coordinates, input order preserved.

    Example:
        >>> validate_coordinates([Coordinate(44.47, 200.0), Coordinate(91.0, 0.0)])
        [Coordinate(44.470000, -160.000000)]
    """
    valid: List[Coordinate] = []
    for index, coordinate in enumerate(coordinates):
        normalized = validate_and_normalize(coordinate.lat, coordinate.lon)
        if normalized is None:
            logger.debug(f"Rejecting coordinate #{index + 1} ({coordinate.lat!r}, {coordinate.lon!r})")
            continue
        valid.append(
            Coordinate(
                lat=normalized.lat,
                lon=normalized.lon,
                elevation=sanitize_elevation(coordinate.elevation),
                name=coordinate.name,
            )
        )
    return valid
