"""Range and finiteness checks for coordinates and elevations.

Predicates here never raise on bad data: anything that is not a finite real
number inside its range is simply invalid. Any ``numbers.Real`` counts, so
numpy scalars pass the same checks as Python floats.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Optional

from ..config import (
    MAX_ABS_ELEVATION_M,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)

logger = logging.getLogger(__name__)


def is_finite_number(value: object) -> bool:
    """True for a finite real number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def is_valid_latitude(lat: object) -> bool:
    return is_finite_number(lat) and MIN_LATITUDE <= lat <= MAX_LATITUDE


def is_valid_longitude(lon: object) -> bool:
    return is_finite_number(lon) and MIN_LONGITUDE <= lon <= MAX_LONGITUDE


def is_valid_coordinate(lat: object, lon: object) -> bool:
    """Both axes finite and inside [-90, 90] x [-180, 180]."""
    return is_valid_latitude(lat) and is_valid_longitude(lon)


def is_valid_elevation(elevation: object) -> bool:
    """Finite and within ±11 km of the reference surface."""
    return is_finite_number(elevation) and abs(elevation) <= MAX_ABS_ELEVATION_M


def sanitize_elevation(elevation: Optional[float]) -> Optional[float]:
    """Return ``elevation`` as a float if valid, else None.

    Out-of-range values are dropped, never clamped.
    """
    if elevation is None:
        return None
    if not is_valid_elevation(elevation):
        logger.debug(f"Dropping elevation {elevation!r}: non-finite or beyond ±{MAX_ABS_ELEVATION_M:g} m")
        return None
    return float(elevation)
