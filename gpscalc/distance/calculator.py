"""Great-circle and elevation-aware distances between coordinates.

2D distance uses the Haversine formula on a sphere:

    a = sin²(Δφ/2) + cos(φ1)·cos(φ2)·sin²(Δλ/2)
    c = 2·atan2(√a, √(1−a))
    d = R·c          (R = 6371 km, 3959 mi)

3D distance adds the elevation difference with Pythagoras:

    d3D = √(d2D_m² + Δh_m²)

Every distance is rounded to 6 decimal places when it is built. Invalid
coordinates yield None; a missing or non-finite elevation turns a 3D request
into the 2D result.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence

import numpy as np

from ..config import DISTANCE_PRECISION, EARTH_RADIUS_KM, EARTH_RADIUS_MILES, MILES_PER_KM
from ..geo.coordinate import Coordinate, Latitude
from ..geo.validation import is_finite_number, is_valid_coordinate
from ..unit import Degree, Kilometer, Meter
from .models import (
    CumulativeDistance,
    DistanceMatrixResult,
    DistanceValue,
    Matrix,
    Segment,
    Statistics,
)

logger = logging.getLogger(__name__)


def _central_angle(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine central angle in radians."""
    phi1 = float(Latitude(lat1))
    phi2 = float(Latitude(lat2))
    delta_phi = float(Degree(lat2 - lat1))
    delta_lambda = float(Degree(lon2 - lon1))

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    # Rounding can push a a hair past 1 for antipodal points
    a = min(1.0, a)
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def calculate_2d_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> Optional[DistanceValue]:
    """Great-circle distance between two points.

    Args:
        lat1, lon1: First point in decimal degrees.
        lat2, lon2: Second point in decimal degrees.

    Returns:
        Optional[DistanceValue]: Distance, or None if either point is outside
        the valid coordinate range or not finite.

    Example:
        >>> calculate_2d_distance(0, 0, 0, 1)
        DistanceValue(km=111.194927, miles=69.097585)
    """
    if not (is_valid_coordinate(lat1, lon1) and is_valid_coordinate(lat2, lon2)):
        return None

    c = _central_angle(lat1, lon1, lat2, lon2)
    return DistanceValue.from_km_miles(EARTH_RADIUS_KM * c, EARTH_RADIUS_MILES * c)


def calculate_3d_distance(
    lat1: float,
    lon1: float,
    elev1: Optional[float],
    lat2: float,
    lon2: float,
    elev2: Optional[float],
) -> Optional[DistanceValue]:
    """Straight-line distance including the elevation difference.

    Args:
        lat1, lon1, elev1: First point; elevation in meters.
        lat2, lon2, elev2: Second point; elevation in meters.

    Returns:
        Optional[DistanceValue]: 3D distance; the 2D distance when either
        elevation is missing or not finite; None for invalid coordinates.
    """
    distance_2d = calculate_2d_distance(lat1, lon1, lat2, lon2)
    if distance_2d is None:
        return None

    if not (is_finite_number(elev1) and is_finite_number(elev2)):
        logger.debug(f"Elevation unavailable ({elev1!r}, {elev2!r}); using 2D distance")
        return distance_2d

    horizontal_m = Kilometer(distance_2d.km).to(Meter)
    vertical_m = abs(elev1 - elev2)
    distance_km = Meter(math.hypot(horizontal_m, vertical_m)).to(Kilometer)

    return DistanceValue.from_km_miles(distance_km, distance_km * MILES_PER_KM)


def _pair_distance(a: Coordinate, b: Coordinate, include_3d: bool) -> Optional[DistanceValue]:
    if include_3d:
        return calculate_3d_distance(a.lat, a.lon, a.elevation, b.lat, b.lon, b.elevation)
    return calculate_2d_distance(a.lat, a.lon, b.lat, b.lon)


def _matrix_cell(coordinates: Sequence[Coordinate], i: int, j: int, include_3d: bool) -> Optional[DistanceValue]:
    if i == j:
        return DistanceValue.zero()
    distance = _pair_distance(coordinates[i], coordinates[j], include_3d)
    if distance is None:
        logger.debug(f"No distance between points {i + 1} and {j + 1}")
    return distance


def _build_matrix(coordinates: Sequence[Coordinate], include_3d: bool) -> Matrix:
    n = len(coordinates)
    return tuple(
        tuple(_matrix_cell(coordinates, i, j, include_3d) for j in range(n))
        for i in range(n)
    )


def _upper_triangle_km(matrix: Matrix) -> List[float]:
    n = len(matrix)
    return [
        matrix[i][j].km
        for i in range(n)
        for j in range(i + 1, n)
        if matrix[i][j] is not None
    ]


def calculate_statistics(distances: Optional[Iterable[float]]) -> Optional[Statistics]:
    """Min, max, mean and count of kilometer observations.

    Returns:
        Optional[Statistics]: None for empty input.
    """
    if distances is None:
        return None
    values = np.asarray(list(distances), dtype=float)
    if values.size == 0:
        return None

    return Statistics(
        min=round(float(values.min()), DISTANCE_PRECISION),
        max=round(float(values.max()), DISTANCE_PRECISION),
        average=round(float(values.mean()), DISTANCE_PRECISION),
        count=int(values.size),
    )


def calculate_cumulative_distance(
    coordinates: Sequence[Coordinate],
    include_3d: bool = False,
) -> Optional[CumulativeDistance]:
    """Length of the path 0 -> 1 -> ... -> n-1.

    Legs whose distance cannot be computed are left out of the total and of
    the segment list.

    Returns:
        Optional[CumulativeDistance]: None for fewer than two points.
    """
    if not coordinates or len(coordinates) < 2:
        return None

    total_km = 0.0
    total_miles = 0.0
    segments: List[Segment] = []

    for index in range(len(coordinates) - 1):
        distance = _pair_distance(coordinates[index], coordinates[index + 1], include_3d)
        if distance is None:
            continue
        total_km += distance.km
        total_miles += distance.miles
        segments.append(Segment(index, index + 1, distance))

    return CumulativeDistance(
        total_km=round(total_km, DISTANCE_PRECISION),
        total_miles=round(total_miles, DISTANCE_PRECISION),
        segments=tuple(segments),
    )


def calculate_distance_matrix(
    coordinates: Sequence[Coordinate],
    include_2d: bool = True,
    include_3d: bool = True,
) -> Optional[DistanceMatrixResult]:
    """Pairwise distances, statistics and path length for a set of points.

    The diagonal is zero; an off-diagonal cell is None when either point is
    invalid. Statistics are taken over the upper triangle, so each pair is
    counted once.

    Args:
        coordinates: Points in path order.
        include_2d: Compute the great-circle matrix.
        include_3d: Compute the elevation-aware matrix.

    Returns:
        Optional[DistanceMatrixResult]: None for fewer than two points.
    """
    if not coordinates or len(coordinates) < 2:
        return None

    points = tuple(coordinates)
    matrix_2d = _build_matrix(points, include_3d=False) if include_2d else None
    matrix_3d = _build_matrix(points, include_3d=True) if include_3d else None

    return DistanceMatrixResult(
        coordinates=points,
        matrix_2d=matrix_2d,
        matrix_3d=matrix_3d,
        statistics_2d=calculate_statistics(_upper_triangle_km(matrix_2d)) if include_2d else None,
        statistics_3d=calculate_statistics(_upper_triangle_km(matrix_3d)) if include_3d else None,
        cumulative_2d=calculate_cumulative_distance(points, include_3d=False) if include_2d else None,
        cumulative_3d=calculate_cumulative_distance(points, include_3d=True) if include_3d else None,
    )
