"""Step-by-step distance breakdown for a pair of points.

This is a separate computation from the Haversine engine. It linearizes the
Earth around the first point with empirical meters-per-degree coefficients so
every intermediate number can be shown:

    m/°lat = 111132.92 − 559.82·cos(2φ) + 1.175·cos(4φ)
    m/°lon = 111412.84·cos(φ) − 93.5·cos(3φ)
    horizontal = √((Δlat·m/°lat)² + (Δlon·m/°lon)²)

Over long baselines it drifts from the great-circle result; the two are not
interchangeable.

Survey grades bucket the 3D total against classical order/class tolerances:

    < 1 mm   First Order          < 3 cm  Second Order Class II
    < 3 mm   First Order          < 10 cm Third Order
    < 1 cm   Second Order Class I < 30 cm Third Order
                                  < 1 m   Fourth Order
                                  else    Below Survey Standards
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..config import METERS_PER_DEGREE_LAT, METERS_PER_DEGREE_LON
from ..geo.coordinate import Coordinate, Latitude


@dataclass(frozen=True)
class SurveyAssessment:
    """Survey accuracy class of a 3D offset."""
    grade: str
    description: str
    recommendation: str


_SURVEY_GRADES: Tuple[Tuple[float, SurveyAssessment], ...] = (
    (0.001, SurveyAssessment(
        "First Order Survey Quality",
        "Exceptional precision: sub-millimeter accuracy (First Order Survey)",
        "Suitable for high-precision engineering and geodetic control",
    )),
    (0.003, SurveyAssessment(
        "First Order Survey Quality",
        "Excellent precision: sub-3mm accuracy (First Order Survey)",
        "Excellent for precise engineering surveys",
    )),
    (0.01, SurveyAssessment(
        "Second Order Class I Quality",
        "High precision: sub-1cm accuracy (Second Order Class I)",
        "Good for most engineering and construction surveys",
    )),
    (0.03, SurveyAssessment(
        "Second Order Class II Quality",
        "Good precision: sub-3cm accuracy (Second Order Class II)",
        "Acceptable for general construction and mapping",
    )),
    (0.1, SurveyAssessment(
        "Third Order Quality",
        "Acceptable precision: sub-10cm accuracy (Third Order)",
        "Suitable for general mapping and lower-precision surveys",
    )),
    (0.3, SurveyAssessment(
        "Third Order Quality",
        "Moderate precision: sub-30cm accuracy (Third Order)",
        "Basic mapping accuracy",
    )),
    (1.0, SurveyAssessment(
        "Fourth Order Quality",
        "Low precision: sub-1m accuracy (Fourth Order)",
        "Rough mapping only",
    )),
)

_BELOW_STANDARDS = SurveyAssessment(
    "Below Survey Standards",
    "Poor precision: 1m+ accuracy (Below survey standards)",
    "Not suitable for surveying applications",
)


def assess_survey_grade(horizontal_m: float, vertical_m: float) -> SurveyAssessment:
    """Classify the 3D magnitude of a horizontal/vertical offset in meters."""
    total = math.hypot(horizontal_m, vertical_m)
    for limit, assessment in _SURVEY_GRADES:
        if total < limit:
            return assessment
    return _BELOW_STANDARDS


def meters_per_degree(lat: float) -> Tuple[float, float]:
    """Length of one degree of latitude and of longitude at ``lat``.

    Returns:
        Tuple[float, float]: (meters per degree latitude,
        meters per degree longitude).
    """
    phi = float(Latitude(lat))
    a_lat, b_lat, c_lat = METERS_PER_DEGREE_LAT
    a_lon, b_lon = METERS_PER_DEGREE_LON
    per_lat = a_lat - b_lat * math.cos(2 * phi) + c_lat * math.cos(4 * phi)
    per_lon = a_lon * math.cos(phi) - b_lon * math.cos(3 * phi)
    return per_lat, per_lon


@dataclass(frozen=True)
class PairBreakdown:
    """Every intermediate value of the planar distance between two points.

    Distances are in meters. ``vertical_m`` is signed (second minus first).
    """
    from_label: str
    to_label: str
    delta_lat: float
    delta_lon: float
    meters_per_degree_lat: float
    meters_per_degree_lon: float
    delta_lat_m: float
    delta_lon_m: float
    horizontal_m: float
    vertical_m: float
    distance_3d_m: float
    assessment: SurveyAssessment


def calculate_detailed_distance(
    first: Coordinate,
    second: Coordinate,
    first_index: int = 0,
    second_index: int = 1,
) -> PairBreakdown:
    """Planar breakdown of the offset from ``first`` to ``second``.

    Meters-per-degree is evaluated at the first point's latitude. A missing
    elevation counts as 0 m.

    Args:
        first: Reference point.
        second: Compared point.
        first_index: Zero-based position of ``first``, for its label.
        second_index: Zero-based position of ``second``, for its label.
    """
    delta_lat = second.lat - first.lat
    delta_lon = second.lon - first.lon

    per_lat, per_lon = meters_per_degree(first.lat)
    delta_lat_m = delta_lat * per_lat
    delta_lon_m = delta_lon * per_lon
    horizontal = math.hypot(delta_lat_m, delta_lon_m)

    vertical = (second.elevation or 0.0) - (first.elevation or 0.0)

    return PairBreakdown(
        from_label=first.label(first_index),
        to_label=second.label(second_index),
        delta_lat=delta_lat,
        delta_lon=delta_lon,
        meters_per_degree_lat=per_lat,
        meters_per_degree_lon=per_lon,
        delta_lat_m=delta_lat_m,
        delta_lon_m=delta_lon_m,
        horizontal_m=horizontal,
        vertical_m=vertical,
        distance_3d_m=math.hypot(horizontal, vertical),
        assessment=assess_survey_grade(horizontal, abs(vertical)),
    )


def pairwise_breakdowns(
    coordinates: Sequence[Coordinate],
    reference_index: Optional[int] = None,
) -> List[PairBreakdown]:
    """Breakdowns for every pair, or for one reference against the rest.

    Args:
        coordinates: Points in input order.
        reference_index: When given, compare only this point against every
            other point.

    Returns:
        List[PairBreakdown]: ``i < j`` pairs in order, or reference pairs in
        order of the compared point. Empty for fewer than two points.

    Raises:
        IndexError: If ``reference_index`` is out of range.
    """
    if len(coordinates) < 2:
        return []

    if reference_index is not None:
        if not 0 <= reference_index < len(coordinates):
            raise IndexError(f"reference point {reference_index} out of range for {len(coordinates)} points")
        reference = coordinates[reference_index]
        return [
            calculate_detailed_distance(reference, other, reference_index, index)
            for index, other in enumerate(coordinates)
            if index != reference_index
        ]

    return [
        calculate_detailed_distance(coordinates[i], coordinates[j], i, j)
        for i in range(len(coordinates))
        for j in range(i + 1, len(coordinates))
    ]
