"""Distance engine.

Two independent algorithms live here:

- ``calculator``: Haversine 2D and elevation-aware 3D distances, the pairwise
  matrix, cumulative path length and statistics.
- ``breakdown``: the planar meters-per-degree expansion used to explain a
  single pair step by step, with a survey grade.

Typical Usage:
    >>> from gpscalc.geo import Coordinate
    >>> from gpscalc.distance import calculate_distance_matrix
    >>> points = [Coordinate(0, 0, 0), Coordinate(0, 1, 0), Coordinate(1, 1, 100)]
    >>> result = calculate_distance_matrix(points)
    >>> result.statistics_2d.count
    3
"""

from .breakdown import (
    PairBreakdown,
    SurveyAssessment,
    assess_survey_grade,
    calculate_detailed_distance,
    meters_per_degree,
    pairwise_breakdowns,
)
from .calculator import (
    calculate_2d_distance,
    calculate_3d_distance,
    calculate_cumulative_distance,
    calculate_distance_matrix,
    calculate_statistics,
)
from .models import (
    CumulativeDistance,
    DistanceMatrixResult,
    DistanceValue,
    Segment,
    Statistics,
)

__all__ = [
    "DistanceValue",
    "Statistics",
    "Segment",
    "CumulativeDistance",
    "DistanceMatrixResult",
    "calculate_2d_distance",
    "calculate_3d_distance",
    "calculate_distance_matrix",
    "calculate_cumulative_distance",
    "calculate_statistics",
    "meters_per_degree",
    "PairBreakdown",
    "calculate_detailed_distance",
    "pairwise_breakdowns",
    "SurveyAssessment",
    "assess_survey_grade",
]
