"""GPS coordinate parsing and distance calculation.

gpscalc turns free-form coordinate text into validated decimal coordinates
and measures the distances between them.

Framework Components:
    Units (gpscalc.unit):
        • Type-safe angle and length units with SI storage
        • Metric, international foot and US survey foot scales

    Geographic Types (gpscalc.geo):
        • Coordinate: immutable point with optional elevation and name
        • Range/finiteness validators

    Parsing (gpscalc.parser):
        • Ordered notation variants: space-separated DMS, DMS with leading or
          trailing cardinals, decimal with cardinals, bare decimal pairs
        • Multi-line input with optional elevation per line
        • Coarse format detection

    Conversion (gpscalc.converter):
        • Decimal degrees <-> DMS, longitude wraparound, batch validation
        • Decimal (10 places) and DMS (5-place seconds) text formatting

    Distance (gpscalc.distance):
        • Haversine 2D and elevation-aware 3D distance
        • Pairwise matrix, cumulative path, statistics
        • Planar meters-per-degree breakdown with survey grading

    Presentation (gpscalc.formatter):
        • Magnitude-adaptive units under meters / feet / survey-feet
        • Elevation unit conversion and a plain-text results summary

Typical Usage:
    >>> from gpscalc import calculate_from_text, format_distance_with_dynamic_units
    >>> result = calculate_from_text('''
    ... 44.4734245277 -70.88862750833 120
    ... N44° 28' 30" W70° 53' 10" 135
    ... ''')
    >>> result.statistics_2d.count
    1
    >>> str(format_distance_with_dynamic_units(result.statistics_3d.max))  # doctest: +SKIP
    '...'
"""

from .converter import (
    DMS,
    Axis,
    convert_to_dms,
    decimal_to_dms,
    dms_to_decimal,
    format_decimal,
    format_dms,
    validate_and_normalize,
    validate_coordinates,
)
from .distance import (
    CumulativeDistance,
    DistanceMatrixResult,
    DistanceValue,
    PairBreakdown,
    Statistics,
    assess_survey_grade,
    calculate_2d_distance,
    calculate_3d_distance,
    calculate_cumulative_distance,
    calculate_detailed_distance,
    calculate_distance_matrix,
    calculate_statistics,
    pairwise_breakdowns,
)
from .formatter import (
    FormattedDistance,
    UnitSystem,
    convert_elevation,
    format_distance_with_dynamic_units,
    format_results_summary,
)
from .geo import Coordinate, LatLon
from .parser import CoordinateFormat, detect_format, parse_coordinate, parse_multiple_coordinates
from .pipeline import calculate_from_text

__version__ = "0.1.0"

__all__ = [
    # Data model
    "Coordinate",
    "LatLon",
    # Parser
    "CoordinateFormat",
    "parse_coordinate",
    "parse_multiple_coordinates",
    "detect_format",
    # Converter
    "DMS",
    "Axis",
    "decimal_to_dms",
    "dms_to_decimal",
    "validate_and_normalize",
    "validate_coordinates",
    "format_dms",
    "format_decimal",
    "convert_to_dms",
    # Distance
    "DistanceValue",
    "Statistics",
    "CumulativeDistance",
    "DistanceMatrixResult",
    "calculate_2d_distance",
    "calculate_3d_distance",
    "calculate_distance_matrix",
    "calculate_cumulative_distance",
    "calculate_statistics",
    "PairBreakdown",
    "calculate_detailed_distance",
    "pairwise_breakdowns",
    "assess_survey_grade",
    # Formatter
    "UnitSystem",
    "FormattedDistance",
    "format_distance_with_dynamic_units",
    "convert_elevation",
    "format_results_summary",
    # Pipeline
    "calculate_from_text",
]
