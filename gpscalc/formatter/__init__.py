"""Presentation helpers for distances and elevations.

Components:
    format_distance_with_dynamic_units: km -> readable value/unit pair under
        the meters, feet or survey-feet system.
    convert_elevation: meters <-> feet <-> survey feet, through meters.
    format_results_summary: clipboard text for a whole calculation.

Example:
    >>> from gpscalc.formatter import format_distance_with_dynamic_units
    >>> str(format_distance_with_dynamic_units(0.000004))
    '4 mm'
"""

from .dynamic_units import (
    FormattedDistance,
    UnitSystem,
    coerce_unit_system,
    format_distance_with_dynamic_units,
)
from .elevation import ELEVATION_UNITS, convert_elevation
from .report import format_results_summary

__all__ = [
    "UnitSystem",
    "FormattedDistance",
    "coerce_unit_system",
    "format_distance_with_dynamic_units",
    "ELEVATION_UNITS",
    "convert_elevation",
    "format_results_summary",
]
