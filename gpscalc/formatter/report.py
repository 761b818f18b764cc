"""Plain-text summary of a distance calculation."""

from __future__ import annotations

from typing import List, Optional, Union

from ..distance.models import CumulativeDistance, DistanceMatrixResult, Statistics
from .dynamic_units import UnitSystem, format_distance_with_dynamic_units

TITLE = "GPS Distance Calculation Results"


def _statistics_lines(heading: str, statistics: Optional[Statistics], unit_system) -> List[str]:
    if statistics is None:
        return []
    return [
        heading,
        f"Min: {format_distance_with_dynamic_units(statistics.min, unit_system)}",
        f"Max: {format_distance_with_dynamic_units(statistics.max, unit_system)}",
        f"Average: {format_distance_with_dynamic_units(statistics.average, unit_system)}",
        "",
    ]


def _cumulative_line(label: str, cumulative: Optional[CumulativeDistance], unit_system) -> List[str]:
    if cumulative is None:
        return []
    return [f"{label}: {format_distance_with_dynamic_units(cumulative.total_km, unit_system)}"]


def format_results_summary(
    result: DistanceMatrixResult,
    unit_system: Union[UnitSystem, str] = UnitSystem.METERS,
) -> str:
    """Render points, statistics and path totals as clipboard text.

    Example output::

        GPS Distance Calculation Results

        Coordinates:
        Point 1: 44.473425, -70.888628, 120.00m
        Point 2: 44.475000, -70.886111

        2D Distance Statistics:
        Min: ...
    """
    lines = [TITLE, "", "Coordinates:"]
    for label, coordinate in zip(result.labels, result.coordinates):
        line = f"{label}: {coordinate.lat:.6f}, {coordinate.lon:.6f}"
        if coordinate.elevation is not None:
            line += f", {coordinate.elevation:.2f}m"
        lines.append(line)
    lines.append("")

    lines += _statistics_lines("2D Distance Statistics:", result.statistics_2d, unit_system)
    lines += _statistics_lines("3D Distance Statistics:", result.statistics_3d, unit_system)

    totals = (
        _cumulative_line("Cumulative 2D", result.cumulative_2d, unit_system)
        + _cumulative_line("Cumulative 3D", result.cumulative_3d, unit_system)
    )
    if totals:
        lines += ["Path Totals:", *totals, ""]

    return "\n".join(lines)
