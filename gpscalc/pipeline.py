"""
Text-to-results pipeline: parse, convert elevations, validate, measure.
"""

import logging
from typing import Optional, Union

from .distance.calculator import calculate_distance_matrix
from .distance.models import DistanceMatrixResult
from .formatter.dynamic_units import UnitSystem
from .formatter.elevation import convert_elevation
from .converter.normalize import validate_coordinates
from .parser.batch import parse_multiple_coordinates

logger = logging.getLogger(__name__)


def calculate_from_text(
    text: str,
    include_2d: bool = True,
    include_3d: bool = True,
    elevation_unit: Union[UnitSystem, str] = UnitSystem.METERS,
) -> Optional[DistanceMatrixResult]:
    """
    Run a pasted block of coordinates through the whole core.

    Args:
        text: One coordinate per line, optionally followed by an elevation
        include_2d: Compute great-circle distances
        include_3d: Compute elevation-aware distances
        elevation_unit: Unit the pasted elevations are written in

    Returns:
        The calculation, or None when fewer than two valid points remain
    """
    parsed = parse_multiple_coordinates(text)
    in_meters = [
        coordinate if coordinate.elevation is None
        else coordinate.with_elevation(convert_elevation(coordinate.elevation, elevation_unit, UnitSystem.METERS))
        for coordinate in parsed
    ]
    valid = validate_coordinates(in_meters)
    logger.debug(f"Parsed {len(parsed)} coordinate(s), {len(valid)} valid")
    return calculate_distance_matrix(valid, include_2d=include_2d, include_3d=include_3d)
