"""Elevation unit conversion through meters."""

from __future__ import annotations

from typing import Dict, Optional, Union

from ..geo.validation import is_finite_number
from ..unit import Foot, Meter, SurveyFoot
from .dynamic_units import UnitSystem

# "ellipsoidal" heights are meters above the reference ellipsoid
ELEVATION_UNITS: Dict[str, type] = {
    "meters": Meter,
    "ellipsoidal": Meter,
    "feet": Foot,
    "survey-feet": SurveyFoot,
}


def _unit_key(unit: Union[UnitSystem, str]) -> str:
    return unit.value if isinstance(unit, UnitSystem) else unit


def convert_elevation(
    value: Optional[float],
    from_unit: Union[UnitSystem, str],
    to_unit: Union[UnitSystem, str],
) -> Optional[float]:
    """Convert an elevation between meters, feet and survey feet.

    Args:
        value: Elevation in ``from_unit``.
        from_unit: "meters", "feet", "survey-feet" or "ellipsoidal".
        to_unit: Same choices as ``from_unit``.

    Returns:
        The converted value. Same units, an unknown source unit, or a
        non-finite value return ``value`` unchanged; an unknown target unit
        returns meters.

    Example:
        >>> round(convert_elevation(1000, "feet", "meters"), 4)
        304.8
    """
    source_key, target_key = _unit_key(from_unit), _unit_key(to_unit)
    if source_key == target_key or not is_finite_number(value):
        return value

    source = ELEVATION_UNITS.get(source_key)
    if source is None:
        return value

    meters = source(value).as_unit(Meter)
    target = ELEVATION_UNITS.get(target_key)
    if target is None:
        return float(meters)
    return meters.to(target)
