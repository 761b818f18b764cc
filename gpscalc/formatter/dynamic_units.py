"""Magnitude-adaptive distance display.

A kilometer value is shown in the unit that keeps the number readable within
one of three unit systems:

    meters       mm  [0.1, 10) mm        3 places
                 cm  [10, 1000) mm       4 places
                 m   [100, 10000) cm     3 places
                 m   [0.001, 1000) m     3 places (6 below 1 m)
                 km  otherwise           6 places
    feet         in  [0.1, 12) in        3 places
                 ft  [1, 5280) ft        3 places
                 mi  otherwise           6 places
    survey-feet  same brackets, measured in US survey feet

Invalid input (non-finite or negative) formats as zero in the system's
default unit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..geo.validation import is_finite_number
from ..unit import (
    Centimeter,
    Foot,
    Inch,
    Kilometer,
    Meter,
    Mile,
    Millimeter,
    SurveyFoot,
    SurveyInch,
    SurveyMile,
)

logger = logging.getLogger(__name__)


class UnitSystem(str, Enum):
    METERS = "meters"
    FEET = "feet"
    SURVEY_FEET = "survey-feet"

    @property
    def default_unit(self) -> str:
        return "m" if self is UnitSystem.METERS else "ft"


@dataclass(frozen=True)
class FormattedDistance:
    """Display-only value/unit pair."""

    value: float
    unit: str

    def __str__(self) -> str:
        text = f"{self.value:.6f}".rstrip("0").rstrip(".")
        return f"{text} {self.unit}"


def coerce_unit_system(unit_system: Union[UnitSystem, str, None]) -> UnitSystem:
    """Resolve a unit system name; unknown names fall back to meters."""
    if isinstance(unit_system, UnitSystem):
        return unit_system
    try:
        return UnitSystem(unit_system)
    except ValueError:
        logger.debug(f"Unknown unit system {unit_system!r}; using meters")
        return UnitSystem.METERS


def _format_metric(length: Meter) -> FormattedDistance:
    millimeters = length.to(Millimeter)
    centimeters = length.to(Centimeter)
    meters = length.to(Meter)

    if 0.1 <= millimeters < 10:
        return FormattedDistance(round(millimeters, 3), Millimeter.SYMBOL)
    if 10 <= millimeters < 1000:
        return FormattedDistance(round(centimeters, 4), Centimeter.SYMBOL)
    if 100 <= centimeters < 10000:
        return FormattedDistance(round(meters, 3), Meter.SYMBOL)
    if 0.001 <= meters < 1000:
        return FormattedDistance(round(meters, 6 if meters < 1 else 3), Meter.SYMBOL)
    return FormattedDistance(round(length.to(Kilometer), 6), Kilometer.SYMBOL)


def _format_imperial(length: Meter, inch: type, foot: type, mile: type) -> FormattedDistance:
    inches = length.to(inch)
    feet = length.to(foot)

    if 0.1 <= inches < 12:
        return FormattedDistance(round(inches, 3), inch.SYMBOL)
    if 1 <= feet < 5280:
        return FormattedDistance(round(feet, 3), foot.SYMBOL)
    return FormattedDistance(round(length.to(mile), 6), mile.SYMBOL)


def format_distance_with_dynamic_units(
    km: Optional[float],
    unit_system: Union[UnitSystem, str] = UnitSystem.METERS,
) -> FormattedDistance:
    """Pick a human-scaled unit for a distance given in kilometers.

    Args:
        km: Distance in kilometers.
        unit_system: "meters", "feet" or "survey-feet".

    Returns:
        FormattedDistance: Rounded value and unit symbol.

    Example:
        >>> format_distance_with_dynamic_units(0.0025)
        FormattedDistance(value=2.5, unit='m')
        >>> format_distance_with_dynamic_units(2, "feet")
        FormattedDistance(value=1.242742, unit='mi')
    """
    system = coerce_unit_system(unit_system)
    if not is_finite_number(km) or km < 0:
        return FormattedDistance(0.0, system.default_unit)

    length = Kilometer(km)
    if system is UnitSystem.FEET:
        return _format_imperial(length, Inch, Foot, Mile)
    if system is UnitSystem.SURVEY_FEET:
        return _format_imperial(length, SurveyInch, SurveyFoot, SurveyMile)
    return _format_metric(length)
