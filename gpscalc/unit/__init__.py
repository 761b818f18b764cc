"""Type-safe unit system for coordinate and distance calculations.

Two unit families cover everything the calculator measures:

- Angle family: Radian (root), Degree. Used to turn decimal-degree
  coordinates into the radians the Haversine formula needs.
- Length family: Meter (root) plus the metric, international-foot and
  survey-foot units used by the dynamic unit formatter and elevation
  conversion.

Values are stored in SI internally; ``to()`` reads them back in any unit of
the same family, and mixing families raises ``TypeError``.

Example:
    >>> from gpscalc.unit import Kilometer, Meter, SurveyFoot
    >>> Kilometer(1.2).to(Meter)
    1200.0
    >>> round(Meter(100).to(SurveyFoot), 3)
    328.083
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import (
    Centimeter,
    Foot,
    Inch,
    Kilometer,
    Length,
    Meter,
    Mile,
    Millimeter,
    SurveyFoot,
    SurveyInch,
    SurveyMile,
)
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Metric lengths
    "Millimeter",
    "Centimeter",
    "Meter",
    "Kilometer",
    # International foot lengths
    "Inch",
    "Foot",
    "Mile",
    # US survey foot lengths
    "SurveyInch",
    "SurveyFoot",
    "SurveyMile",
    "Length",
]
