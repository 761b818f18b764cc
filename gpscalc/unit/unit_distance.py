"""Length units for distances and elevations.

All lengths are stored in meters. Three families of display units hang off
``Meter``:

- Metric: ``Millimeter``, ``Centimeter``, ``Meter``, ``Kilometer``.
- International foot (0.3048 m): ``Inch``, ``Foot``, ``Mile``.
- US survey foot (0.30480061 m): ``SurveyInch``, ``SurveyFoot``, ``SurveyMile``.

The survey variants keep the 12 in/ft and 5280 ft/mi ratios but scale from
the survey-foot constant, so a survey mile is slightly longer than an
international one.

Example:
    >>> Foot(1).to(Meter)
    0.3048
    >>> Kilometer(1).to(Mile)
    0.621371192237334
"""

from __future__ import annotations

from ..config import METERS_PER_FOOT, METERS_PER_SURVEY_FOOT
from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: Meter (SI base unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class Centimeter(Meter):
    SCALE_TO_SI = 0.01
    SYMBOL = "cm"


class Millimeter(Meter):
    SCALE_TO_SI = 0.001
    SYMBOL = "mm"


class Foot(Meter):
    """Length unit: international foot, exactly 0.3048 m."""

    SCALE_TO_SI = METERS_PER_FOOT
    SYMBOL = "ft"


class Inch(Meter):
    SCALE_TO_SI = METERS_PER_FOOT / 12
    SYMBOL = "in"


class Mile(Meter):
    SCALE_TO_SI = METERS_PER_FOOT * 5280
    SYMBOL = "mi"


class SurveyFoot(Meter):
    """Length unit: US survey foot, 0.30480061 m.

    Used by US state plane and county survey records. It differs from the
    international foot by about 2 ppm, which matters over survey-scale
    baselines.
    """

    SCALE_TO_SI = METERS_PER_SURVEY_FOOT
    SYMBOL = "ft"


class SurveyInch(Meter):
    SCALE_TO_SI = METERS_PER_SURVEY_FOOT / 12
    SYMBOL = "in"


class SurveyMile(Meter):
    SCALE_TO_SI = METERS_PER_SURVEY_FOOT * 5280
    SYMBOL = "mi"


Length = (
    Meter | Kilometer | Centimeter | Millimeter
    | Foot | Inch | Mile
    | SurveyFoot | SurveyInch | SurveyMile
)
