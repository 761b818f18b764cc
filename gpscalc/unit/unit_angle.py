"""Angular units for coordinate math.

Angles are stored in radians. Coordinates arrive in decimal degrees, so the
distance engine builds ``Degree`` values and reads them back with ``float()``
to get the radians the trigonometric functions need.

Example:
    >>> phi = Degree(45)
    >>> float(phi)  # radians
    0.7853981633974483
    >>> phi.to(Degree)
    45.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: Degree (π/180 rad)."""

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
