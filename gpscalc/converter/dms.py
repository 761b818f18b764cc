"""Decimal degrees <-> degrees/minutes/seconds.

Conversion formulas:
    degrees = floor(|value|)
    minutes = floor((|value| - degrees) * 60)
    seconds = ((|value| - degrees) * 60 - minutes) * 60, rounded to 5 places

    decimal = sign * (|degrees| + minutes / 60 + seconds / 3600)

The sign is negative when ``degrees`` is negative (including ``-0.0``) or the
cardinal letter is S or W.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..config import DECIMAL_PRECISION, DMS_PRECISION
from ..geo.validation import is_finite_number


class Axis(str, Enum):
    """Which coordinate axis a value belongs to; picks N/S or E/W."""

    LATITUDE = "lat"
    LONGITUDE = "lon"

    @property
    def cardinals(self) -> Tuple[str, str]:
        """(positive, negative) hemisphere letters."""
        if self is Axis.LATITUDE:
            return "N", "S"
        return "E", "W"


NEGATIVE_CARDINALS = frozenset({"S", "W"})


@dataclass(frozen=True)
class DMS:
    """Degrees, minutes and seconds of one coordinate axis.

    Attributes:
        degrees (float): Whole degrees. Signed like the source value when
            ``cardinal`` is empty; ``-0.0`` marks a negative value under one
            degree. Unsigned when ``cardinal`` is set.
        minutes (int): Whole minutes, 0-59.
        seconds (float): Seconds rounded to 5 decimal places.
        cardinal (str): "N", "S", "E", "W", or "" when not requested.
    """

    degrees: float
    minutes: int
    seconds: float
    cardinal: str = ""

    @property
    def is_negative(self) -> bool:
        return math.copysign(1.0, self.degrees) < 0 or self.cardinal.upper() in NEGATIVE_CARDINALS

    def to_decimal(self) -> Optional[float]:
        return dms_to_decimal(self.degrees, self.minutes, self.seconds, self.cardinal)


def decimal_to_dms(
    value: Optional[float],
    include_cardinal: bool = False,
    axis: Axis | str = Axis.LATITUDE,
) -> Optional[DMS]:
    """Split decimal degrees into degrees, minutes and seconds.

    Seconds that round up to 60 carry into the minutes, and minutes into the
    degrees, so the result never shows ``60.00000"``.

    Args:
        value: Decimal degrees.
        include_cardinal: Attach N/S or E/W and return unsigned degrees.
        axis: Axis of ``value``; selects the cardinal letters.

    Returns:
        Optional[DMS]: Components, or None for a non-finite value.

    Example:
        >>> decimal_to_dms(-70.88862750833, include_cardinal=True, axis="lon")
        DMS(degrees=70.0, minutes=53, seconds=19.05903, cardinal='W')
    """
    if not is_finite_number(value):
        return None

    negative = value < 0
    magnitude = abs(value)

    degrees = math.floor(magnitude)
    minutes_float = (magnitude - degrees) * 60
    minutes = math.floor(minutes_float)
    seconds = round((minutes_float - minutes) * 60, DMS_PRECISION)

    if seconds >= 60:
        seconds = 0.0
        minutes += 1
    if minutes >= 60:
        minutes = 0
        degrees += 1

    if include_cardinal:
        positive_letter, negative_letter = Axis(axis).cardinals
        return DMS(float(degrees), minutes, seconds, negative_letter if negative else positive_letter)

    return DMS(-float(degrees) if negative else float(degrees), minutes, seconds)


def dms_to_decimal(degrees: float, minutes: float, seconds: float, cardinal: str = "") -> Optional[float]:
    """Combine DMS components into signed decimal degrees.

    Args:
        degrees: Degrees; a negative value (or ``-0.0``) marks S/W.
        minutes: Minutes.
        seconds: Seconds.
        cardinal: Optional hemisphere letter; S or W negates.

    Returns:
        Optional[float]: Decimal degrees, or None if any component is not a
        finite number.
    """
    if not all(is_finite_number(part) for part in (degrees, minutes, seconds)):
        return None

    negative = math.copysign(1.0, degrees) < 0 or (cardinal or "").upper() in NEGATIVE_CARDINALS
    decimal = abs(degrees) + minutes / 60 + seconds / 3600
    return -decimal if negative else decimal


def format_dms(dms: Optional[DMS], include_symbols: bool = True) -> str:
    """Render DMS as ``44° 28' 24.32661" N`` or ``44 28 24.32661 N``.

    The cardinal letter, when present, carries the hemisphere; without one
    the degrees keep their sign.
    """
    if dms is None:
        return ""

    if dms.cardinal:
        degrees = f"{int(abs(dms.degrees))}"
    else:
        degrees = f"{'-' if dms.is_negative else ''}{int(abs(dms.degrees))}"
    seconds = f"{dms.seconds:.{DMS_PRECISION}f}"
    suffix = f" {dms.cardinal}" if dms.cardinal else ""

    if include_symbols:
        return f"{degrees}° {dms.minutes}' {seconds}\"{suffix}"
    return f"{degrees} {dms.minutes} {seconds}{suffix}"


def format_decimal(value: Optional[float], precision: int = DECIMAL_PRECISION) -> str:
    """Fixed-point decimal degrees; empty string for non-finite input."""
    if not is_finite_number(value):
        return ""
    return f"{value:.{precision}f}"


def convert_to_dms(lat: float, lon: float) -> Tuple[str, str]:
    """Both axes as symbol DMS strings with cardinal letters."""
    return (
        format_dms(decimal_to_dms(lat, True, Axis.LATITUDE)),
        format_dms(decimal_to_dms(lon, True, Axis.LONGITUDE)),
    )


def format_for_clipboard(lat: float, lon: float) -> str:
    """Tab-separated decimal pair for pasting into spreadsheets."""
    return f"{format_decimal(lat)}\t{format_decimal(lon)}"


def format_for_display(lat: float, lon: float, separator: str = " ") -> str:
    return f"{format_decimal(lat)}{separator}{format_decimal(lon)}"
