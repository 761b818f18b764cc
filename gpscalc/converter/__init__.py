"""Coordinate notation conversion.

Components:
    DMS / Axis: Degrees-minutes-seconds components and the axis that picks
        N/S versus E/W.
    decimal_to_dms / dms_to_decimal: The two directions of the transform.
    validate_and_normalize: Range check with longitude wraparound.
    validate_coordinates: Batch filter applying it to parsed coordinates.
    format_*: Text renderings for display and clipboard (10-place decimals,
        5-place seconds).

Example:
    >>> from gpscalc.converter import convert_to_dms
    >>> convert_to_dms(44.4734245277, -70.88862750833)
    ('44° 28\\' 24.32830" N', '70° 53\\' 19.05903" W')
"""

from .dms import (
    DMS,
    Axis,
    convert_to_dms,
    decimal_to_dms,
    dms_to_decimal,
    format_decimal,
    format_dms,
    format_for_clipboard,
    format_for_display,
)
from .normalize import normalize_longitude, validate_and_normalize, validate_coordinates

__all__ = [
    "DMS",
    "Axis",
    "decimal_to_dms",
    "dms_to_decimal",
    "format_dms",
    "format_decimal",
    "convert_to_dms",
    "format_for_clipboard",
    "format_for_display",
    "normalize_longitude",
    "validate_and_normalize",
    "validate_coordinates",
]
