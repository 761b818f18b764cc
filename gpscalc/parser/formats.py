"""Coordinate notations and single-line parsing.

Each supported notation is a ``FormatVariant``: a compiled pattern plus a
builder that turns the match groups into a ``Coordinate``. ``FORMAT_VARIANTS``
lists them from most to least structurally specific, and the first variant
that matches wins. There is no plausibility scoring between variants.

Supported notations, in precedence order:

1. ``dms_space_separated``  ``41 48 15.79259 112 50 1.04150``
   Unsigned latitude is North, unsigned longitude is West. An optional
   trailing N/S or E/W letter per half overrides the default.
2. ``dms_leading_cardinal``  ``N44° 28' 24.32661" W70° 53' 19.05717"``
3. ``dms_with_symbols``  ``44° 28' 24.32661" N 70° 53' 19.05717" W``
   (trailing letters optional, signs allowed).
4. ``decimal_leading_cardinal``  ``N44.4734245277 W70.88862750833``
5. ``decimal_degrees``  ``44.4734245277 -70.88862750833``
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from ..converter.dms import dms_to_decimal
from ..geo.coordinate import Coordinate

logger = logging.getLogger(__name__)


class CoordinateFormat(str, Enum):
    """Coarse notation category used to pick a default display mode."""

    DMS = "dms"
    DECIMAL = "decimal"
    UNKNOWN = "unknown"


_NUMBER = r"\d+(?:\.\d+)?"
_SIGNED_NUMBER = r"-?\d+(?:\.\d+)?"
_DEGREE_MARK = r"[°º]"
_MINUTE_MARK = r"['′‘’]"
_SECOND_MARK = r"(?:''|[\"″“”])"


def _dms_body(degrees: str = _NUMBER) -> str:
    return (
        rf"({degrees}){_DEGREE_MARK}\s*({_NUMBER}){_MINUTE_MARK}\s*({_NUMBER}){_SECOND_MARK}"
    )


DMS_SPACE_SEPARATED = re.compile(
    rf"^(-?\d+)\s+(\d+)\s+({_NUMBER})\s*([NS])?"
    rf"\s+(-?\d+)\s+(\d+)\s+({_NUMBER})\s*([EW])?$",
    re.IGNORECASE,
)

DMS_LEADING_CARDINAL = re.compile(
    rf"([NS])\s*{_dms_body()}\s*,?\s*([EW])\s*{_dms_body()}",
    re.IGNORECASE,
)

DMS_WITH_SYMBOLS = re.compile(
    rf"{_dms_body(_SIGNED_NUMBER)}\s*([NS]?)\s*,?\s*{_dms_body(_SIGNED_NUMBER)}\s*([EW]?)",
    re.IGNORECASE,
)

DECIMAL_LEADING_CARDINAL = re.compile(
    rf"([NS])({_NUMBER})\s*,?\s*([EW])({_NUMBER})",
    re.IGNORECASE,
)

DECIMAL_DEGREES = re.compile(
    rf"^({_SIGNED_NUMBER})(?:\s*,\s*|\s+)({_SIGNED_NUMBER})$",
)


def _signed(value: float, cardinal: Optional[str]) -> float:
    """Negate a magnitude for an S or W letter."""
    if cardinal and cardinal.upper() in ("S", "W"):
        return -value
    return value


def _build_dms_space_separated(groups: Tuple[str, ...]) -> Coordinate:
    lat_deg, lat_min, lat_sec, lat_card, lon_deg, lon_min, lon_sec, lon_card = groups

    lat = dms_to_decimal(float(lat_deg), float(lat_min), float(lat_sec), lat_card or "")

    # Surveying exports (e.g. OPUS) in the western hemisphere omit the sign.
    lon_card = lon_card or "W"
    lon = dms_to_decimal(float(lon_deg), float(lon_min), float(lon_sec), lon_card)
    return Coordinate(lat, lon)


def _build_dms_leading_cardinal(groups: Tuple[str, ...]) -> Coordinate:
    lat_card, lat_deg, lat_min, lat_sec, lon_card, lon_deg, lon_min, lon_sec = groups
    lat = dms_to_decimal(float(lat_deg), float(lat_min), float(lat_sec))
    lon = dms_to_decimal(float(lon_deg), float(lon_min), float(lon_sec))
    return Coordinate(_signed(lat, lat_card), _signed(lon, lon_card))


def _build_dms_with_symbols(groups: Tuple[str, ...]) -> Coordinate:
    lat_deg, lat_min, lat_sec, lat_card, lon_deg, lon_min, lon_sec, lon_card = groups
    lat = dms_to_decimal(float(lat_deg), float(lat_min), float(lat_sec))
    lon = dms_to_decimal(float(lon_deg), float(lon_min), float(lon_sec))
    return Coordinate(_signed(lat, lat_card), _signed(lon, lon_card))


def _build_decimal_leading_cardinal(groups: Tuple[str, ...]) -> Coordinate:
    lat_card, lat, lon_card, lon = groups
    return Coordinate(_signed(float(lat), lat_card), _signed(float(lon), lon_card))


def _build_decimal_degrees(groups: Tuple[str, ...]) -> Coordinate:
    lat, lon = groups
    return Coordinate(float(lat), float(lon))


@dataclass(frozen=True)
class FormatVariant:
    """One coordinate notation.

    Attributes:
        name (str): Identifier of the notation.
        category (CoordinateFormat): DMS or DECIMAL.
        pattern (re.Pattern): Compiled pattern; anchored patterns carry their
            own ``^...$``, the others match anywhere in the text.
        build (Callable): Turns the match groups into a Coordinate.
    """

    name: str
    category: CoordinateFormat
    pattern: re.Pattern
    build: Callable[[Tuple[str, ...]], Coordinate]

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def parse(self, text: str) -> Optional[Coordinate]:
        """Coordinate for ``text``, or None when this notation does not match."""
        match = self.pattern.search(text)
        if match is None:
            return None
        return self.build(match.groups())


FORMAT_VARIANTS: Tuple[FormatVariant, ...] = (
    FormatVariant("dms_space_separated", CoordinateFormat.DMS, DMS_SPACE_SEPARATED, _build_dms_space_separated),
    FormatVariant("dms_leading_cardinal", CoordinateFormat.DMS, DMS_LEADING_CARDINAL, _build_dms_leading_cardinal),
    FormatVariant("dms_with_symbols", CoordinateFormat.DMS, DMS_WITH_SYMBOLS, _build_dms_with_symbols),
    FormatVariant(
        "decimal_leading_cardinal", CoordinateFormat.DECIMAL, DECIMAL_LEADING_CARDINAL, _build_decimal_leading_cardinal
    ),
    FormatVariant("decimal_degrees", CoordinateFormat.DECIMAL, DECIMAL_DEGREES, _build_decimal_degrees),
)


def match_variant(text: Optional[str]) -> Optional[FormatVariant]:
    """First variant in precedence order that matches ``text``."""
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    for variant in FORMAT_VARIANTS:
        if variant.matches(stripped):
            return variant
    return None


def parse_coordinate(text: Optional[str]) -> Optional[Coordinate]:
    """Parse one coordinate written in any supported notation.

    The result is not range-checked; see ``validate_and_normalize``.

    Args:
        text: A single coordinate, e.g. ``"N44.47 W70.88"``.

    Returns:
        Optional[Coordinate]: Parsed point without elevation, or None when no
        notation matches.

    Example:
        >>> c = parse_coordinate("41 48 15.79259 112 50 1.04150")
        >>> round(c.lat, 6), round(c.lon, 6)
        (41.804387, -112.833623)
    """
    variant = match_variant(text)
    if variant is None:
        return None
    return variant.parse(text.strip())


def detect_format(text: Optional[str]) -> CoordinateFormat:
    """Category of the notation ``text`` is written in.

    Runs the same variants as ``parse_coordinate`` without building values.
    """
    variant = match_variant(text)
    if variant is None:
        return CoordinateFormat.UNKNOWN
    return variant.category
