"""Multi-line coordinate input with optional elevation per line.

Each line is split on whitespace, commas, semicolons, pipes and tabs:

- 2 tokens: a decimal pair.
- 3 tokens: a decimal pair followed by an elevation.
- more: slide a 6-token window (space-separated DMS) across the tokens, then
  a 2-token window; the first window that parses is the coordinate and the
  token right after it, if any, is the elevation. Leading tokens without
  digits before the window become the point's name.

The 2-token window can pair up unrelated numbers on a noisy line. Such
coordinates are kept here and rejected later by ``validate_coordinates`` if
they fall out of range.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from ..geo.coordinate import Coordinate
from .formats import parse_coordinate

logger = logging.getLogger(__name__)

TOKEN_SEPARATORS = re.compile(r"[\s,;|]+")
WINDOW_SIZES = (6, 2)

_LEADING_NUMBER = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_HAS_DIGIT = re.compile(r"\d")


def parse_elevation(token: Optional[str]) -> Optional[float]:
    """Leading number of ``token`` (``"312.5m"`` -> 312.5), or None."""
    if not token:
        return None
    match = _LEADING_NUMBER.match(token.strip())
    if match is None:
        return None
    return float(match.group(0))


def _leading_name(tokens: Sequence[str]) -> Optional[str]:
    if not tokens or any(_HAS_DIGIT.search(token) for token in tokens):
        return None
    return " ".join(tokens)


def parse_coordinate_with_elevation(line: Optional[str]) -> Optional[Coordinate]:
    """Parse one input line into a coordinate with optional elevation.

    Args:
        line: A single line such as ``"44.47 -70.88 312.5"``.

    Returns:
        Optional[Coordinate]: The point, or None when no coordinate is found.
    """
    if not isinstance(line, str):
        return None

    tokens = [token for token in TOKEN_SEPARATORS.split(line.strip()) if token]
    if len(tokens) < 2:
        return None

    coordinate_text = None
    elevation = None
    name = None

    if len(tokens) == 2:
        coordinate_text = " ".join(tokens)
    elif len(tokens) == 3:
        coordinate_text = " ".join(tokens[:2])
        elevation = parse_elevation(tokens[2])
    else:
        for count in WINDOW_SIZES:
            if len(tokens) < count:
                continue
            for start in range(len(tokens) - count + 1):
                candidate = " ".join(tokens[start:start + count])
                if parse_coordinate(candidate) is None:
                    continue
                coordinate_text = candidate
                end = start + count
                if end < len(tokens):
                    elevation = parse_elevation(tokens[end])
                name = _leading_name(tokens[:start])
                break
            if coordinate_text:
                break

        if not coordinate_text:
            coordinate_text = " ".join(tokens[:2])
            elevation = parse_elevation(tokens[2])

    coordinate = parse_coordinate(coordinate_text)
    if coordinate is None:
        return None

    return Coordinate(coordinate.lat, coordinate.lon, elevation=elevation, name=name)


def parse_multiple_coordinates(text: Optional[str]) -> List[Coordinate]:
    """Parse every non-empty line of ``text``; unparseable lines are dropped.

    Returns:
        List[Coordinate]: Parsed points in input order. Values are not range
        checked.
    """
    if not isinstance(text, str):
        return []

    coordinates: List[Coordinate] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        coordinate = parse_coordinate_with_elevation(line)
        if coordinate is None:
            logger.debug(f"Skipping line {line_number}: no coordinate in {line.strip()!r}")
            continue
        coordinates.append(coordinate)
    return coordinates
