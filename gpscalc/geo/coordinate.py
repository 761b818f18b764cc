"""Geographic coordinate value types.

``Latitude`` and ``Longitude`` are degree units tagged with their axis, so a
latitude can never be passed where a longitude is expected without an
explicit conversion. ``Coordinate`` is the immutable record the parser
produces and the distance engine consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import NamedTuple, Optional

from ..unit import Degree


class Latitude(Degree):
    """Latitude in degrees, stored in radians.

    Example:
        >>> lat = Latitude(44.4734245277)
        >>> round(float(lat), 6)  # radians
        0.776208
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°N/S"


class Longitude(Degree):
    """Longitude in degrees, stored in radians."""

    IS_FAMILY_ROOT = True
    SYMBOL = "°E/W"


class LatLon(NamedTuple):
    """A bare latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


@dataclass(frozen=True)
class Coordinate:
    """A point as read from user input.

    No range checks happen at construction: the batch parser may build
    coordinates from unrelated tokens, and ``validate_coordinates`` rejects
    them afterwards.

    Attributes:
        lat (float): Latitude in decimal degrees, north positive.
        lon (float): Longitude in decimal degrees, east positive.
        elevation (Optional[float]): Height in meters, or None.
        name (Optional[str]): Display name; None means "Point N".
    """

    lat: float
    lon: float
    elevation: Optional[float] = None
    name: Optional[str] = None

    @property
    def latitude(self) -> Latitude:
        return Latitude(self.lat)

    @property
    def longitude(self) -> Longitude:
        return Longitude(self.lon)

    def to_latlon(self) -> LatLon:
        return LatLon(self.lat, self.lon)

    def with_elevation(self, elevation: Optional[float]) -> "Coordinate":
        """Return a copy carrying ``elevation`` (meters)."""
        return replace(self, elevation=elevation)

    def label(self, index: int) -> str:
        """Display label for this point at zero-based ``index``."""
        return self.name or f"Point {index + 1}"

    def __repr__(self) -> str:
        parts = [f"{self.lat:.6f}", f"{self.lon:.6f}"]
        if self.elevation is not None:
            parts.append(f"elev={self.elevation:g}m")
        if self.name:
            parts.append(repr(self.name))
        return f"Coordinate({', '.join(parts)})"
