"""
Result models for the distance engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from ..config import DISTANCE_PRECISION
from ..geo.coordinate import Coordinate


@dataclass(frozen=True)
class DistanceValue:
    """A distance in kilometers and statute miles, rounded to 6 places."""
    km: float
    miles: float

    @classmethod
    def from_km_miles(cls, km: float, miles: float) -> 'DistanceValue':
        return cls(round(km, DISTANCE_PRECISION), round(miles, DISTANCE_PRECISION))

    @classmethod
    def zero(cls) -> 'DistanceValue':
        return cls(0.0, 0.0)

    @property
    def meters(self) -> float:
        return self.km * 1000.0

    def __repr__(self) -> str:
        return f"DistanceValue(km={self.km:.6f}, miles={self.miles:.6f})"


@dataclass(frozen=True)
class Statistics:
    """Aggregate of a set of kilometer observations."""
    min: float
    max: float
    average: float
    count: int


@dataclass(frozen=True)
class Segment:
    """One leg of a path, between zero-based point indices."""
    from_index: int
    to_index: int
    distance: DistanceValue


@dataclass(frozen=True)
class CumulativeDistance:
    """Total length of the path through the points in input order."""
    total_km: float
    total_miles: float
    segments: Tuple[Segment, ...] = ()


Matrix = Tuple[Tuple[Optional[DistanceValue], ...], ...]


@dataclass(frozen=True)
class DistanceMatrixResult:
    """Contains the results of one distance calculation request."""
    coordinates: Tuple[Coordinate, ...]
    matrix_2d: Optional[Matrix] = None
    matrix_3d: Optional[Matrix] = None
    statistics_2d: Optional[Statistics] = None
    statistics_3d: Optional[Statistics] = None
    cumulative_2d: Optional[CumulativeDistance] = None
    cumulative_3d: Optional[CumulativeDistance] = None

    @property
    def labels(self) -> List[str]:
        """Point names, falling back to "Point N"."""
        return [coordinate.label(index) for index, coordinate in enumerate(self.coordinates)]

    def to_array(self, kind: str = "2d", unit: str = "km") -> np.ndarray:
        """
        Export a matrix as a float array.

        Args:
            kind: "2d" or "3d"
            unit: "km" or "miles"

        Returns:
            Square array with nan where a cell could not be computed

        Raises:
            ValueError: If the requested matrix was not computed
        """
        matrix = self.matrix_2d if kind == "2d" else self.matrix_3d
        if matrix is None:
            raise ValueError(f"{kind} matrix was not requested")
        return np.array(
            [[np.nan if cell is None else getattr(cell, unit) for cell in row] for row in matrix],
            dtype=float,
        )

    def to_dataframe(self, kind: str = "2d", unit: str = "km") -> pd.DataFrame:
        """
        Export a matrix as a DataFrame labeled by point.

        Returns:
            pandas.DataFrame: Square frame with point labels on both axes
        """
        return pd.DataFrame(self.to_array(kind, unit), index=self.labels, columns=self.labels)

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the calculation."""
        return {
            "num_points": len(self.coordinates),
            "labels": self.labels,
            "statistics_2d": self.statistics_2d,
            "statistics_3d": self.statistics_3d,
            "cumulative_2d_km": self.cumulative_2d.total_km if self.cumulative_2d else None,
            "cumulative_3d_km": self.cumulative_3d.total_km if self.cumulative_3d else None,
        }

    def __repr__(self) -> str:
        return (f"DistanceMatrixResult(points={len(self.coordinates)}, "
                f"2d={self.matrix_2d is not None}, "
                f"3d={self.matrix_3d is not None})")
