"""Float-backed units with automatic SI conversion.

``UnitFloat`` is a ``float`` subclass whose stored value is always in the SI
unit of its family (meters for length, radians for angle). Constructing
``Foot(10)`` stores ``3.048``; ``Foot(10).to(Inch)`` gives ``120.0``.

Example:
    >>> from gpscalc.unit import Kilometer, Millimeter
    >>> d = Kilometer(0.0025)
    >>> float(d)
    2.5
    >>> d.to(Millimeter)
    2500.0
"""
from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Base class for unit values stored in SI.

    Arithmetic and comparisons are only allowed between units of the same
    family; scaling is only allowed by plain numbers.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor from this unit to the SI unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance from a value already in SI units."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Express this value in ``unit_type``.

        Args:
            unit_type: Target unit of the same family.

        Returns:
            float: Plain value in the target unit's scale.

        Raises:
            TypeError: If ``unit_type`` is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Re-tag this value as ``unit_type`` without changing its SI value."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Scale by a plain number.

        Raises:
            TypeError: If ``k`` is not an int or float.
        """
        if isinstance(k, Number) and not isinstance(k, UnitFloat):
            return type(self).from_si(float(self) * float(k))
        raise TypeError(f"cannot scale {type(self).__name__} by {type(k).__name__}")

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        if isinstance(k, Number) and not isinstance(k, UnitFloat):
            return type(self).from_si(float(self) / float(k))
        raise TypeError(f"cannot divide {type(self).__name__} by {type(k).__name__}")

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __abs__(self) -> UnitFloat:
        return type(self).from_si(abs(float(self)))

    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) != float(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Value and symbol in the unit's own scale, e.g. ``"12.0 in"``."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
