"""Unit family foundation for angles and lengths.

Every quantity the calculator handles (coordinate angles, distances,
elevations) is one of two physical families: angle or length. This module
provides the ``Unit`` base class that assigns each concrete unit to its family
root automatically, so a ``SurveyFoot`` and a ``Kilometer`` can be combined
while a ``Degree`` and a ``Meter`` cannot.

Key Concepts:
- ROOT: the family root class, resolved through the MRO.
- IS_FAMILY_ROOT: marks the base unit of a family (``Radian``, ``Meter``).

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Foot(Length):
    ...     pass  # ROOT = Length
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units inherit from ``UnitFloat`` rather than from this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the unit family.
        SYMBOL (ClassVar[str]): Display symbol ("m", "ft", "°").
        IS_FAMILY_ROOT (ClassVar[bool]): True on the base unit of a family.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve the family ROOT of a new unit class.

        The first ancestor flagged ``IS_FAMILY_ROOT`` wins; a class with no
        such ancestor is its own root.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Ensure ``unit_type`` belongs to the same family as ``cls``.

        Args:
            unit_type: The other operand's type.

        Raises:
            TypeError: If the families differ or ``unit_type`` is not a unit.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            msg = f"incompatible units: {cls.ROOT.__name__} and {getattr(other_root, '__name__', unit_type.__name__)}"
            raise TypeError(msg)
