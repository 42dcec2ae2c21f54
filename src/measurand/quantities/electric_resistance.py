"""
measurand.quantities.electric_resistance
========================================

Electrical resistance: the opposition to the passage of an electric current
through a conductor. Base unit: the ohm (Ω).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from measurand.core.quantity import Quantity
from measurand.core.unit_table import ConversionEntry, UnitTable


class ElectricResistanceUnit(Enum):
    UNDEFINED = 0
    KILOOHM = 1
    MEGAOHM = 2
    OHM = 3


# Unit symbols are case-sensitive: "MΩ" is megaohm, "mΩ" would be milliohm.
ELECTRIC_RESISTANCE_UNITS: UnitTable[ElectricResistanceUnit] = UnitTable(
    "ElectricResistance",
    ElectricResistanceUnit,
    (
        ConversionEntry(
            ElectricResistanceUnit.KILOOHM, 1e3,
            ("kΩ", "kohm", "kOhm", "kiloohm", "kiloohms"),
            "kiloohms",
            {"ru": ("кОм",)},
        ),
        ConversionEntry(
            ElectricResistanceUnit.MEGAOHM, 1e6,
            ("MΩ", "Mohm", "MOhm", "megaohm", "megaohms"),
            "megaohms",
            {"ru": ("МОм",)},
        ),
        ConversionEntry(
            ElectricResistanceUnit.OHM, 1.0,
            ("Ω", "ohm", "Ohm", "OHM", "ohms"),
            "ohms",
            {"ru": ("Ом",)},
        ),
    ),
)


class ElectricResistance(Quantity[ElectricResistanceUnit]):
    """
    An immutable electrical resistance.

    >>> r = ElectricResistance.from_kiloohms(1.5)
    >>> r.ohms
    1500.0
    >>> str(r)
    '1,500 Ω'
    >>> r.to_string(ElectricResistanceUnit.KILOOHM)
    '1.5 kΩ'
    """
    __slots__ = ()

    _table = ELECTRIC_RESISTANCE_UNITS

    if TYPE_CHECKING:  # pragma: no cover - generated in Quantity.__init_subclass__
        ohms: float
        kiloohms: float
        megaohms: float

        @classmethod
        def from_ohms(cls, value: float) -> ElectricResistance: ...

        @classmethod
        def from_kiloohms(cls, value: float) -> ElectricResistance: ...

        @classmethod
        def from_megaohms(cls, value: float) -> ElectricResistance: ...


__all__ = ["ElectricResistance", "ElectricResistanceUnit", "ELECTRIC_RESISTANCE_UNITS"]
