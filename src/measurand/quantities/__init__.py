"""Concrete quantity kinds."""

from measurand.quantities.electric_resistance import (
    ELECTRIC_RESISTANCE_UNITS,
    ElectricResistance,
    ElectricResistanceUnit,
)

__all__ = ["ElectricResistance", "ElectricResistanceUnit", "ELECTRIC_RESISTANCE_UNITS"]
