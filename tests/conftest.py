# tests/conftest.py
from enum import Enum

import pytest

from measurand.core.quantity import Quantity
from measurand.core.unit_table import ConversionEntry, UnitTable
from measurand.units.context import DEFAULT_CONTEXTS as _contexts
from measurand.units.context import _bootstrap_default_contexts


# A second, test-only kind so the generic machinery is exercised on more than
# one table. Case-insensitive aliases are switched on here.
class LengthUnit(Enum):
    UNDEFINED = 0
    METER = 1
    CENTIMETER = 2
    MILLIMETER = 3
    KILOMETER = 4
    MEGAMETER = 5


LENGTH_UNITS = UnitTable(
    "Length",
    LengthUnit,
    (
        ConversionEntry(LengthUnit.METER, 1.0, ("m", "meter"), "meters", {"ru": ("м",)}),
        ConversionEntry(LengthUnit.CENTIMETER, 0.01, ("cm",), "centimeters"),
        ConversionEntry(LengthUnit.MILLIMETER, 1e-3, ("mm",), "millimeters"),
        ConversionEntry(LengthUnit.KILOMETER, 1e3, ("km",), "kilometers", {"ru": ("км",)}),
        ConversionEntry(LengthUnit.MEGAMETER, 1e6, ("Mm",), "megameters"),
    ),
    case_insensitive_aliases=True,
)


class Length(Quantity[LengthUnit]):
    __slots__ = ()
    _table = LENGTH_UNITS


@pytest.fixture(scope="session")
def contexts():
    return _contexts

@pytest.fixture
def fresh_contexts():
    return _bootstrap_default_contexts()

@pytest.fixture
def restore_default_context():
    saved = _contexts.default
    yield _contexts
    _contexts.default = saved

@pytest.fixture(scope="session")
def length_kind():
    return Length, LengthUnit
