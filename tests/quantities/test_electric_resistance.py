import math

import pytest

from measurand import ElectricResistance, ElectricResistanceUnit
from measurand.core.errors import (
    MalformedQuantityString,
    UnrecognizedUnit,
    UnsupportedUnitKind,
)
from measurand.quantities import ELECTRIC_RESISTANCE_UNITS

R = ElectricResistanceUnit


# -------------------------------
# Concrete scenarios
# -------------------------------

def test_one_kiloohm_is_thousand_ohms():
    assert ElectricResistance.from_unit(1, R.KILOOHM).as_unit(R.OHM) == 1000.0

def test_one_megaohm_is_thousand_kiloohms():
    assert ElectricResistance.from_unit(1, R.MEGAOHM).as_unit(R.KILOOHM) == 1000.0

def test_parse_ohms():
    assert ElectricResistance.parse("5.5 Ω") == ElectricResistance.from_unit(5.5, R.OHM)

@pytest.mark.parametrize("text", ["5.5", "Ω"])
def test_parse_missing_number_or_unit_is_malformed(text):
    with pytest.raises(MalformedQuantityString):
        ElectricResistance.parse(text)

def test_as_undefined_is_unsupported():
    with pytest.raises(UnsupportedUnitKind):
        ElectricResistance.from_ohms(1).as_unit(R.UNDEFINED)

def test_bogus_unit_resolves_to_undefined_and_fails_parsing():
    assert ELECTRIC_RESISTANCE_UNITS.resolve("bogus") is R.UNDEFINED
    with pytest.raises(UnrecognizedUnit):
        ElectricResistance.parse("5 bogus")


# -------------------------------
# Generated per-unit API
# -------------------------------

def test_generated_constructors():
    assert ElectricResistance.from_ohms(2).base_value == 2.0
    assert ElectricResistance.from_kiloohms(2).base_value == 2000.0
    assert ElectricResistance.from_megaohms(2).base_value == 2_000_000.0

def test_generated_properties():
    r = ElectricResistance.from_ohms(1_500_000)
    assert r.ohms == 1_500_000.0
    assert r.kiloohms == 1500.0
    assert r.megaohms == 1.5

def test_generated_members_are_named_and_documented():
    ctor = ElectricResistance.from_kiloohms
    assert ctor.__name__ == "from_kiloohms"
    assert "kiloohms" in ctor.__doc__
    assert isinstance(ElectricResistance.__dict__["kiloohms"], property)

def test_each_property_equals_as_unit():
    r = ElectricResistance.from_ohms(4321.0)
    for entry in ELECTRIC_RESISTANCE_UNITS:
        assert getattr(r, entry.plural) == r.as_unit(entry.unit)


# -------------------------------
# Unit data
# -------------------------------

def test_base_unit_is_ohm():
    assert ElectricResistance.base_unit() is R.OHM
    assert ELECTRIC_RESISTANCE_UNITS.factor(R.OHM) == 1.0

def test_units_exclude_undefined():
    assert ElectricResistance.units() == (R.KILOOHM, R.MEGAOHM, R.OHM)

def test_default_abbreviations():
    assert ElectricResistance.get_abbreviation(R.OHM) == "Ω"
    assert ElectricResistance.get_abbreviation(R.KILOOHM) == "kΩ"
    assert ElectricResistance.get_abbreviation(R.MEGAOHM) == "MΩ"

def test_russian_abbreviations():
    assert ElectricResistance.get_abbreviation(R.OHM, "ru-RU") == "Ом"
    assert ElectricResistance.get_abbreviation(R.KILOOHM, "ru-RU") == "кОм"
    assert ElectricResistance.get_abbreviation(R.MEGAOHM, "ru-RU") == "МОм"

def test_abbreviation_of_undefined_is_unsupported():
    with pytest.raises(UnsupportedUnitKind):
        ElectricResistance.get_abbreviation(R.UNDEFINED)

@pytest.mark.parametrize(
    "token, unit",
    [
        ("Ω", R.OHM),
        ("ohm", R.OHM),
        ("OHM", R.OHM),
        ("\u2126", R.OHM),   # OHM SIGN, NFC-folded onto Greek omega
        ("kΩ", R.KILOOHM),
        ("kohm", R.KILOOHM),
        ("MΩ", R.MEGAOHM),
        ("megaohm", R.MEGAOHM),
    ],
)
def test_parse_unit_aliases(token, unit):
    assert ElectricResistance.parse_unit(token) is unit

def test_unit_symbols_are_case_sensitive():
    # "mΩ" would be milliohm, which this kind does not define
    with pytest.raises(UnrecognizedUnit):
        ElectricResistance.parse_unit("mΩ")
    with pytest.raises(UnrecognizedUnit):
        ElectricResistance.parse("5 mΩ")


# -------------------------------
# Round trips
# -------------------------------

@pytest.mark.parametrize("unit", [R.OHM, R.KILOOHM, R.MEGAOHM])
@pytest.mark.parametrize("value", [0.0, 1.0, -2.5, 1e-9, 123456.789, 1e300])
def test_round_trip_through_each_unit(unit, value):
    out = ElectricResistance.from_unit(value, unit).as_unit(unit)
    assert math.isclose(out, value, rel_tol=1e-12, abs_tol=0.0)

@pytest.mark.parametrize("value", [0.0, 0.1, -7.25, 1e-300, 1.7976931348623157e308])
def test_round_trip_is_exact_for_base_unit(value):
    assert ElectricResistance.from_unit(value, R.OHM).as_unit(R.OHM) == value

@pytest.mark.parametrize(
    "text, unit",
    [
        ("5.5 Ω", R.OHM),
        ("1.5 kΩ", R.KILOOHM),
        ("2 MΩ", R.MEGAOHM),
        ("1,234.5 Ω", R.OHM),
        ("-750 kΩ", R.KILOOHM),
    ],
)
def test_format_of_parse_reproduces_text(text, unit):
    assert ElectricResistance.parse(text).to_string(unit) == text

@pytest.mark.parametrize(
    "text, culture, unit",
    [
        ("1,5 кОм", "ru-RU", R.KILOOHM),
        ("1.234,5 Ω", "de-DE", R.OHM),
        ("12,25 MΩ", "fr-FR", R.MEGAOHM),
    ],
)
def test_format_of_parse_reproduces_localized_text(text, culture, unit):
    assert ElectricResistance.parse(text, culture).to_string(unit, culture) == text
