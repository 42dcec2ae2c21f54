import math

import pytest

from measurand.core.quantity import Quantity
from measurand.quantities import ElectricResistance, ElectricResistanceUnit as R


# -------------------------------
# Equality: exact on the base magnitude
# -------------------------------

def test_equal_across_units():
    assert ElectricResistance.from_kiloohms(1) == ElectricResistance.from_ohms(1000)
    assert ElectricResistance.from_megaohms(1) == ElectricResistance.from_kiloohms(1000)

def test_different_magnitudes_not_equal():
    assert ElectricResistance.from_ohms(2) != ElectricResistance.from_ohms(3)

@pytest.mark.regression(reason="Equality has no tolerance; rounding noise makes values unequal")
def test_equality_is_exact_without_tolerance():
    a = ElectricResistance.from_ohms(0.1 + 0.2)
    b = ElectricResistance.from_ohms(0.3)
    assert a != b
    assert math.isclose(a.base_value, b.base_value)

def test_equality_with_incompatible_type_returns_notimplemented():
    r = ElectricResistance.from_ohms(1)
    assert Quantity.__eq__(r, "not-a-quantity") is NotImplemented
    assert (r == "not-a-quantity") is False
    assert (r == 1.0) is False

def test_equality_with_other_kind_is_false(length_kind):
    Length, _ = length_kind
    assert ElectricResistance.from_ohms(1) != Length.from_meters(1)
    assert not (ElectricResistance.from_ohms(1) == Length.from_meters(1))

def test_nan_is_not_equal_to_itself():
    r = ElectricResistance.from_ohms(math.nan)
    assert r != r

def test_signed_zeros_are_equal():
    assert ElectricResistance.from_ohms(0.0) == ElectricResistance.from_ohms(-0.0)


# -------------------------------
# Ordering
# -------------------------------

def test_ordering_by_base_magnitude():
    small = ElectricResistance.from_ohms(999)
    big = ElectricResistance.from_kiloohms(1)
    assert small < big
    assert small <= big
    assert big > small
    assert big >= small
    assert big <= ElectricResistance.from_ohms(1000)
    assert big >= ElectricResistance.from_ohms(1000)

@pytest.mark.parametrize("a, b", [(-1.0, 0.0), (0.0, 1e-300), (1.0, 1.0000000000000002), (1e5, 1e300)])
def test_ordering_follows_base_values(a, b):
    assert ElectricResistance.from_base(a) < ElectricResistance.from_base(b)
    assert not ElectricResistance.from_base(b) < ElectricResistance.from_base(a)

def test_sorting_min_max():
    values = [
        ElectricResistance.from_megaohms(1),
        ElectricResistance.from_ohms(10),
        ElectricResistance.from_kiloohms(4.7),
    ]
    assert sorted(values) == [values[1], values[2], values[0]]
    assert min(values) == ElectricResistance.from_ohms(10)
    assert max(values) == ElectricResistance.from_unit(1, R.MEGAOHM)

def test_ordering_against_other_kind_raises(length_kind):
    Length, _ = length_kind
    with pytest.raises(TypeError):
        ElectricResistance.from_ohms(1) < Length.from_meters(2)
    with pytest.raises(TypeError):
        ElectricResistance.from_ohms(1) >= 0
