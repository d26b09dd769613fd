import functools
import itertools
import math

import pytest

from siunits.units.length import Length
from siunits.units.mass import Mass

L = Length.Units


def test_cross_unit_ordering():
    assert Length(1, L.KILOMETER) > Length(999, L.METER)
    assert Length(1, L.INCH) < Length(3, L.CENTIMETER)
    assert Length(1, L.FOOT) <= Length(12, L.INCH)
    assert Length(1, L.YARD) >= Length(3, L.FOOT)


def test_compare_to():
    assert Length(1, L.METER).compare_to(Length(2, L.METER)) == -1
    assert Length(2, L.METER).compare_to(Length(1, L.METER)) == 1
    assert Length(1, L.METER).compare_to(Length(100, L.CENTIMETER)) == 0


def test_tolerance_equal_values_are_neither_less_nor_greater():
    a = Length(1.0, L.METER)
    b = Length(1.0 + 1e-15, L.METER)
    assert not a < b
    assert not a > b
    assert a <= b and a >= b


def test_trichotomy():
    values = [
        Length(1, L.METER), Length(100, L.CENTIMETER), Length(1, L.FOOT),
        Length(-2, L.KILOMETER), Length(0, L.MILE), Length(3.5, L.YARD),
    ]
    for a, b in itertools.product(values, repeat=2):
        outcomes = [a < b, a == b, a > b]
        assert outcomes.count(True) == 1, (a, b)
        cmp = a.compare_to(b)
        assert outcomes == [cmp < 0, cmp == 0, cmp > 0]


def test_sorting_mixed_units():
    items = [Length(1, L.MILE), Length(1, L.METER), Length(1, L.KILOMETER), Length(1, L.INCH)]
    assert [q.unit for q in sorted(items)] == [L.INCH, L.METER, L.KILOMETER, L.MILE]
    assert max(items).unit is L.MILE


def test_compare_to_orders_nan_first():
    items = [Length(2, L.METER), Length(math.nan, L.METER), Length(1, L.METER)]
    ordered = sorted(items, key=functools.cmp_to_key(Length.compare_to))
    assert ordered[0].is_nan()
    assert [q.value for q in ordered[1:]] == [1.0, 2.0]
    nan = Length(math.nan, L.METER)
    assert nan.compare_to(Length(-math.inf, L.METER)) == -1
    assert Length(1, L.METER).compare_to(nan) == 1
    assert nan.compare_to(Length(math.nan, L.KILOMETER)) == 0


@pytest.mark.regression(reason="operators ordered NaN before numbers; they must be false like float comparisons")
def test_rich_comparisons_with_nan_are_false():
    nan = Length(math.nan, L.METER)
    one = Length(1, L.METER)
    for a, b in ((nan, one), (one, nan), (nan, nan)):
        assert not a < b
        assert not a <= b
        assert not a > b
        assert not a >= b
        assert not a == b


def test_nan_comparison_still_checks_quantity_type():
    with pytest.raises(TypeError):
        _ = Length(math.nan, L.METER) < Mass(1, Mass.Units.KILOGRAM)


def test_comparing_different_quantity_types_raises():
    with pytest.raises(TypeError):
        _ = Length(1, L.METER) < Mass(1, Mass.Units.KILOGRAM)
    with pytest.raises(TypeError):
        Length(1, L.METER).compare_to(Mass(1, Mass.Units.KILOGRAM))


def test_comparing_with_number_raises():
    with pytest.raises(TypeError):
        _ = Length(1, L.METER) < 5
