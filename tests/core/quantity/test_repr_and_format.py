import math

import pytest

from siunits.units.length import Length
from siunits.units.surface_density import SurfaceDensity
from siunits.units.time import Time
from siunits.units.volume import Volume

L = Length.Units


@pytest.mark.parametrize(
    "q, expected",
    [
        (Length(100, L.CENTIMETER), "100 cm"),
        (Length(0.1, L.METER), "0.1 m"),
        (Length(1.5, L.KILOMETER), "1.5 km"),
        (Length(1e-7, L.METER), "1e-07 m"),
        (Length(-3, L.FOOT), "-3 ft"),
        (SurfaceDensity(80, SurfaceDensity.Units.GRAM_PER_SQUARE_METER), "80 g/m²"),
        (Volume(2, Volume.Units.FLUID_OUNCE), "2 fl oz"),
        (Volume(1, Volume.Units.CUBIC_DECAMETER), "1 dam³"),
    ],
)
def test_str_is_value_space_symbol(q, expected):
    assert str(q) == expected
    assert q.to_string() == expected


def test_str_non_finite():
    assert str(Length(math.inf, L.METER)) == "inf m"
    assert str(Length(-math.inf, L.METER)) == "-inf m"
    assert str(Length(math.nan, L.METER)) == "nan m"


def test_str_after_conversion():
    assert str(Time(90, Time.Units.MINUTE).to(Time.Units.HOUR)) == "1.5 hr"
    assert str(Length(100, L.CENTIMETER).to_base()) == "1 m"


def test_repr_names_type_value_and_unit():
    assert repr(Length(100, L.CENTIMETER)) == "Length(100.0, Length.Units.CENTIMETER)"
    assert repr(Time(1.5, Time.Units.HOUR)) == "Time(1.5, Time.Units.HOUR)"


def test_to_string_with_format_spec():
    q = Length(1.23456, L.METER)
    assert q.to_string(".2f") == "1.23 m"
    assert q.to_string("e") == "1.234560e+00 m"
    assert q.to_string(None) == "1.23456 m"


def test_format_native_and_default():
    q = Length(100, L.CENTIMETER)
    assert f"{q}" == "100 cm"
    assert f"{q:native}" == "100 cm"
    assert format(q, "") == str(q)


def test_format_base():
    assert f"{Length(100, L.CENTIMETER):base}" == "1 m"
    assert f"{Length(2, L.KILOMETER):BASE}" == "2000 m"


def test_format_float_spec_applies_to_value():
    assert f"{Length(1.23456, L.METER):.2f}" == "1.23 m"
    assert f"{Length(1234.5, L.METER):,.1f}" == "1,234.5 m"
    assert f"{Length(5, L.MILE):>6.1f}" == "   5.0 mi"


def test_format_invalid_spec_raises():
    with pytest.raises(ValueError):
        format(Length(1, L.METER), "nonsense")
