import math

import pytest

from siunits.units.length import Length
from siunits.units.time import Time

L = Length.Units
T = Time.Units


def test_math_functions_act_on_value_and_keep_unit():
    q = Length(16, L.CENTIMETER)
    for result in (q.sqrt(), q.cbrt(), q.log(), q.log2(), q.log10(), q.pow(2), q.abs(),
                   q.floor(), q.ceiling(), q.truncate(), q.round(), q.round(1)):
        assert result.unit is L.CENTIMETER
        assert isinstance(result, Length)


def test_roots():
    assert Length(16, L.METER).sqrt().value == 4.0
    assert Length(27, L.METER).cbrt().value == pytest.approx(3.0)
    assert Length(-8, L.METER).cbrt().value == pytest.approx(-2.0)


def test_logarithms():
    assert Time(math.e, T.SECOND).log().value == pytest.approx(1.0)
    assert Time(8, T.SECOND).log2().value == 3.0
    assert Time(1000, T.SECOND).log10().value == 3.0


def test_pow_and_operator():
    assert Length(3, L.METER).pow(2).value == 9.0
    assert (Length(3, L.METER) ** 2).value == 9.0
    assert (Length(4, L.METER) ** 0.5).value == 2.0


def test_abs():
    assert Length(-3, L.FOOT).abs().value == 3.0
    assert abs(Length(-3, L.FOOT)).value == 3.0


def test_integral_parts_and_builtins():
    q = Length(-2.7, L.METER)
    assert q.floor().value == -3.0
    assert q.ceiling().value == -2.0
    assert q.truncate().value == -2.0
    assert math.floor(q).value == -3.0
    assert math.ceil(q).value == -2.0
    assert math.trunc(q).value == -2.0


def test_round_half_to_even():
    assert Length(2.5, L.METER).round().value == 2.0
    assert Length(3.5, L.METER).round().value == 4.0
    assert Length(1.2345, L.METER).round(2).value == 1.23
    assert round(Length(1.2345, L.METER), 3).value == pytest.approx(1.234)
    assert isinstance(round(Length(2.5, L.METER)), Length)


def test_domain_errors_become_nan_or_infinity():
    assert Length(-1, L.METER).sqrt().is_nan()
    assert Length(-1, L.METER).log().is_nan()
    assert Length(0, L.METER).log().is_negative_infinity()
    assert Length(0, L.METER).log10().is_negative_infinity()
    assert Length(-8, L.METER).pow(1 / 3).is_nan()
    assert Length(10, L.METER).pow(400).is_positive_infinity()


def test_non_finite_values_pass_through():
    inf = Length(math.inf, L.METER)
    assert inf.floor().is_positive_infinity()
    assert inf.round(2).is_positive_infinity()
    assert Length(math.nan, L.METER).ceiling().is_nan()


def test_predicates():
    assert Length(math.nan, L.METER).is_nan()
    assert Length(math.inf, L.METER).is_infinity()
    assert Length(-math.inf, L.METER).is_infinity()
    assert Length(math.inf, L.METER).is_positive_infinity()
    assert not Length(math.inf, L.METER).is_negative_infinity()
    assert Length(-math.inf, L.METER).is_negative_infinity()
    assert not Length(1, L.METER).is_infinity()
    assert not Length(1, L.METER).is_nan()


def test_sign():
    assert Length(-4, L.METER).sign() == -1
    assert Length(0, L.METER).sign() == 0
    assert Length(0.5, L.METER).sign() == 1
    with pytest.raises(ArithmeticError):
        Length(math.nan, L.METER).sign()
