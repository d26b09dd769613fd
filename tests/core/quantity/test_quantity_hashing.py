import pytest

from siunits.units.length import Length
from siunits.units.mass import Mass
from siunits.units.volume import Volume

L = Length.Units


def test_equal_quantities_hash_alike_regardless_of_unit():
    assert hash(Length(100, L.CENTIMETER)) == hash(Length(1, L.METER))
    assert hash(Mass(1000, Mass.Units.GRAM)) == hash(Mass(1, Mass.Units.KILOGRAM))


def test_usable_in_sets_and_dicts():
    seen = {Length(1, L.METER), Length(100, L.CENTIMETER), Length(2, L.METER)}
    assert len(seen) == 2
    table = {Length(1, L.KILOMETER): "k"}
    assert table[Length(1000, L.METER)] == "k"


@pytest.mark.regression(reason="pairs equal only within tolerance hashed apart (1000 μg vs 1 mg)")
@pytest.mark.parametrize(
    "a, b",
    [
        (Length(12, L.INCH), Length(1, L.FOOT)),
        (Length(0.1, L.METER), Length(10, L.CENTIMETER)),
        (Length(3, L.FOOT), Length(1, L.YARD)),
        (Mass(1000, Mass.Units.MICROGRAM), Mass(1, Mass.Units.MILLIGRAM)),
        (Volume(1, Volume.Units.CUBIC_DECIMETER), Volume(1, Volume.Units.LITER)),
        (Volume(1, Volume.Units.MILLILITER), Volume(1, Volume.Units.CUBIC_CENTIMETER)),
        (Length(1e-15, L.METER), Length(0, L.METER)),
        (Length(-0.0, L.METER), Length(0.0, L.KILOMETER)),
    ],
)
def test_tolerance_equal_pairs_hash_alike(a, b):
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_as_key_basic():
    assert Length(100.0, L.CENTIMETER).as_key() == ("Length", 1.0)
    assert Mass(5.5, Mass.Units.GRAM).as_key() == ("Mass", 0.0055)


def test_as_key_groups_tolerance_equal_values():
    q1 = Length(1.0, L.METER)
    q2 = Length(1.0 + 1e-13, L.METER)
    q3 = Length(1.0 - 1e-13, L.METER)
    assert q1.as_key() == q2.as_key() == q3.as_key()


def test_as_key_custom_precision():
    q1 = Length(1.2345678, L.METER)
    q2 = Length(1.2345679, L.METER)
    assert q1.as_key() != q2.as_key()
    assert q1.as_key(precision=6) == q2.as_key(precision=6)


def test_as_key_normalises_negative_zero():
    assert Length(-0.0, L.METER).as_key() == Length(0.0, L.METER).as_key()


def test_as_key_separates_quantity_types():
    assert Length(1, L.METER).as_key() != Mass(1, Mass.Units.KILOGRAM).as_key()
