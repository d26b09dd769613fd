from enum import Enum, auto

import pytest

from siunits.core.descriptor import UnitDescriptor
from siunits.errors import UnknownUnitSymbolError


class Widgets(Enum):
    WIDGET = auto()
    KILOWIDGET = auto()
    GROSS = auto()


ROWS = [
    (Widgets.WIDGET, 1.0, "w"),
    (Widgets.KILOWIDGET, 1e3, "kw"),
    (Widgets.GROSS, 144.0, "gr"),
]


@pytest.fixture
def widgets():
    return UnitDescriptor.from_rows("Widgets", Widgets, ROWS, base_unit=Widgets.WIDGET)


def test_tables_are_parallel_to_the_enum(widgets):
    assert widgets.factors == (1.0, 1e3, 144.0)
    assert widgets.symbols == ("w", "kw", "gr")
    assert [widgets.index(u) for u in Widgets] == [0, 1, 2]
    assert widgets.factor(Widgets.GROSS) == 144.0
    assert widgets.inverse(Widgets.KILOWIDGET) == pytest.approx(1e-3)
    assert widgets.symbol(Widgets.KILOWIDGET) == "kw"
    assert widgets.base_symbol == "w"
    assert Widgets.GROSS in widgets


def test_lookup_trims_and_matches_exactly(widgets):
    assert widgets.lookup("kw") is Widgets.KILOWIDGET
    assert widgets.lookup("  gr ") is Widgets.GROSS
    with pytest.raises(UnknownUnitSymbolError):
        widgets.lookup("KW")


def test_unknown_symbol_carries_context(widgets):
    with pytest.raises(UnknownUnitSymbolError) as info:
        widgets.lookup("dozen")
    assert info.value.symbol == "dozen"
    assert info.value.quantity == "Widgets"
    assert isinstance(info.value, LookupError)


def test_unit_from_name(widgets):
    assert widgets.unit_from_name("GROSS") is Widgets.GROSS
    with pytest.raises(UnknownUnitSymbolError):
        widgets.unit_from_name("Gross")


def test_rows_must_follow_enum_order():
    with pytest.raises(ValueError, match="declaration order"):
        UnitDescriptor.from_rows("Widgets", Widgets, [ROWS[1], ROWS[0], ROWS[2]], base_unit=Widgets.WIDGET)


def test_rows_must_cover_every_unit():
    with pytest.raises(ValueError):
        UnitDescriptor.from_rows("Widgets", Widgets, ROWS[:2], base_unit=Widgets.WIDGET)


def test_table_lengths_must_match():
    with pytest.raises(ValueError, match="same length"):
        UnitDescriptor("Widgets", Widgets, (1.0, 1e3), ("w", "kw", "gr"), Widgets.WIDGET)


@pytest.mark.parametrize("bad", [0.0, -2.0, float("inf"), float("nan")])
def test_factors_must_be_positive_and_finite(bad):
    rows = [ROWS[0], (Widgets.KILOWIDGET, bad, "kw"), ROWS[2]]
    with pytest.raises(ValueError, match="positive, finite"):
        UnitDescriptor.from_rows("Widgets", Widgets, rows, base_unit=Widgets.WIDGET)


def test_symbols_must_be_unique():
    rows = [ROWS[0], (Widgets.KILOWIDGET, 1e3, "gr"), ROWS[2]]
    with pytest.raises(ValueError, match="symbol 'gr'"):
        UnitDescriptor.from_rows("Widgets", Widgets, rows, base_unit=Widgets.WIDGET)


def test_base_unit_factor_must_be_one():
    with pytest.raises(ValueError, match="factor 1.0"):
        UnitDescriptor.from_rows("Widgets", Widgets, ROWS, base_unit=Widgets.GROSS)


def test_base_unit_must_belong_to_enum():
    class Other(Enum):
        X = auto()

    with pytest.raises(ValueError, match="not a member"):
        UnitDescriptor.from_rows("Widgets", Widgets, ROWS, base_unit=Other.X)


def test_descriptor_is_frozen(widgets):
    with pytest.raises(AttributeError):
        widgets.factors = (2.0, 2.0, 2.0)
