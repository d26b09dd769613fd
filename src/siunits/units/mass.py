"""
siunits.units.mass
==================

`Mass`, base unit kilogram. Symbols are composed on the gram ("mg", "kg"),
factors are expressed in kilograms.
"""

from enum import Enum, auto

from siunits.core.descriptor import UnitDescriptor
from siunits.core.quantity import Quantity
from siunits.units import customary as us
from siunits.units.prefixes import (
    CENTI, DECA, DECI, FEMTO, GIGA, HECTO, KILO, MEGA, MICRO, MILLI, NANO, PETA, PICO, TERA,
)

GRAM_SYMBOL = "g"
TONNE_SYMBOL = "t"
GRAM_TO_KILOGRAM = 1.0e-3
TONNE_TO_KILOGRAM = 1.0e3


class MassUnit(Enum):
    KILOGRAM = auto()
    DECIGRAM = auto()
    CENTIGRAM = auto()
    MILLIGRAM = auto()
    MICROGRAM = auto()
    NANOGRAM = auto()
    PICOGRAM = auto()
    FEMTOGRAM = auto()
    DECAGRAM = auto()
    HECTOGRAM = auto()
    GRAM = auto()
    MEGAGRAM = auto()
    GIGAGRAM = auto()
    TERAGRAM = auto()
    PETAGRAM = auto()
    TONNE = auto()
    OUNCE = auto()
    POUND = auto()
    TON = auto()
    LONG_TON = auto()
    STONE = auto()
    SLUG = auto()


def _grams(prefix):
    return prefix.factor * GRAM_TO_KILOGRAM, prefix.symbol + GRAM_SYMBOL


_U = MassUnit

MASS = UnitDescriptor.from_rows(
    "Mass",
    MassUnit,
    [
        (_U.KILOGRAM, 1.0, KILO.symbol + GRAM_SYMBOL),
        (_U.DECIGRAM, *_grams(DECI)),
        (_U.CENTIGRAM, *_grams(CENTI)),
        (_U.MILLIGRAM, *_grams(MILLI)),
        (_U.MICROGRAM, *_grams(MICRO)),
        (_U.NANOGRAM, *_grams(NANO)),
        (_U.PICOGRAM, *_grams(PICO)),
        (_U.FEMTOGRAM, *_grams(FEMTO)),
        (_U.DECAGRAM, *_grams(DECA)),
        (_U.HECTOGRAM, *_grams(HECTO)),
        (_U.GRAM, GRAM_TO_KILOGRAM, GRAM_SYMBOL),
        (_U.MEGAGRAM, *_grams(MEGA)),
        (_U.GIGAGRAM, *_grams(GIGA)),
        (_U.TERAGRAM, *_grams(TERA)),
        (_U.PETAGRAM, *_grams(PETA)),
        (_U.TONNE, TONNE_TO_KILOGRAM, TONNE_SYMBOL),
        (_U.OUNCE, us.OUNCE.factor, us.OUNCE.symbol),
        (_U.POUND, us.POUND.factor, us.POUND.symbol),
        (_U.TON, us.TON.factor, us.TON.symbol),
        (_U.LONG_TON, us.LONG_TON.factor, us.LONG_TON.symbol),
        (_U.STONE, us.STONE.factor, us.STONE.symbol),
        (_U.SLUG, us.SLUG.factor, us.SLUG.symbol),
    ],
    base_unit=_U.KILOGRAM,
)


class Mass(Quantity):
    """A mass, e.g. ``Mass(2.5, Mass.Units.POUND)``."""

    __slots__ = ()
    descriptor = MASS


__all__ = ["Mass", "MassUnit", "MASS", "GRAM_SYMBOL", "TONNE_SYMBOL"]
