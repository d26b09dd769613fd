"""
siunits.units.area
==================

`Area`, base unit square metre. Prefixed units square the prefix factor
(1 km² = (10³)² m²).
"""

from enum import Enum, auto

from siunits.core.descriptor import UnitDescriptor
from siunits.core.quantity import Quantity
from siunits.core.utils import power_symbol
from siunits.units import customary as us
from siunits.units.length import METER_SYMBOL
from siunits.units.prefixes import CENTI, DECA, DECI, GIGA, HECTO, KILO, MEGA, MICRO, MILLI, NANO

SQUARE_METER_SYMBOL = power_symbol(METER_SYMBOL, 2)
HECTARE_SYMBOL = "ha"
_SQUARE_FOOT = us.FOOT.factor ** 2


class AreaUnit(Enum):
    SQUARE_METER = auto()
    SQUARE_DECIMETER = auto()
    SQUARE_CENTIMETER = auto()
    SQUARE_MILLIMETER = auto()
    SQUARE_MICROMETER = auto()
    SQUARE_NANOMETER = auto()
    SQUARE_DECAMETER = auto()
    SQUARE_HECTOMETER = auto()
    SQUARE_KILOMETER = auto()
    SQUARE_MEGAMETER = auto()
    SQUARE_GIGAMETER = auto()
    HECTARE = auto()
    SQUARE_INCH = auto()
    SQUARE_FOOT = auto()
    SQUARE_YARD = auto()
    SQUARE_MILE = auto()
    ACRE = auto()


def _square(prefix):
    return prefix.factor ** 2, prefix.symbol + SQUARE_METER_SYMBOL


def _square_customary(length):
    return length.factor ** 2, power_symbol(length.symbol, 2)


_U = AreaUnit

AREA = UnitDescriptor.from_rows(
    "Area",
    AreaUnit,
    [
        (_U.SQUARE_METER, 1.0, SQUARE_METER_SYMBOL),
        (_U.SQUARE_DECIMETER, *_square(DECI)),
        (_U.SQUARE_CENTIMETER, *_square(CENTI)),
        (_U.SQUARE_MILLIMETER, *_square(MILLI)),
        (_U.SQUARE_MICROMETER, *_square(MICRO)),
        (_U.SQUARE_NANOMETER, *_square(NANO)),
        (_U.SQUARE_DECAMETER, *_square(DECA)),
        (_U.SQUARE_HECTOMETER, *_square(HECTO)),
        (_U.SQUARE_KILOMETER, *_square(KILO)),
        (_U.SQUARE_MEGAMETER, *_square(MEGA)),
        (_U.SQUARE_GIGAMETER, *_square(GIGA)),
        (_U.HECTARE, 1.0e4, HECTARE_SYMBOL),
        (_U.SQUARE_INCH, *_square_customary(us.INCH)),
        (_U.SQUARE_FOOT, *_square_customary(us.FOOT)),
        (_U.SQUARE_YARD, *_square_customary(us.YARD)),
        (_U.SQUARE_MILE, *_square_customary(us.MILE)),
        (_U.ACRE, _SQUARE_FOOT * 43560.0, "ac"),
    ],
    base_unit=_U.SQUARE_METER,
)


class Area(Quantity):
    """An area, e.g. ``Area(2, Area.Units.HECTARE)``."""

    __slots__ = ()
    descriptor = AREA


__all__ = ["Area", "AreaUnit", "AREA", "SQUARE_METER_SYMBOL", "HECTARE_SYMBOL"]
