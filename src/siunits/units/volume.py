"""
siunits.units.volume
====================

`Volume`, base unit cubic metre: cubed SI lengths, litres and US liquid
measures.
"""

from enum import Enum, auto

from siunits.core.descriptor import UnitDescriptor
from siunits.core.quantity import Quantity
from siunits.core.utils import power_symbol
from siunits.units import customary as us
from siunits.units.length import METER_SYMBOL
from siunits.units.prefixes import CENTI, DECA, DECI, HECTO, KILO, MILLI

CUBIC_METER_SYMBOL = power_symbol(METER_SYMBOL, 3)
LITER_SYMBOL = "L"
LITER_TO_CUBIC_METER = 1.0e-3


class VolumeUnit(Enum):
    CUBIC_METER = auto()
    CUBIC_DECIMETER = auto()
    CUBIC_CENTIMETER = auto()
    CUBIC_MILLIMETER = auto()
    CUBIC_DECAMETER = auto()
    CUBIC_HECTOMETER = auto()
    CUBIC_KILOMETER = auto()
    CUBIC_INCH = auto()
    CUBIC_FOOT = auto()
    CUBIC_YARD = auto()
    CUBIC_MILE = auto()
    LITER = auto()
    DECILITER = auto()
    CENTILITER = auto()
    MILLILITER = auto()
    GALLON = auto()
    QUART = auto()
    PINT = auto()
    CUP = auto()
    FLUID_OUNCE = auto()


def _cube(prefix):
    return prefix.factor ** 3, prefix.symbol + CUBIC_METER_SYMBOL


def _cube_customary(length):
    return length.factor ** 3, power_symbol(length.symbol, 3)


def _liters(prefix):
    return prefix.factor * LITER_TO_CUBIC_METER, prefix.symbol + LITER_SYMBOL


_U = VolumeUnit

VOLUME = UnitDescriptor.from_rows(
    "Volume",
    VolumeUnit,
    [
        (_U.CUBIC_METER, 1.0, CUBIC_METER_SYMBOL),
        (_U.CUBIC_DECIMETER, *_cube(DECI)),
        (_U.CUBIC_CENTIMETER, *_cube(CENTI)),
        (_U.CUBIC_MILLIMETER, *_cube(MILLI)),
        (_U.CUBIC_DECAMETER, *_cube(DECA)),
        (_U.CUBIC_HECTOMETER, *_cube(HECTO)),
        (_U.CUBIC_KILOMETER, *_cube(KILO)),
        (_U.CUBIC_INCH, *_cube_customary(us.INCH)),
        (_U.CUBIC_FOOT, *_cube_customary(us.FOOT)),
        (_U.CUBIC_YARD, *_cube_customary(us.YARD)),
        (_U.CUBIC_MILE, *_cube_customary(us.MILE)),
        (_U.LITER, LITER_TO_CUBIC_METER, LITER_SYMBOL),
        (_U.DECILITER, *_liters(DECI)),
        (_U.CENTILITER, *_liters(CENTI)),
        (_U.MILLILITER, *_liters(MILLI)),
        (_U.GALLON, us.GALLON.factor, us.GALLON.symbol),
        (_U.QUART, us.QUART.factor, us.QUART.symbol),
        (_U.PINT, us.PINT.factor, us.PINT.symbol),
        (_U.CUP, us.CUP.factor, us.CUP.symbol),
        (_U.FLUID_OUNCE, us.FLUID_OUNCE.factor, us.FLUID_OUNCE.symbol),
    ],
    base_unit=_U.CUBIC_METER,
)


class Volume(Quantity):
    __slots__ = ()
    descriptor = VOLUME


__all__ = ["Volume", "VolumeUnit", "VOLUME", "CUBIC_METER_SYMBOL", "LITER_SYMBOL"]
