"""
siunits.units.length
====================

`Length`, base unit metre: SI-prefixed metres plus US customary and nautical
lengths.
"""

from enum import Enum, auto

from siunits.core.descriptor import UnitDescriptor
from siunits.core.quantity import Quantity
from siunits.units import customary as us
from siunits.units.prefixes import (
    CENTI, DECA, DECI, FEMTO, GIGA, HECTO, KILO, MEGA, MICRO, MILLI, NANO, PETA, PICO, TERA,
)

METER_SYMBOL = "m"


class LengthUnit(Enum):
    METER = auto()
    DECIMETER = auto()
    CENTIMETER = auto()
    MILLIMETER = auto()
    MICROMETER = auto()
    NANOMETER = auto()
    PICOMETER = auto()
    FEMTOMETER = auto()
    DECAMETER = auto()
    HECTOMETER = auto()
    KILOMETER = auto()
    MEGAMETER = auto()
    GIGAMETER = auto()
    TERAMETER = auto()
    PETAMETER = auto()
    INCH = auto()
    FOOT = auto()
    YARD = auto()
    MILE = auto()
    NAUTICAL_MILE = auto()
    LINK = auto()
    CHAIN = auto()
    ROD = auto()
    FURLONG = auto()
    FATHOM = auto()


_U = LengthUnit

LENGTH = UnitDescriptor.from_rows(
    "Length",
    LengthUnit,
    [
        (_U.METER, 1.0, METER_SYMBOL),
        (_U.DECIMETER, DECI.factor, DECI.symbol + METER_SYMBOL),
        (_U.CENTIMETER, CENTI.factor, CENTI.symbol + METER_SYMBOL),
        (_U.MILLIMETER, MILLI.factor, MILLI.symbol + METER_SYMBOL),
        (_U.MICROMETER, MICRO.factor, MICRO.symbol + METER_SYMBOL),
        (_U.NANOMETER, NANO.factor, NANO.symbol + METER_SYMBOL),
        (_U.PICOMETER, PICO.factor, PICO.symbol + METER_SYMBOL),
        (_U.FEMTOMETER, FEMTO.factor, FEMTO.symbol + METER_SYMBOL),
        (_U.DECAMETER, DECA.factor, DECA.symbol + METER_SYMBOL),
        (_U.HECTOMETER, HECTO.factor, HECTO.symbol + METER_SYMBOL),
        (_U.KILOMETER, KILO.factor, KILO.symbol + METER_SYMBOL),
        (_U.MEGAMETER, MEGA.factor, MEGA.symbol + METER_SYMBOL),
        (_U.GIGAMETER, GIGA.factor, GIGA.symbol + METER_SYMBOL),
        (_U.TERAMETER, TERA.factor, TERA.symbol + METER_SYMBOL),
        (_U.PETAMETER, PETA.factor, PETA.symbol + METER_SYMBOL),
        (_U.INCH, us.INCH.factor, us.INCH.symbol),
        (_U.FOOT, us.FOOT.factor, us.FOOT.symbol),
        (_U.YARD, us.YARD.factor, us.YARD.symbol),
        (_U.MILE, us.MILE.factor, us.MILE.symbol),
        (_U.NAUTICAL_MILE, us.NAUTICAL_MILE.factor, us.NAUTICAL_MILE.symbol),
        (_U.LINK, us.LINK.factor, us.LINK.symbol),
        (_U.CHAIN, us.CHAIN.factor, us.CHAIN.symbol),
        (_U.ROD, us.ROD.factor, us.ROD.symbol),
        (_U.FURLONG, us.FURLONG.factor, us.FURLONG.symbol),
        (_U.FATHOM, us.FATHOM.factor, us.FATHOM.symbol),
    ],
    base_unit=_U.METER,
)


class Length(Quantity):
    """A length, e.g. ``Length(100, Length.Units.CENTIMETER)``."""

    __slots__ = ()
    descriptor = LENGTH


__all__ = ["Length", "LengthUnit", "LENGTH", "METER_SYMBOL"]
