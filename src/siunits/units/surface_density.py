"""
siunits.units.surface_density
=============================

`SurfaceDensity` (mass per area), base unit kilogram per square metre.

Every unit is a mass unit over a squared length unit. Symbols follow the
``"{mass}/{length}²"`` template ("mg/cm²", "lb/ft²"). Factors are
``mass_in_kg / length_in_m ** 2``; for the SI rows that ratio is a power of
ten and is written as the decimal literal ``1e{n}`` so it carries no
accumulated rounding (1 kg/dm² is exactly 100 kg/m²).
"""

from enum import Enum, auto

from siunits.core.descriptor import UnitDescriptor
from siunits.core.prefix import Prefix
from siunits.core.quantity import Quantity
from siunits.core.utils import SQUARED
from siunits.units import customary as us
from siunits.units.length import METER_SYMBOL
from siunits.units.mass import GRAM_SYMBOL, GRAM_TO_KILOGRAM, TONNE_SYMBOL, TONNE_TO_KILOGRAM
from siunits.units.prefixes import CENTI, DECA, DECI, HECTO, KILO, MILLI


def _si(name: str, prefix: Prefix | None, symbol: str, scale: float = 1.0) -> Prefix:
    if prefix is None:
        return Prefix(name, symbol, scale)
    return Prefix(prefix.name + name, prefix.symbol + symbol, prefix.factor * scale)


# masses in kg
_KILOGRAM = _si("gram", KILO, GRAM_SYMBOL, GRAM_TO_KILOGRAM)
_GRAM = _si("gram", None, GRAM_SYMBOL, GRAM_TO_KILOGRAM)
_CENTIGRAM = _si("gram", CENTI, GRAM_SYMBOL, GRAM_TO_KILOGRAM)
_MILLIGRAM = _si("gram", MILLI, GRAM_SYMBOL, GRAM_TO_KILOGRAM)
_TONNE = _si("tonne", None, TONNE_SYMBOL, TONNE_TO_KILOGRAM)

# lengths in m
_KILOMETER = _si("meter", KILO, METER_SYMBOL)
_HECTOMETER = _si("meter", HECTO, METER_SYMBOL)
_DECAMETER = _si("meter", DECA, METER_SYMBOL)
_METER = _si("meter", None, METER_SYMBOL)
_DECIMETER = _si("meter", DECI, METER_SYMBOL)
_CENTIMETER = _si("meter", CENTI, METER_SYMBOL)
_MILLIMETER = _si("meter", MILLI, METER_SYMBOL)


class SurfaceDensityUnit(Enum):
    KILOGRAM_PER_SQUARE_METER = auto()
    KILOGRAM_PER_SQUARE_KILOMETER = auto()
    KILOGRAM_PER_SQUARE_HECTOMETER = auto()
    KILOGRAM_PER_SQUARE_DECAMETER = auto()
    KILOGRAM_PER_SQUARE_DECIMETER = auto()
    KILOGRAM_PER_SQUARE_CENTIMETER = auto()
    KILOGRAM_PER_SQUARE_MILLIMETER = auto()

    GRAM_PER_SQUARE_KILOMETER = auto()
    GRAM_PER_SQUARE_HECTOMETER = auto()
    GRAM_PER_SQUARE_DECAMETER = auto()
    GRAM_PER_SQUARE_METER = auto()
    GRAM_PER_SQUARE_DECIMETER = auto()
    GRAM_PER_SQUARE_CENTIMETER = auto()
    GRAM_PER_SQUARE_MILLIMETER = auto()

    CENTIGRAM_PER_SQUARE_KILOMETER = auto()
    CENTIGRAM_PER_SQUARE_HECTOMETER = auto()
    CENTIGRAM_PER_SQUARE_DECAMETER = auto()
    CENTIGRAM_PER_SQUARE_METER = auto()
    CENTIGRAM_PER_SQUARE_DECIMETER = auto()
    CENTIGRAM_PER_SQUARE_CENTIMETER = auto()
    CENTIGRAM_PER_SQUARE_MILLIMETER = auto()

    MILLIGRAM_PER_SQUARE_KILOMETER = auto()
    MILLIGRAM_PER_SQUARE_HECTOMETER = auto()
    MILLIGRAM_PER_SQUARE_DECAMETER = auto()
    MILLIGRAM_PER_SQUARE_METER = auto()
    MILLIGRAM_PER_SQUARE_DECIMETER = auto()
    MILLIGRAM_PER_SQUARE_CENTIMETER = auto()
    MILLIGRAM_PER_SQUARE_MILLIMETER = auto()

    TONNE_PER_SQUARE_KILOMETER = auto()
    TONNE_PER_SQUARE_HECTOMETER = auto()
    TONNE_PER_SQUARE_DECAMETER = auto()
    TONNE_PER_SQUARE_METER = auto()
    TONNE_PER_SQUARE_DECIMETER = auto()
    TONNE_PER_SQUARE_CENTIMETER = auto()
    TONNE_PER_SQUARE_MILLIMETER = auto()

    OUNCE_PER_SQUARE_INCH = auto()
    OUNCE_PER_SQUARE_FOOT = auto()
    OUNCE_PER_SQUARE_YARD = auto()
    OUNCE_PER_SQUARE_MILE = auto()

    POUND_PER_SQUARE_INCH = auto()
    POUND_PER_SQUARE_FOOT = auto()
    POUND_PER_SQUARE_YARD = auto()
    POUND_PER_SQUARE_MILE = auto()

    TON_PER_SQUARE_INCH = auto()
    TON_PER_SQUARE_FOOT = auto()
    TON_PER_SQUARE_YARD = auto()
    TON_PER_SQUARE_MILE = auto()


_SI_AREAS = (_KILOMETER, _HECTOMETER, _DECAMETER, _METER, _DECIMETER, _CENTIMETER, _MILLIMETER)
_CUSTOMARY_AREAS = (us.INCH, us.FOOT, us.YARD, us.MILE)

def _decimal_ratio(mass: Prefix, length: Prefix) -> float:
    # 10^(m - 2l) parsed from text is the nearest double; multiplying the
    # prefix factors would drift (1 / 0.1**2 == 99.99999999999999)
    return float(f"1e{mass.exponent - 2 * length.exponent}")


def _measured_ratio(mass: Prefix, length: Prefix) -> float:
    return mass.factor / length.factor ** 2


# (mass, lengths, ratio) in SurfaceDensityUnit declaration order
_BLOCKS = (
    (_KILOGRAM, (_METER, _KILOMETER, _HECTOMETER, _DECAMETER, _DECIMETER, _CENTIMETER, _MILLIMETER), _decimal_ratio),
    (_GRAM, _SI_AREAS, _decimal_ratio),
    (_CENTIGRAM, _SI_AREAS, _decimal_ratio),
    (_MILLIGRAM, _SI_AREAS, _decimal_ratio),
    (_TONNE, _SI_AREAS, _decimal_ratio),
    (us.OUNCE, _CUSTOMARY_AREAS, _measured_ratio),
    (us.POUND, _CUSTOMARY_AREAS, _measured_ratio),
    (us.TON, _CUSTOMARY_AREAS, _measured_ratio),
)


def _per_square(mass: Prefix, length: Prefix, ratio) -> tuple[float, str]:
    return ratio(mass, length), f"{mass.symbol}/{length.symbol}{SQUARED}"


SURFACE_DENSITY = UnitDescriptor.from_rows(
    "SurfaceDensity",
    SurfaceDensityUnit,
    [
        (unit, *_per_square(mass, length, ratio))
        for unit, (mass, length, ratio) in zip(
            SurfaceDensityUnit,
            [(mass, length, ratio) for mass, lengths, ratio in _BLOCKS for length in lengths],
        )
    ],
    base_unit=SurfaceDensityUnit.KILOGRAM_PER_SQUARE_METER,
)


class SurfaceDensity(Quantity):
    """Mass per unit area, e.g. ``SurfaceDensity(80, SurfaceDensity.Units.GRAM_PER_SQUARE_METER)``."""

    __slots__ = ()
    descriptor = SURFACE_DENSITY


__all__ = ["SurfaceDensity", "SurfaceDensityUnit", "SURFACE_DENSITY"]
