"""`Time`, base unit second."""

from enum import Enum, auto

from siunits.core.descriptor import UnitDescriptor
from siunits.core.quantity import Quantity
from siunits.units.prefixes import (
    CENTI, DECA, DECI, FEMTO, GIGA, HECTO, KILO, MEGA, MICRO, MILLI, NANO, PETA, PICO, TERA,
)

SECOND_SYMBOL = "s"


class TimeUnit(Enum):
    SECOND = auto()
    DECISECOND = auto()
    CENTISECOND = auto()
    MILLISECOND = auto()
    MICROSECOND = auto()
    NANOSECOND = auto()
    PICOSECOND = auto()
    FEMTOSECOND = auto()
    DECASECOND = auto()
    HECTOSECOND = auto()
    KILOSECOND = auto()
    MEGASECOND = auto()
    GIGASECOND = auto()
    TERASECOND = auto()
    PETASECOND = auto()
    MINUTE = auto()
    HOUR = auto()
    DAY = auto()


_PREFIXED = (DECI, CENTI, MILLI, MICRO, NANO, PICO, FEMTO, DECA, HECTO, KILO, MEGA, GIGA, TERA, PETA)

TIME = UnitDescriptor.from_rows(
    "Time",
    TimeUnit,
    [
        (TimeUnit.SECOND, 1.0, SECOND_SYMBOL),
        # DECISECOND .. PETASECOND follow SECOND in declaration order
        *(
            (unit, prefix.factor, prefix.symbol + SECOND_SYMBOL)
            for unit, prefix in zip(list(TimeUnit)[1:], _PREFIXED)
        ),
        (TimeUnit.MINUTE, 60.0, "min"),
        (TimeUnit.HOUR, 3600.0, "hr"),
        (TimeUnit.DAY, 86400.0, "d"),
    ],
    base_unit=TimeUnit.SECOND,
)


class Time(Quantity):
    __slots__ = ()
    descriptor = TIME


__all__ = ["Time", "TimeUnit", "TIME", "SECOND_SYMBOL"]
