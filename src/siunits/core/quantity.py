"""
siunits.core.quantity
=====================

Defines the generic `Quantity` engine shared by every concrete quantity type
(`Length`, `Mass`, `SurfaceDensity`, ...).

A concrete type is a subclass that binds a `UnitDescriptor`:

>>> class Length(Quantity):
...     __slots__ = ()
...     descriptor = LENGTH

and from then on gets conversion, arithmetic, comparison, hashing, formatting
and parsing for free. A quantity stores its value exactly as given, in the unit
it was given in; the *base value* (the amount expressed in the descriptor's
base unit) is derived on demand and is what equality, ordering and cross-unit
arithmetic work on.

Rules worth knowing:

- Equality is an absolute tolerance on the base value (`EQUALITY_TOLERANCE`).
- ``a + b`` keeps the unit when both operands share it; otherwise the result is
  expressed in the base unit.
- ``a / b`` between two quantities of the same type is a plain ``float``.
- Math functions (``sqrt``, ``log``, ``pow`` ...) act on the value only and keep
  the unit. They are not dimensionally sound.
- NaN and ±inf propagate; division by zero never raises. ``<`` and ``>`` are
  False against NaN; ``compare_to`` orders NaN first.
"""

from __future__ import annotations

import locale
import logging
import math
from enum import Enum
from typing import Any, ClassVar, Optional, Tuple, Type, Union

from siunits.core.descriptor import UnitDescriptor
from siunits.core.utils import (
    format_number,
    ieee_cbrt,
    ieee_ceil,
    ieee_div,
    ieee_floor,
    ieee_fmod,
    ieee_log,
    ieee_pow,
    ieee_round,
    ieee_sqrt,
    ieee_trunc,
    sign,
)
from siunits.errors import QuantityFormatError, SIUnitsError

logger = logging.getLogger(__name__)

Number = Union[int, float]
UnitLike = Union[Enum, str]

# Absolute, on the base-unit scale
EQUALITY_TOLERANCE = 1.0e-14
DEFAULT_KEY_PRECISION = 12
HASH_SIGNIFICANT_DIGITS = 12


class Quantity:
    """
    A value paired with a unit of one physical dimension.

    Attributes
    ----------
    value : float
        Magnitude in `unit`.
    unit : Enum
        Member of the subclass's ``Units`` enumeration.

    Class attributes (set on each concrete subclass)
    ------------------------------------------------
    descriptor : UnitDescriptor
        Factor and symbol tables for the dimension.
    Units : type[Enum]
        The unit enumeration, ``descriptor.units``.
    BASE_UNIT : Enum
        Reference unit all conversions route through.
    BASE_SYMBOL : str
        Symbol of `BASE_UNIT`.
    """

    __slots__ = ("_value", "_unit")

    descriptor: ClassVar[UnitDescriptor]
    Units: ClassVar[Type[Enum]]
    BASE_UNIT: ClassVar[Enum]
    BASE_SYMBOL: ClassVar[str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        descriptor = getattr(cls, "descriptor", None)
        if not isinstance(descriptor, UnitDescriptor):
            raise TypeError(f"{cls.__name__} must define a 'descriptor' UnitDescriptor")
        cls.Units = descriptor.units
        cls.BASE_UNIT = descriptor.base_unit
        cls.BASE_SYMBOL = descriptor.base_symbol

    def __init__(self, value: Number, unit: UnitLike) -> None:
        if not hasattr(type(self), "descriptor"):
            raise TypeError("Quantity is abstract; instantiate a concrete quantity type")
        self._value = float(value)
        self._unit = self._coerce_unit(unit)

    @classmethod
    def _coerce_unit(cls, unit: UnitLike) -> Enum:
        if isinstance(unit, str):
            return cls.descriptor.lookup(unit)
        if unit not in cls.descriptor:
            raise TypeError(f"{unit!r} is not a {cls.__name__} unit")
        return unit

    def _new(self, value: float) -> "Quantity":
        """Same type and unit, new value."""
        return type(self)(value, self._unit)

    def _same_kind(self, other: object) -> bool:
        return isinstance(other, Quantity) and other.descriptor is self.descriptor

    def _check_same_kind(self, other: "Quantity", op: str) -> None:
        if other.descriptor is not self.descriptor:
            raise TypeError(
                f"Cannot {op} {type(self).__name__} and {type(other).__name__}: "
                "different physical quantities"
            )

    # ------------------------------ state ----------------------------------
    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> Enum:
        return self._unit

    @property
    def symbol(self) -> str:
        return self.descriptor.symbol(self._unit)

    # --------------------------- conversion --------------------------------
    def base_value(self) -> float:
        """The value expressed in the base unit."""
        d = self.descriptor
        return self._value * d.factor(self._unit) * d.inverse(d.base_unit)

    def to(self, target: UnitLike) -> "Quantity":
        """Return an equivalent quantity expressed in ``target`` (a unit or its symbol)."""
        target = self._coerce_unit(target)
        # same unit: copy the value as is, no factor round trip
        if target is self._unit:
            return self._new(self._value)
        d = self.descriptor
        return type(self)(self._value * d.factor(self._unit) / d.factor(target), target)

    as_unit = to

    def to_base(self) -> "Quantity":
        return self.to(self.BASE_UNIT)

    # --------------------- equality, hashing, ordering ---------------------
    def _is_close(self, other_base: float) -> bool:
        base = self.base_value()
        # exact match first so equal infinities compare equal
        return base == other_base or abs(base - other_base) <= EQUALITY_TOLERANCE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if not self._same_kind(other):
            return False
        return self._is_close(other.base_value())

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Equal amounts must hash alike whatever unit stores them, so hash the
        # base value rounded to HASH_SIGNIFICANT_DIGITS. Unit round trips
        # (1000 μg vs 1 mg) only disturb the last bits. Anything inside the
        # absolute tolerance of zero hashes as zero.
        base = self.base_value()
        if abs(base) <= EQUALITY_TOLERANCE:
            return hash(0.0)
        return hash(float(f"{base:.{HASH_SIGNIFICANT_DIGITS}g}"))

    def as_key(self, precision: int = DEFAULT_KEY_PRECISION) -> Tuple[str, float]:
        """
        Return a hashable, discretized key for this quantity.

        Quantities whose base values round to the same number at ``precision``
        decimal places share a key, so ``as_key`` is the way to bucket
        quantities that are only tolerance-equal.

        Returns
        -------
        tuple
            ``(quantity type name, rounded base value)``.
        """
        rounded = round(self.base_value(), precision)
        # -0.0 and 0.0 round identically; normalise so the keys match too
        if rounded == 0.0:
            rounded = 0.0
        return (self.descriptor.name, rounded)

    def compare_to(self, other: "Quantity") -> int:
        """
        Three-way comparison on base values: -1, 0 or 1.

        Returns 0 whenever the operands are equal under the equality tolerance,
        so for numbers exactly one of ``<``, ``==``, ``>`` holds. NaN orders
        before every number and equal to itself, so
        ``sorted(qs, key=functools.cmp_to_key(Q.compare_to))`` is total. The
        ``<`` ``<=`` ``>`` ``>=`` operators instead follow IEEE-754 and are
        False whenever either side is NaN.
        """
        if not isinstance(other, Quantity):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        self._check_same_kind(other, "compare")
        a = self.base_value()
        b = other.base_value()
        if math.isnan(a) or math.isnan(b):
            return math.isnan(b) - math.isnan(a)
        if self._is_close(b):
            return 0
        return -1 if a < b else 1

    def _ordered(self, other: "Quantity") -> Optional[int]:
        """compare_to for the rich comparisons; None when either side is NaN."""
        self._check_same_kind(other, "compare")
        if math.isnan(self.base_value()) or math.isnan(other.base_value()):
            return None
        return self.compare_to(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        cmp = self._ordered(other)
        return cmp is not None and cmp < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        cmp = self._ordered(other)
        return cmp is not None and cmp <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        cmp = self._ordered(other)
        return cmp is not None and cmp > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        cmp = self._ordered(other)
        return cmp is not None and cmp >= 0

    # --------------------------- arithmetic --------------------------------
    def __neg__(self) -> "Quantity":
        return self._new(-self._value)

    def __pos__(self) -> "Quantity":
        return self._new(self._value)

    def increment(self) -> "Quantity":
        """Add one of the *current* unit."""
        return self._new(self._value + 1.0)

    def decrement(self) -> "Quantity":
        """Subtract one of the *current* unit."""
        return self._new(self._value - 1.0)

    def __add__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_same_kind(other, "add")
        if other._unit is self._unit:
            return self._new(self._value + other._value)
        return type(self)(self.base_value() + other.base_value(), self.BASE_UNIT)

    def __sub__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_same_kind(other, "subtract")
        if other._unit is self._unit:
            return self._new(self._value - other._value)
        return type(self)(self.base_value() - other.base_value(), self.BASE_UNIT)

    def __mul__(self, other: Number) -> "Quantity":
        if isinstance(other, Quantity) or not isinstance(other, (int, float)):
            return NotImplemented
        return self._new(self._value * float(other))

    def __rmul__(self, other: Number) -> "Quantity":
        # allows 3 * Length(2, m)
        return self.__mul__(other)

    def __truediv__(self, other: "Quantity | Number") -> "Quantity | float":
        # quantity / quantity of the same kind -> dimensionless ratio
        if isinstance(other, Quantity):
            self._check_same_kind(other, "divide")
            return ieee_div(self.base_value(), other.base_value())
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self._new(ieee_div(self._value, float(other)))

    def __mod__(self, other: Number) -> "Quantity":
        if isinstance(other, Quantity) or not isinstance(other, (int, float)):
            return NotImplemented
        return self._new(ieee_fmod(self._value, float(other)))

    # ---------------- elementary math (value only, unit kept) --------------
    def sqrt(self) -> "Quantity":
        return self._new(ieee_sqrt(self._value))

    def cbrt(self) -> "Quantity":
        return self._new(ieee_cbrt(self._value))

    def log(self) -> "Quantity":
        """Natural logarithm of the value."""
        return self._new(ieee_log(self._value, math.log))

    def log2(self) -> "Quantity":
        return self._new(ieee_log(self._value, math.log2))

    def log10(self) -> "Quantity":
        return self._new(ieee_log(self._value, math.log10))

    def pow(self, exp: Number) -> "Quantity":
        return self._new(ieee_pow(self._value, float(exp)))

    def abs(self) -> "Quantity":
        return self._new(math.fabs(self._value))

    def floor(self) -> "Quantity":
        return self._new(ieee_floor(self._value))

    def ceiling(self) -> "Quantity":
        return self._new(ieee_ceil(self._value))

    def truncate(self) -> "Quantity":
        return self._new(ieee_trunc(self._value))

    def round(self, digits: Optional[int] = None) -> "Quantity":
        """Round the value half-to-even, to ``digits`` fractional digits (default 0)."""
        return self._new(ieee_round(self._value, digits))

    def __pow__(self, exp: Number) -> "Quantity":
        if isinstance(exp, Quantity) or not isinstance(exp, (int, float)):
            return NotImplemented
        return self.pow(exp)

    def __abs__(self) -> "Quantity":
        return self.abs()

    def __floor__(self) -> "Quantity":
        return self.floor()

    def __ceil__(self) -> "Quantity":
        return self.ceiling()

    def __trunc__(self) -> "Quantity":
        return self.truncate()

    def __round__(self, ndigits: Optional[int] = None) -> "Quantity":
        return self.round(ndigits)

    # ---------------------------- predicates -------------------------------
    def is_nan(self) -> bool:
        return math.isnan(self._value)

    def is_infinity(self) -> bool:
        return math.isinf(self._value)

    def is_positive_infinity(self) -> bool:
        return self._value == math.inf

    def is_negative_infinity(self) -> bool:
        return self._value == -math.inf

    def sign(self) -> int:
        """-1, 0 or 1 for the value; raises ArithmeticError for NaN."""
        return sign(self._value)

    # ------------------------ formatting & parsing -------------------------
    def to_string(self, fmt: Optional[str] = None) -> str:
        """
        Render as ``"<value> <symbol>"``.

        ``fmt`` is a standard format spec applied to the value (``".2f"``,
        ``"e"``; ``"n"`` follows the current locale). Without it the value is
        written as the shortest text that parses back to the same float.
        """
        text = format_number(self._value) if not fmt else format(self._value, fmt)
        return f"{text} {self.symbol}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"{name}({self._value!r}, {name}.Units.{self._unit.name})"

    def __format__(self, spec: str) -> str:
        """
        Custom string formatting for quantities.

        Supported specifiers
        --------------------
        "" (empty), or "native"
            The quantity in its current unit, same as ``str()``.
        "base"
            The quantity converted to the base unit.
        anything else
            A float format spec applied to the value, e.g. ``f"{q:.3f}"``.
        """
        key = (spec or "").strip().lower()
        if key in ("", "native"):
            return self.to_string()
        if key == "base":
            return self.to_base().to_string()
        return self.to_string(spec)

    @classmethod
    def parse(cls, s: str, *, locale_aware: bool = False) -> "Quantity":
        """
        Read ``"<value> <symbol>"`` as produced by `to_string`.

        The text is split at the first space. ``locale_aware`` reads the value
        with the current ``LC_NUMERIC`` conventions.

        Raises
        ------
        QuantityFormatError
            No space separator, or the value is not a number.
        UnknownUnitSymbolError
            The symbol is not one of this type's units.
        """
        if not isinstance(s, str):
            raise TypeError(f"parse expects str, got {type(s).__name__}")
        tokens = s.split(" ", 1)
        if len(tokens) != 2:
            raise QuantityFormatError(f"Expected '<value> <symbol>', got {s!r}")
        value_text, symbol = tokens
        try:
            value = locale.atof(value_text) if locale_aware else float(value_text)
        except ValueError:
            raise QuantityFormatError(f"Not a number: {value_text!r}") from None
        return cls(value, cls.descriptor.lookup(symbol))

    @classmethod
    def try_parse(cls, s: Optional[str], *, locale_aware: bool = False) -> Tuple[bool, Optional["Quantity"]]:
        """Like `parse`, but returns ``(False, None)`` instead of raising."""
        if not s:
            return False, None
        try:
            return True, cls.parse(s, locale_aware=locale_aware)
        except (SIUnitsError, TypeError) as exc:
            logger.debug("Could not parse %r as %s: %s", s, cls.__name__, exc)
            return False, None

    # --------------------------- serialization -----------------------------
    def as_record(self) -> dict:
        """``{"Value": value, "Unit": "<unit name>"}``; see `siunits.io.codec`."""
        from siunits.io.codec import to_record  # local import avoids a cycle

        return to_record(self)

    @classmethod
    def from_record(cls, record: dict) -> "Quantity":
        from siunits.io.codec import from_record

        return from_record(cls, record)


__all__ = ["Quantity", "EQUALITY_TOLERANCE", "DEFAULT_KEY_PRECISION", "HASH_SIGNIFICANT_DIGITS"]
