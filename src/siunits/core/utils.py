"""
siunits.core.utils
==================

Small helpers shared by the quantity engine:

- superscript rendering for prefix exponents and unit powers ('10⁻⁶', 'm²'),
- compact, round-trippable number text for ``Quantity.to_string``,
- real-valued math wrappers that follow IEEE-754 instead of raising.

Python's ``math`` module raises on domain errors (``log(0)``, ``sqrt(-1)``,
``floor(inf)``) and the ``/`` and ``%`` operators raise ``ZeroDivisionError``.
Quantities must carry NaN and ±inf through every operation, so the engine calls
the wrappers below rather than ``math`` directly.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def superscript(n: int) -> str:
    """Render an integer with Unicode superscript glyphs (``-12`` → ``'⁻¹²'``)."""
    return str(int(n)).translate(_SUPERSCRIPTS)


def _sup(n: int) -> str:
    return "" if n == 1 else superscript(n)


def power_symbol(symbol: str, n: int) -> str:
    """Append a superscript power to a unit symbol; ``power_symbol('m', 2)`` → ``'m²'``."""
    return symbol + _sup(n)


SQUARED = power_symbol("", 2)
CUBED = power_symbol("", 3)


def format_number(x: float) -> str:
    """Shortest text that reads back to the same float, without a trailing '.0'."""
    text = repr(float(x))
    if text.endswith(".0"):
        return text[:-2]
    return text


# --- IEEE-754 flavoured real functions ---------------------------------------

def ieee_div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if math.isnan(a) or a == 0.0:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def ieee_fmod(a: float, b: float) -> float:
    """Truncated remainder (sign follows the dividend), NaN for x % 0 and inf % y."""
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def ieee_sqrt(x: float) -> float:
    if x < 0.0:
        return math.nan
    return math.sqrt(x)


def ieee_cbrt(x: float) -> float:
    return math.cbrt(x)


def ieee_log(x: float, fn: Callable[[float], float] = math.log) -> float:
    if math.isnan(x) or x < 0.0:
        return math.nan
    if x == 0.0:
        return -math.inf
    if math.isinf(x):
        return math.inf
    return fn(x)


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y == math.floor(y) and math.fmod(y, 2.0) != 0.0


def ieee_pow(x: float, y: float) -> float:
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0.0 and _is_odd_integer(y):
            return -math.inf
        return math.inf
    except ValueError:
        # pole at zero for negative exponents, otherwise a negative base with
        # a non-integer exponent
        if x == 0.0:
            return math.copysign(math.inf, x) if _is_odd_integer(y) else math.inf
        return math.nan


def _integral(fn: Callable[[float], int], x: float) -> float:
    if not math.isfinite(x):
        return x
    return float(fn(x))


def ieee_floor(x: float) -> float:
    return _integral(math.floor, x)


def ieee_ceil(x: float) -> float:
    return _integral(math.ceil, x)


def ieee_trunc(x: float) -> float:
    return _integral(math.trunc, x)


def ieee_round(x: float, digits: Optional[int] = None) -> float:
    """Round half to even, to ``digits`` fractional digits (0 when omitted)."""
    if not math.isfinite(x):
        return x
    return float(round(x, 0 if digits is None else int(digits)))


def sign(x: float) -> int:
    if math.isnan(x):
        raise ArithmeticError("sign is undefined for NaN")
    return (x > 0.0) - (x < 0.0)


__all__ = [
    "superscript",
    "power_symbol",
    "SQUARED",
    "CUBED",
    "format_number",
    "ieee_div",
    "ieee_fmod",
    "ieee_sqrt",
    "ieee_cbrt",
    "ieee_log",
    "ieee_pow",
    "ieee_floor",
    "ieee_ceil",
    "ieee_trunc",
    "ieee_round",
    "sign",
]
