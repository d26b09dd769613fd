"""
siunits.core.prefix
===================

The `Prefix` value object: a named multiplier (kilo = 10³) with a symbol.

Prefixes are used to build derived unit symbols ("km", "mg/cm²") and their
factors feed the conversion tables of the concrete quantity types. US customary
definitions reuse the same shape, with the factor holding the ratio to the SI
base unit instead of a power of ten.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite, log10

from siunits.core.utils import superscript


@dataclass(frozen=True, slots=True)
class Prefix:
    """A named multiplicative factor with a display symbol.

    Attributes
    ----------
    name : str
        Full name, e.g. "kilo".
    symbol : str
        Symbol used when composing unit symbols, e.g. "k".
    factor : float
        Multiplier, e.g. 1e3.
    """

    name: str
    symbol: str
    factor: float

    def __post_init__(self) -> None:
        if not (self.factor > 0 and isfinite(self.factor)):
            raise ValueError("factor must be a positive, finite number")

    @property
    def exponent(self) -> int:
        # round, not int(): log10(1e-15) comes out as -14.999999999999998
        return round(log10(self.factor))

    def to_display_string(self) -> str:
        """Return ``'10ⁿ name symbol'``, e.g. ``'10⁻⁶ micro μ'``."""
        return f"10{superscript(self.exponent)} {self.name} {self.symbol}"

    def __str__(self) -> str:
        return self.to_display_string()


__all__ = ["Prefix"]
