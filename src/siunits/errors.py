"""
siunits.errors
==============

Exception types raised by siunits.

Both concrete errors also derive from the matching built-in exception
(``ValueError`` / ``LookupError``) so callers catching the standard types keep
working.
"""

from __future__ import annotations


class SIUnitsError(Exception):
    """Base class for all siunits errors."""


class QuantityFormatError(SIUnitsError, ValueError):
    """Text could not be read as ``"<value> <symbol>"``."""


class UnknownUnitSymbolError(SIUnitsError, LookupError):
    """A unit symbol (or unit name) is not defined for a quantity type."""

    def __init__(self, symbol: str, quantity: str) -> None:
        super().__init__(f"Unknown unit symbol for {quantity}: {symbol!r}")
        self.symbol = symbol
        self.quantity = quantity


__all__ = ["SIUnitsError", "QuantityFormatError", "UnknownUnitSymbolError"]
