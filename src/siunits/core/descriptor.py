"""
siunits.core.descriptor
=======================

`UnitDescriptor` is the data bundle that parameterises the generic quantity
engine for one physical dimension: the unit enumeration, a factor table (how
many base units one of each unit is worth), a symbol table, and the base unit.

The tables are parallel tuples indexed by the unit's position in its enum,
built once at import time and never mutated afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from math import isfinite
from typing import Dict, Iterable, Tuple, Type

from siunits.errors import UnknownUnitSymbolError

logger = logging.getLogger(__name__)

UnitRow = Tuple[Enum, float, str]


@dataclass(frozen=True)
class UnitDescriptor:
    """Factor and symbol tables for one quantity type.

    Attributes
    ----------
    name : str
        Quantity type name, used in error messages ("Length").
    units : type[Enum]
        The unit enumeration. Iteration order defines the table ordinals.
    factors : tuple[float, ...]
        ``factors[i]`` base units per one ``units[i]``.
    symbols : tuple[str, ...]
        Display symbol per unit; pairwise distinct.
    base_unit : Enum
        Reference unit, must have factor exactly 1.0.
    """

    name: str
    units: Type[Enum]
    factors: Tuple[float, ...]
    symbols: Tuple[str, ...]
    base_unit: Enum
    _members: Tuple[Enum, ...] = field(init=False, repr=False, compare=False)
    _index: Dict[Enum, int] = field(init=False, repr=False, compare=False)
    _inverse: Tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        members = tuple(self.units)
        if not (len(self.factors) == len(self.symbols) == len(members)):
            raise ValueError(
                f"{self.name}: {len(members)} units, {len(self.factors)} factors "
                f"and {len(self.symbols)} symbols; tables must be the same length"
            )
        for unit, factor in zip(members, self.factors):
            if not (factor > 0 and isfinite(factor)):
                raise ValueError(f"{self.name}: factor for {unit.name} must be a positive, finite number")
        seen: Dict[str, Enum] = {}
        for unit, symbol in zip(members, self.symbols):
            if symbol in seen:
                raise ValueError(
                    f"{self.name}: symbol {symbol!r} used by both {seen[symbol].name} and {unit.name}"
                )
            seen[symbol] = unit
        if self.base_unit not in members:
            raise ValueError(f"{self.name}: base unit {self.base_unit!r} is not a member of {self.units.__name__}")

        index = {unit: i for i, unit in enumerate(members)}
        if self.factors[index[self.base_unit]] != 1.0:
            raise ValueError(f"{self.name}: base unit {self.base_unit.name} must have factor 1.0")

        # frozen dataclass: derived tables go through object.__setattr__
        object.__setattr__(self, "_members", members)
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "_inverse", tuple(1.0 / f for f in self.factors))
        logger.debug("Built unit descriptor %s with %d units", self.name, len(members))

    @classmethod
    def from_rows(
        cls,
        name: str,
        units: Type[Enum],
        rows: Iterable[UnitRow],
        base_unit: Enum,
    ) -> "UnitDescriptor":
        """Build the parallel tables from ``(unit, factor, symbol)`` rows.

        The rows must list every member of ``units`` exactly once, in enum order,
        so a reordered or forgotten row fails at import time instead of shifting
        every factor after it.
        """
        rows = tuple(rows)
        listed = tuple(unit for unit, _, _ in rows)
        if listed != tuple(units):
            raise ValueError(f"{name}: rows must cover every {units.__name__} member in declaration order")
        return cls(
            name=name,
            units=units,
            factors=tuple(float(factor) for _, factor, _ in rows),
            symbols=tuple(symbol for _, _, symbol in rows),
            base_unit=base_unit,
        )

    # ------------------------------ lookups --------------------------------
    def index(self, unit: Enum) -> int:
        """Stable ordinal of ``unit`` in the tables."""
        return self._index[unit]

    def factor(self, unit: Enum) -> float:
        return self.factors[self._index[unit]]

    def inverse(self, unit: Enum) -> float:
        return self._inverse[self._index[unit]]

    def symbol(self, unit: Enum) -> str:
        return self.symbols[self._index[unit]]

    @property
    def base_symbol(self) -> str:
        return self.symbol(self.base_unit)

    def __contains__(self, unit: object) -> bool:
        return unit in self._index

    def lookup(self, symbol: str) -> Enum:
        """Return the first unit whose symbol equals ``symbol`` (surrounding whitespace ignored)."""
        token = symbol.strip()
        for unit, candidate in zip(self._members, self.symbols):
            if candidate == token:
                return unit
        logger.debug("No %s unit with symbol %r", self.name, token)
        raise UnknownUnitSymbolError(token, self.name)

    def unit_from_name(self, name: str) -> Enum:
        """Return the unit whose enum member name is ``name`` ("CENTIMETER")."""
        try:
            return self.units[name]
        except KeyError:
            raise UnknownUnitSymbolError(name, self.name) from None


__all__ = ["UnitDescriptor", "UnitRow"]
